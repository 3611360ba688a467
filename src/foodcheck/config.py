"""Application configuration."""

import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

STORAGE_BACKENDS = ("memory", "supabase")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str
    openai_model: str = "gpt-4o"
    storage_backend: str = "memory"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_table: str = "foodcheck_kv"
    history_storage_key: str = "foodcheck_analysis_history"
    history_retention_cap: int = 100
    timezone: str = "UTC"
    eco_threshold: int = 70
    openfoodfacts_enabled: bool = True
    openfoodfacts_base_url: str = "https://world.openfoodfacts.org"
    product_cache_ttl_seconds: int = 86400
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("storage_backend")
    @classmethod
    def _known_backend(cls, value: str) -> str:
        backend = value.strip().lower()
        if backend not in STORAGE_BACKENDS:
            raise ValueError(f"storage_backend must be one of {STORAGE_BACKENDS}")
        return backend

    @field_validator("history_retention_cap")
    @classmethod
    def _positive_cap(cls, value: int) -> int:
        if value < 1:
            raise ValueError("history_retention_cap must be at least 1")
        return value

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone {value!r}") from exc
        return value
