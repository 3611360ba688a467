"""Tests for container wiring."""

import asyncio

import pytest
from pydantic import ValidationError

from foodcheck.adapters.supabase_kv_store import SupabaseKeyValueStore
from foodcheck.config import Settings
from foodcheck.containers import build_container, build_store
from foodcheck.services.storage import InMemoryKeyValueStore


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.search_service.search("quinoa bowl").total == 1
    assert isinstance(container.history_service.store, InMemoryKeyValueStore)
    assert container.user_list_service.store is container.history_service.store
    assert container.product_service.client is not None
    asyncio.run(container.close_resources())


def test_build_container_without_open_food_facts(settings: Settings) -> None:
    container = build_container(
        settings.model_copy(update={"openfoodfacts_enabled": False})
    )

    assert container.product_service.client is None
    asyncio.run(container.close_resources())


def test_supabase_backend_requires_credentials(settings: Settings) -> None:
    with pytest.raises(ValueError, match="supabase_url"):
        build_store(settings.model_copy(update={"storage_backend": "supabase"}))


def test_supabase_backend_builds_supabase_store(
    settings: Settings, monkeypatch: pytest.MonkeyPatch
) -> None:
    created: list[tuple[str, str]] = []

    def fake_create_client(url: str, key: str) -> object:
        created.append((url, key))
        return object()

    monkeypatch.setattr("foodcheck.containers.create_client", fake_create_client)
    store = build_store(
        settings.model_copy(
            update={
                "storage_backend": "supabase",
                "supabase_url": "https://example.supabase.co",
                "supabase_service_key": "service-key",
            }
        )
    )

    assert isinstance(store, SupabaseKeyValueStore)
    assert created == [("https://example.supabase.co", "service-key")]


def test_settings_reject_unknown_backend() -> None:
    with pytest.raises(ValidationError):
        Settings(openai_api_key="key", storage_backend="redis")
    with pytest.raises(ValidationError):
        Settings(openai_api_key="key", history_retention_cap=0)


def test_settings_reject_unknown_timezone() -> None:
    with pytest.raises(ValidationError, match="timezone"):
        Settings(openai_api_key="key", timezone="Mars/Base")

    assert Settings(openai_api_key="key", timezone="Europe/Berlin").timezone == (
        "Europe/Berlin"
    )
