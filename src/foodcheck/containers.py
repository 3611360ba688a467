"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from foodcheck.adapters.openai_analysis_client import OpenAIAnalysisClient
from foodcheck.adapters.openfoodfacts_client import HttpxOpenFoodFactsClient
from foodcheck.adapters.supabase_kv_store import SupabaseKeyValueStore
from foodcheck.config import Settings
from foodcheck.seed import default_catalog
from foodcheck.services.analysis import AnalysisService
from foodcheck.services.cache import InMemoryCache
from foodcheck.services.catalog import CatalogService, InMemoryCatalogRepository
from foodcheck.services.history import HistoryService
from foodcheck.services.products import ProductLookupService
from foodcheck.services.recipes import RecipeAnalyzer
from foodcheck.services.scoring import ScoreAggregator
from foodcheck.services.search import SearchService
from foodcheck.services.stats import StatsService
from foodcheck.services.storage import InMemoryKeyValueStore, KeyValueStore
from foodcheck.services.user_lists import UserListService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: CatalogService
    search_service: SearchService
    aggregator: ScoreAggregator
    analysis_service: AnalysisService
    recipe_analyzer: RecipeAnalyzer
    history_service: HistoryService
    stats_service: StatsService
    product_service: ProductLookupService
    user_list_service: UserListService
    close_resources: Callable[[], Awaitable[None]]


def build_store(settings: Settings) -> KeyValueStore:
    """Key-value store for the configured backend."""
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "supabase_url and supabase_service_key are required "
                "for the supabase storage backend"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseKeyValueStore(client, table=settings.supabase_table)
    return InMemoryKeyValueStore()


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = build_store(resolved_settings)
    catalog_repository = InMemoryCatalogRepository(default_catalog())
    catalog_service = CatalogService(
        catalog_repository, eco_threshold=resolved_settings.eco_threshold
    )
    aggregator = ScoreAggregator()
    openai_client = OpenAIAnalysisClient.create(resolved_settings.openai_api_key)
    off_client = (
        HttpxOpenFoodFactsClient.create(resolved_settings.openfoodfacts_base_url)
        if resolved_settings.openfoodfacts_enabled
        else None
    )
    history_service = HistoryService(
        store,
        storage_key=resolved_settings.history_storage_key,
        retention_cap=resolved_settings.history_retention_cap,
    )

    async def close_resources() -> None:
        await openai_client.close()
        if off_client is not None:
            await off_client.close()

    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        search_service=SearchService(catalog_repository),
        aggregator=aggregator,
        analysis_service=AnalysisService(
            client=openai_client,
            model=resolved_settings.openai_model,
            aggregator=aggregator,
        ),
        recipe_analyzer=RecipeAnalyzer(aggregator),
        history_service=history_service,
        stats_service=StatsService(
            history_service, timezone_name=resolved_settings.timezone
        ),
        product_service=ProductLookupService(
            catalog=catalog_service,
            client=off_client,
            cache=InMemoryCache(),
            ttl_seconds=resolved_settings.product_cache_ttl_seconds,
        ),
        user_list_service=UserListService(store),
        close_resources=close_resources,
    )
