"""Shared test fixtures."""

import json
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from foodcheck.adapters.openfoodfacts_client import OpenFoodFactsClient
from foodcheck.config import Settings
from foodcheck.containers import AppContainer
from foodcheck.domain.analysis import AnalysisResult, NutritionFacts
from foodcheck.domain.catalog import FoodItem, FoodMetadata
from foodcheck.seed import default_catalog
from foodcheck.services.analysis import AnalysisProvider, AnalysisService
from foodcheck.services.cache import InMemoryCache
from foodcheck.services.catalog import CatalogService, InMemoryCatalogRepository
from foodcheck.services.history import HistoryService
from foodcheck.services.products import ProductLookupService
from foodcheck.services.recipes import RecipeAnalyzer
from foodcheck.services.scoring import ScoreAggregator
from foodcheck.services.search import SearchService
from foodcheck.services.stats import StatsService
from foodcheck.services.storage import InMemoryKeyValueStore
from foodcheck.services.user_lists import UserListService

FIXED_NOW = datetime(2026, 10, 17, 12, 0, tzinfo=UTC)


@dataclass
class FakeClock:
    """Controllable clock for services that stamp records."""

    now: datetime = FIXED_NOW

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@dataclass
class FakeAnalysisClient(AnalysisProvider):
    """Fake vision model returning a fixed text response."""

    response_text: str = field(
        default_factory=lambda: (
            "Here is the analysis:\n"
            + json.dumps(
                {
                    "productName": "Crunchy Granola",
                    "nutrition": {"calories": 190, "protein": "4g", "sodium": "95mg"},
                    "health": {"score": 62, "warnings": ["High sugar"]},
                    "taste": {"score": 81, "profile": ["Sweet", "Crunchy"]},
                    "consumer": {"score": 74},
                    "overall": {"vishScore": 99, "summary": "Tasty treat"},
                }
            )
        )
    )
    calls: list[dict[str, str]] = field(default_factory=list)

    async def analyze(self, *, model: str, image_data_url: str, prompt: str) -> str:
        self.calls.append(
            {"model": model, "image_data_url": image_data_url, "prompt": prompt}
        )
        return self.response_text


@dataclass
class FakeOpenFoodFactsClient(OpenFoodFactsClient):
    """Fake Open Food Facts client with in-memory products."""

    products: dict[str, dict[str, object]] = field(default_factory=dict)
    failures: int = 0
    calls: list[str] = field(default_factory=list)

    async def get_product(self, barcode: str) -> dict[str, object]:
        self.calls.append(barcode)
        if self.failures > 0:
            self.failures -= 1
            raise RuntimeError("Open Food Facts unavailable")
        product = self.products.get(barcode)
        if product is None:
            return {"status": 0, "status_verbose": "product not found"}
        return {"status": 1, "code": barcode, "product": product}


def make_food(  # noqa: PLR0913
    item_id: str,
    *,
    name: str | None = None,
    brand: str | None = "Acme",
    category: str = "Snacks",
    health: int = 50,
    taste: int = 50,
    consumer: int = 50,
    environmental: int = 50,
    ingredients: tuple[str, ...] = (),
    allergens: tuple[str, ...] = (),
    dietary_tags: tuple[str, ...] = (),
    origin: str | None = None,
    mood_impact: int = 50,
    barcode: str | None = None,
    nutrition: NutritionFacts | None = None,
) -> FoodItem:
    """Build a catalog entry with neutral defaults."""
    return FoodItem(
        id=item_id,
        name=name or item_id.replace("_", " ").title(),
        brand=brand,
        category=category,
        health_score=health,
        taste_score=taste,
        consumer_score=consumer,
        environmental_score=environmental,
        nutrition=nutrition or NutritionFacts(),
        ingredients=ingredients,
        allergens=allergens,
        barcode=barcode,
        metadata=FoodMetadata(
            dietary_tags=dietary_tags, origin=origin, mood_impact=mood_impact
        ),
    )


def make_analysis(
    health: int, taste: int, consumer: int, name: str = "Test Food"
) -> AnalysisResult:
    """Validated analysis with the given component scores."""
    return ScoreAggregator().validate(
        {
            "productName": name,
            "health": {"score": health},
            "taste": {"score": taste},
            "consumer": {"score": consumer},
        }
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        openai_api_key="openai-key",
        storage_backend="memory",
        openfoodfacts_base_url="https://off.example.test",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def aggregator() -> ScoreAggregator:
    return ScoreAggregator()


@pytest.fixture
def catalog_repository() -> InMemoryCatalogRepository:
    return InMemoryCatalogRepository(default_catalog())


@pytest.fixture
def catalog_service(catalog_repository: InMemoryCatalogRepository) -> CatalogService:
    return CatalogService(catalog_repository)


@pytest.fixture
def history_service(
    store: InMemoryKeyValueStore, clock: FakeClock
) -> HistoryService:
    return HistoryService(store, clock=clock)


@pytest.fixture
def analysis_client() -> FakeAnalysisClient:
    return FakeAnalysisClient()


@pytest.fixture
def off_client() -> FakeOpenFoodFactsClient:
    return FakeOpenFoodFactsClient()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    store: InMemoryKeyValueStore,
    clock: FakeClock,
    aggregator: ScoreAggregator,
    catalog_repository: InMemoryCatalogRepository,
    catalog_service: CatalogService,
    history_service: HistoryService,
    analysis_client: FakeAnalysisClient,
    off_client: FakeOpenFoodFactsClient,
) -> AppContainer:
    closed: list[bool] = []

    async def close_resources() -> None:
        closed.append(True)

    return AppContainer(
        settings=settings,
        catalog_service=catalog_service,
        search_service=SearchService(catalog_repository),
        aggregator=aggregator,
        analysis_service=AnalysisService(
            client=analysis_client,
            model=settings.openai_model,
            aggregator=aggregator,
        ),
        recipe_analyzer=RecipeAnalyzer(aggregator),
        history_service=history_service,
        stats_service=StatsService(history_service, clock=clock),
        product_service=ProductLookupService(
            catalog=catalog_service,
            client=off_client,
            cache=InMemoryCache(clock=clock),
            retry_delay_seconds=0,
        ),
        user_list_service=UserListService(store),
        close_resources=close_resources,
    )


@pytest.fixture
def foodcheck_logs(
    caplog: pytest.LogCaptureFixture,
) -> Iterator[pytest.LogCaptureFixture]:
    """Capture foodcheck records even after configure_logging stops propagation."""
    logger = logging.getLogger("foodcheck")
    logger.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger="foodcheck")
    yield caplog
    logger.removeHandler(caplog.handler)
