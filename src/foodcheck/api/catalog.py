"""Catalog endpoints: search, views and barcode lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, status

from foodcheck.services.search import SearchFilters

if TYPE_CHECKING:
    from foodcheck.containers import AppContainer
    from foodcheck.domain.catalog import FoodItem

router = APIRouter(prefix="/catalog", tags=["catalog"])

_VIEWS = {
    "popular": "popular",
    "healthy": "healthy",
    "unhealthy": "unhealthy",
    "eco-friendly": "eco_friendly",
    "mood-boosters": "mood_boosters",
    "best": "best",
    "worst": "worst",
}


@router.get("/search")
async def search_catalog(  # noqa: PLR0913
    request: Request,
    q: str = "",
    page: int = 1,
    page_size: int = 20,
    category: str | None = None,
    min_score: int | None = None,
    max_score: int | None = None,
    tag: list[str] = Query(default=[]),  # noqa: B008
    exclude_allergen: list[str] = Query(default=[]),  # noqa: B008
    min_environmental_score: int | None = None,
) -> dict[str, object]:
    """Search the catalog with optional filters."""
    container: AppContainer = request.app.state.container
    result = container.search_service.search(
        q,
        page=page,
        page_size=page_size,
        filters=SearchFilters(
            category=category,
            min_score=min_score,
            max_score=max_score,
            dietary_tags=tuple(tag),
            exclude_allergens=tuple(exclude_allergen),
            min_environmental_score=min_environmental_score,
        ),
    )
    return {
        "items": [serialize_food(item) for item in result.items],
        "total": result.total,
        "page": result.page,
        "has_more": result.has_more,
    }


@router.get("/summary")
async def catalog_summary(request: Request) -> dict[str, int]:
    """Entry counts per score band."""
    container: AppContainer = request.app.state.container
    return container.catalog_service.summary()


@router.get("/categories")
async def list_categories(request: Request) -> dict[str, list[str]]:
    container: AppContainer = request.app.state.container
    return {"categories": container.catalog_service.categories()}


@router.get("/categories/{category}")
async def items_in_category(category: str, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    items = container.catalog_service.by_category(category)
    return {"items": [serialize_food(item) for item in items]}


@router.get("/tags/{tag}")
async def items_with_tag(tag: str, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    items = container.catalog_service.by_dietary_tag(tag)
    return {"items": [serialize_food(item) for item in items]}


@router.get("/bands/{band}")
async def items_in_band(
    band: str, request: Request, limit: int = 20
) -> dict[str, object]:
    """Entries in the healthy, moderate or unhealthy band."""
    container: AppContainer = request.app.state.container
    items = container.catalog_service.by_score_band(band, limit=limit)
    return {"items": [serialize_food(item) for item in items]}


@router.get("/views/{view}")
async def catalog_view(
    view: str, request: Request, limit: int = 10
) -> dict[str, object]:
    """Ranked catalog view such as popular or eco-friendly."""
    method_name = _VIEWS.get(view)
    if method_name is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    container: AppContainer = request.app.state.container
    items = getattr(container.catalog_service, method_name)(limit=limit)
    return {"items": [serialize_food(item) for item in items]}


@router.get("/items/{item_id}")
async def get_item(item_id: str, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    item = container.catalog_service.get_item(item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_food(item)


@router.get("/barcode/{barcode}")
async def lookup_barcode(barcode: str, request: Request) -> dict[str, object]:
    """Find a product by barcode in the catalog or on Open Food Facts."""
    container: AppContainer = request.app.state.container
    item = await container.product_service.lookup_barcode(barcode)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_food(item)


def serialize_food(item: FoodItem) -> dict[str, object]:
    """JSON-ready view of a catalog entry."""
    metadata = item.metadata
    return {
        "id": item.id,
        "name": item.name,
        "brand": item.brand,
        "category": item.category,
        "barcode": item.barcode,
        "health_score": item.health_score,
        "taste_score": item.taste_score,
        "consumer_score": item.consumer_score,
        "environmental_score": item.environmental_score,
        "vish_score": item.vish_score,
        "nutrition": item.nutrition.model_dump(mode="json"),
        "ingredients": list(item.ingredients),
        "allergens": list(item.allergens),
        "metadata": {
            "certifications": list(metadata.certifications),
            "price_range": metadata.price_range,
            "dietary_tags": list(metadata.dietary_tags),
            "origin": metadata.origin,
            "mood_impact": metadata.mood_impact,
            "serving_size": metadata.serving_size,
        },
    }
