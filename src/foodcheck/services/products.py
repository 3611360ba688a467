"""Barcode lookup across the catalog and Open Food Facts."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from foodcheck.adapters.openfoodfacts_client import OpenFoodFactsClient
from foodcheck.domain.analysis import UNKNOWN_PRODUCT, NutritionFacts
from foodcheck.domain.catalog import FoodItem, FoodMetadata
from foodcheck.services.cache import Cache
from foodcheck.services.catalog import CatalogService
from foodcheck.services.food_scoring import (
    consumer_score,
    nutrition_score,
    taste_score,
)
from foodcheck.services.scoring import clamp_score

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

_logger = logging.getLogger(__name__)

_LABEL_TAGS = {
    "en:vegan": "vegan",
    "en:vegetarian": "vegetarian",
    "en:no-gluten": "gluten-free",
    "en:gluten-free": "gluten-free",
    "en:organic": "organic",
}
KJ_PER_KCAL = 4.184


@dataclass
class ProductLookupService:
    """Finds products by barcode, preferring the local catalog."""

    catalog: CatalogService
    client: OpenFoodFactsClient | None
    cache: Cache
    ttl_seconds: int = 86400
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def lookup_barcode(self, barcode: str) -> FoodItem | None:
        """Return the product for a barcode, or None when nobody knows it."""
        code = barcode.strip()
        if not code:
            return None
        local = self.catalog.find_by_barcode(code)
        if local is not None:
            return local
        if self.client is None:
            return None

        cache_key = f"off:product:{code}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, FoodItem):
            return cached

        client = self.client
        try:
            payload = await self._call_with_retry(
                lambda: client.get_product(code), action=f"product:{code}"
            )
        except Exception:
            _logger.exception("Open Food Facts lookup failed for barcode %s", code)
            return None

        product = payload.get("product")
        if payload.get("status") != 1 or not isinstance(product, dict):
            _logger.info("Barcode %s not found on Open Food Facts", code)
            return None
        item = product_to_food_item(code, product)
        self.cache.set(cache_key, item, ttl_seconds=self.ttl_seconds)
        return item

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                _logger.warning(
                    "Open Food Facts %s failed (attempt %s/%s): %s",
                    action,
                    attempt,
                    self.retry_attempts + 1,
                    exc,
                )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def product_to_food_item(barcode: str, product: dict[str, object]) -> FoodItem:
    """Convert an Open Food Facts product into a scored catalog entry."""
    nutriments = product.get("nutriments")
    if not isinstance(nutriments, dict):
        nutriments = {}
    nutrition = NutritionFacts.from_amounts(
        calories=_calories(nutriments),
        protein=_amount(nutriments, "proteins_100g"),
        carbohydrates=_amount(nutriments, "carbohydrates_100g"),
        fat=_amount(nutriments, "fat_100g"),
        saturated_fat=_amount(nutriments, "saturated-fat_100g"),
        fiber=_amount(nutriments, "fiber_100g"),
        sugar=_amount(nutriments, "sugars_100g"),
        sodium_mg=_amount(nutriments, "sodium_100g") * 1000,
    )
    name = _text(product.get("product_name")) or UNKNOWN_PRODUCT
    brand = _first(product.get("brands"))
    category = _first(product.get("categories")) or "General"
    eco = product.get("ecoscore_score")
    environmental = (
        clamp_score(eco)
        if isinstance(eco, int | float) and not isinstance(eco, bool)
        else 50
    )
    labels = product.get("labels_tags")
    tags = tuple(
        dict.fromkeys(
            _LABEL_TAGS[tag]
            for tag in (labels if isinstance(labels, list) else [])
            if tag in _LABEL_TAGS
        )
    )
    return FoodItem(
        id=f"off_{barcode}",
        name=name,
        brand=brand,
        category=category,
        barcode=barcode,
        health_score=nutrition_score(nutrition),
        taste_score=taste_score(nutrition, brand=brand, category=category),
        consumer_score=consumer_score(brand=brand, category=category, name=name),
        environmental_score=environmental,
        nutrition=nutrition,
        ingredients=_split(product.get("ingredients_text")),
        allergens=_allergens(product.get("allergens_tags")),
        metadata=FoodMetadata(
            dietary_tags=tags,
            origin=_first(product.get("origins")),
            serving_size=_text(product.get("serving_size")),
        ),
    )


def _calories(nutriments: dict[str, object]) -> float:
    kcal = _amount(nutriments, "energy-kcal_100g")
    if kcal:
        return kcal
    return round(_amount(nutriments, "energy_100g") / KJ_PER_KCAL, 1)


def _amount(nutriments: dict[str, object], key: str) -> float:
    value = nutriments.get(key)
    if isinstance(value, int | float) and not isinstance(value, bool) and value > 0:
        return float(value)
    return 0.0


def _text(value: object) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _split(value: object) -> tuple[str, ...]:
    text = _text(value)
    if text is None:
        return ()
    return tuple(part.strip() for part in text.split(",") if part.strip())


def _first(value: object) -> str | None:
    parts = _split(value)
    return parts[0] if parts else None


def _allergens(value: object) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(
        tag.split(":", 1)[-1].replace("-", " ")
        for tag in value
        if isinstance(tag, str) and tag
    )
