"""Read-only food catalog and its derived views."""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Protocol

from foodcheck.domain.catalog import FoodItem

_logger = logging.getLogger(__name__)

HEALTHY_THRESHOLD = 70
MODERATE_THRESHOLD = 50
SCORE_BANDS = ("healthy", "moderate", "unhealthy")


class CatalogRepository(Protocol):
    """Source of catalog entries."""

    def list_items(self) -> list[FoodItem]:
        """Return every entry in canonical order."""

    def get_item(self, item_id: str) -> FoodItem | None:
        """Return an entry by id, if present."""


class InMemoryCatalogRepository(CatalogRepository):
    """Catalog held in memory, seeded once at construction."""

    def __init__(self, items: Iterable[FoodItem]) -> None:
        self._items: tuple[FoodItem, ...] = tuple(items)
        self._by_id: dict[str, FoodItem] = {}
        for item in self._items:
            if item.id in self._by_id:
                raise ValueError(f"Duplicate catalog id: {item.id}")
            self._by_id[item.id] = item
        _logger.info("Catalog seeded with %s entries", len(self._items))

    def list_items(self) -> list[FoodItem]:
        """Return every entry in canonical order."""
        return list(self._items)

    def get_item(self, item_id: str) -> FoodItem | None:
        """Return an entry by id, if present."""
        return self._by_id.get(item_id)


def score_band(vish_score: int) -> str:
    """Classify a Vish Score as healthy, moderate or unhealthy."""
    if vish_score >= HEALTHY_THRESHOLD:
        return "healthy"
    if vish_score >= MODERATE_THRESHOLD:
        return "moderate"
    return "unhealthy"


@dataclass
class CatalogService:
    """Read-only projections over the canonical catalog entries."""

    repository: CatalogRepository
    eco_threshold: int = 70

    def project(
        self,
        predicate: Callable[[FoodItem], bool] | None = None,
        sort_key: Callable[[FoodItem], float] | None = None,
        *,
        descending: bool = True,
        limit: int | None = None,
    ) -> list[FoodItem]:
        """Filter, sort and limit catalog entries without copying them."""
        items = self.repository.list_items()
        if predicate is not None:
            items = [item for item in items if predicate(item)]
        if sort_key is not None:
            items = sorted(items, key=sort_key, reverse=descending)
        if limit is not None:
            items = items[: max(limit, 0)]
        return items

    def get_item(self, item_id: str) -> FoodItem | None:
        """Return an entry by id."""
        return self.repository.get_item(item_id)

    def find_by_barcode(self, barcode: str) -> FoodItem | None:
        """Return the entry whose barcode matches exactly, if any."""
        matches = self.project(lambda item: item.barcode == barcode, limit=1)
        return matches[0] if matches else None

    def popular(self, limit: int = 10) -> list[FoodItem]:
        """Entries ranked by consumer score."""
        return self.project(sort_key=lambda item: item.consumer_score, limit=limit)

    def healthy(self, limit: int = 10) -> list[FoodItem]:
        """Entries with a Vish Score of at least 70, best first."""
        return self.project(
            lambda item: item.vish_score >= HEALTHY_THRESHOLD,
            lambda item: item.vish_score,
            limit=limit,
        )

    def unhealthy(self, limit: int = 10) -> list[FoodItem]:
        """Entries below a Vish Score of 50, worst first."""
        return self.project(
            lambda item: item.vish_score < MODERATE_THRESHOLD,
            lambda item: item.vish_score,
            descending=False,
            limit=limit,
        )

    def by_score_band(self, band: str, limit: int = 20) -> list[FoodItem]:
        """Entries in a score band; unhealthy ones are listed worst first."""
        if band not in SCORE_BANDS:
            return []
        return self.project(
            lambda item: score_band(item.vish_score) == band,
            lambda item: item.vish_score,
            descending=band != "unhealthy",
            limit=limit,
        )

    def by_category(self, category: str, limit: int | None = None) -> list[FoodItem]:
        """Entries in a category, compared case-insensitively."""
        wanted = category.casefold()
        return self.project(
            lambda item: item.category.casefold() == wanted, limit=limit
        )

    def by_dietary_tag(self, tag: str, limit: int | None = None) -> list[FoodItem]:
        """Entries carrying a dietary tag."""
        wanted = tag.casefold()
        return self.project(
            lambda item: wanted in {t.casefold() for t in item.dietary_tags},
            limit=limit,
        )

    def by_origin(self, origin: str, limit: int | None = None) -> list[FoodItem]:
        """Entries from a country or region of origin."""
        wanted = origin.casefold()
        return self.project(
            lambda item: (item.metadata.origin or "").casefold() == wanted,
            limit=limit,
        )

    def eco_friendly(
        self, limit: int = 10, threshold: int | None = None
    ) -> list[FoodItem]:
        """Entries at or above the environmental threshold, greenest first."""
        minimum = self.eco_threshold if threshold is None else threshold
        return self.project(
            lambda item: item.environmental_score >= minimum,
            lambda item: item.environmental_score,
            limit=limit,
        )

    def mood_boosters(self, limit: int = 10) -> list[FoodItem]:
        """Entries ranked by mood impact."""
        return self.project(
            sort_key=lambda item: item.metadata.mood_impact, limit=limit
        )

    def best(self, limit: int = 5) -> list[FoodItem]:
        """Highest Vish Scores first."""
        return self.project(sort_key=lambda item: item.vish_score, limit=limit)

    def worst(self, limit: int = 5) -> list[FoodItem]:
        """Lowest Vish Scores first."""
        return self.project(
            sort_key=lambda item: item.vish_score, descending=False, limit=limit
        )

    def categories(self) -> list[str]:
        """Distinct categories in catalog order."""
        return list(dict.fromkeys(item.category for item in self.project()))

    def summary(self) -> dict[str, int]:
        """Counts of entries per score band."""
        items = self.project()
        counts = {band: 0 for band in SCORE_BANDS}
        for item in items:
            counts[score_band(item.vish_score)] += 1
        return {"total": len(items), **counts}
