"""Tokenized catalog search with filters and pagination."""

from collections.abc import Sequence
from dataclasses import dataclass

from foodcheck.domain.catalog import FoodItem
from foodcheck.services.catalog import CatalogRepository


@dataclass(frozen=True)
class SearchFilters:
    """Optional constraints applied after text matching."""

    category: str | None = None
    min_score: int | None = None
    max_score: int | None = None
    dietary_tags: Sequence[str] = ()
    exclude_allergens: Sequence[str] = ()
    min_environmental_score: int | None = None


@dataclass(frozen=True)
class SearchPage:
    """One page of search results."""

    items: list[FoodItem]
    total: int
    page: int
    has_more: bool


def tokenize(query: str | None) -> list[str]:
    """Lower-case a query and split it into non-empty tokens."""
    if not query:
        return []
    return query.lower().split()


@dataclass
class SearchService:
    """Searches the catalog without modifying or reordering it."""

    repository: CatalogRepository

    def search(
        self,
        query: str | None,
        page: int = 1,
        page_size: int = 20,
        filters: SearchFilters | None = None,
    ) -> SearchPage:
        """Return a page of entries matching every query token and filter."""
        page = max(page, 1)
        page_size = max(page_size, 1)
        tokens = tokenize(query)
        matched = [
            item
            for item in self.repository.list_items()
            if _matches_tokens(item, tokens) and _passes_filters(item, filters)
        ]
        total = len(matched)
        offset = (page - 1) * page_size
        return SearchPage(
            items=matched[offset : offset + page_size],
            total=total,
            page=page,
            has_more=offset + page_size < total,
        )


def _searchable_fields(item: FoodItem) -> list[str]:
    fields = [item.name, item.brand or "", item.category]
    fields.extend(item.ingredients)
    fields.extend(item.dietary_tags)
    return [value.lower() for value in fields if value]


def _matches_tokens(item: FoodItem, tokens: list[str]) -> bool:
    if not tokens:
        return True
    fields = _searchable_fields(item)
    return all(any(token in value for value in fields) for token in tokens)


def _folded(values: Sequence[str]) -> set[str]:
    return {value.casefold() for value in values if value}


def _passes_filters(  # noqa: PLR0911
    item: FoodItem, filters: SearchFilters | None
) -> bool:
    if filters is None:
        return True
    if filters.category and item.category.casefold() != filters.category.casefold():
        return False
    if filters.min_score is not None and item.vish_score < filters.min_score:
        return False
    if filters.max_score is not None and item.vish_score > filters.max_score:
        return False
    wanted_tags = _folded(filters.dietary_tags)
    if wanted_tags and not wanted_tags & _folded(item.dietary_tags):
        return False
    banned = _folded(filters.exclude_allergens)
    if banned and banned & _folded(item.allergens):
        return False
    return not (
        filters.min_environmental_score is not None
        and item.environmental_score < filters.min_environmental_score
    )
