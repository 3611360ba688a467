"""Tests for catalog views."""

import pytest

from foodcheck.seed import default_catalog
from foodcheck.services.catalog import (
    CatalogService,
    InMemoryCatalogRepository,
    score_band,
)
from foodcheck.services.scoring import grade_for
from tests.conftest import make_food


def _service(*items) -> CatalogService:
    return CatalogService(InMemoryCatalogRepository(items))


def test_every_seed_entry_keeps_vish_invariant() -> None:
    for item in default_catalog():
        total = item.health_score + item.taste_score + item.consumer_score
        expected = round(total / 3)
        assert item.vish_score == expected


def test_seed_ids_and_barcodes_are_unique() -> None:
    items = default_catalog()
    barcodes = [item.barcode for item in items if item.barcode]

    assert len({item.id for item in items}) == len(items)
    assert len(set(barcodes)) == len(barcodes)


def test_quinoa_bowl_scores_an_a(catalog_service: CatalogService) -> None:
    bowl = catalog_service.get_item("healthy_quinoa_power_bowl")

    assert bowl is not None
    assert bowl.vish_score == 92
    assert grade_for(bowl.vish_score) == "A"
    assert bowl.environmental_score == 90


def test_food_item_rejects_out_of_range_scores() -> None:
    with pytest.raises(ValueError, match="health_score"):
        make_food("broken", health=101)


def test_repository_rejects_duplicate_ids() -> None:
    with pytest.raises(ValueError, match="Duplicate"):
        InMemoryCatalogRepository([make_food("dup"), make_food("dup")])


def test_views_return_canonical_entries(catalog_service: CatalogService) -> None:
    canonical = {item.id: item for item in catalog_service.project()}

    for item in catalog_service.popular(limit=5) + catalog_service.eco_friendly():
        assert item is canonical[item.id]


def test_popular_sorts_by_consumer_score_with_stable_ties() -> None:
    service = _service(
        make_food("a", consumer=60),
        make_food("b", consumer=90),
        make_food("c", consumer=60),
    )

    assert [item.id for item in service.popular()] == ["b", "a", "c"]


def test_healthy_and_unhealthy_views() -> None:
    service = _service(
        make_food("great", health=90, taste=90, consumer=90),
        make_food("fine", health=60, taste=60, consumer=60),
        make_food("good", health=70, taste=70, consumer=70),
        make_food("bad", health=10, taste=40, consumer=40),
        make_food("worse", health=5, taste=5, consumer=5),
    )

    assert [item.id for item in service.healthy()] == ["great", "good"]
    assert [item.id for item in service.unhealthy()] == ["worse", "bad"]
    assert [item.id for item in service.by_score_band("moderate")] == ["fine"]
    assert service.by_score_band("amazing") == []
    assert service.summary() == {
        "total": 5,
        "healthy": 2,
        "moderate": 1,
        "unhealthy": 2,
    }


def test_score_band_boundaries() -> None:
    assert score_band(70) == "healthy"
    assert score_band(69) == "moderate"
    assert score_band(50) == "moderate"
    assert score_band(49) == "unhealthy"


def test_eco_friendly_uses_threshold() -> None:
    service = CatalogService(
        InMemoryCatalogRepository(
            [
                make_food("low", environmental=40),
                make_food("edge", environmental=70),
                make_food("high", environmental=95),
            ]
        ),
        eco_threshold=70,
    )

    assert [item.id for item in service.eco_friendly()] == ["high", "edge"]
    assert [item.id for item in service.eco_friendly(threshold=30)] == [
        "high",
        "edge",
        "low",
    ]


def test_lookups_by_attribute() -> None:
    service = _service(
        make_food("a", category="Dairy", dietary_tags=("Vegan",), origin="Greece"),
        make_food("b", category="Snacks", dietary_tags=("keto",), origin="USA"),
        make_food("c", category="dairy", barcode="123", mood_impact=90),
    )

    assert [item.id for item in service.by_category("DAIRY")] == ["a", "c"]
    assert [item.id for item in service.by_dietary_tag("vegan")] == ["a"]
    assert [item.id for item in service.by_origin("usa")] == ["b"]
    assert service.find_by_barcode("123").id == "c"
    assert service.find_by_barcode("999") is None
    assert service.mood_boosters(limit=1)[0].id == "c"
    assert service.categories() == ["Dairy", "Snacks", "dairy"]


def test_best_and_worst() -> None:
    service = _service(
        make_food("mid", health=50, taste=50, consumer=50),
        make_food("top", health=90, taste=90, consumer=90),
        make_food("low", health=10, taste=10, consumer=10),
    )

    assert [item.id for item in service.best(limit=2)] == ["top", "mid"]
    assert [item.id for item in service.worst(limit=1)] == ["low"]
