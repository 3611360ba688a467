"""Tests for heuristic food scoring."""

from foodcheck.domain.analysis import NutritionFacts
from foodcheck.services.food_scoring import (
    consumer_score,
    nutrition_score,
    taste_score,
)


def test_nutrition_score_rewards_protein_and_fiber() -> None:
    facts = NutritionFacts.from_amounts(calories=90, protein=20, fiber=10)

    assert nutrition_score(facts) == 100


def test_nutrition_score_penalises_junk_food() -> None:
    facts = NutritionFacts.from_amounts(
        calories=550, sugar=35, sodium_mg=1200, saturated_fat=16
    )

    assert nutrition_score(facts) == 0


def test_nutrition_score_mixed_profile() -> None:
    facts = NutritionFacts.from_amounts(
        calories=150, protein=5, fiber=3, sugar=12, sodium_mg=450, saturated_fat=2
    )

    assert nutrition_score(facts) == 50


def test_taste_score_uses_base_and_category() -> None:
    empty = NutritionFacts()

    assert taste_score(empty) == 50
    assert taste_score(empty, base=60) == 60
    assert taste_score(empty, category="Desserts") == 60
    assert taste_score(empty, category="Potato Chips") == 58
    assert taste_score(empty, brand="Doritos") == 65


def test_taste_score_balanced_snack_is_capped() -> None:
    facts = NutritionFacts.from_amounts(sugar=10, fat=15, sodium_mg=400, protein=12)

    assert taste_score(facts) == 100


def test_consumer_score_brand_recognition() -> None:
    assert consumer_score() == 50
    assert consumer_score(brand="Local Farm", category="Produce", name="Carrots") == 55
    assert consumer_score(brand="Nabisco", category="Desserts", name="Oreo") == 95
    assert (
        consumer_score(brand="McDonald's", category="Fast Food", name="Big Mac") == 100
    )


def test_consumer_score_is_deterministic() -> None:
    scores = {consumer_score(brand="Tango", category="Beverages") for _ in range(5)}

    assert scores == {63}
