"""Tests for recipe analysis."""

import pytest

from foodcheck.domain.analysis import NutritionFacts
from foodcheck.services.recipes import (
    EmptyRecipeError,
    RecipeAnalyzer,
    RecipeIngredient,
    per_serving_nutrition,
    unit_factor,
)
from foodcheck.services.scoring import ScoreAggregator
from tests.conftest import make_food

YOGURT = make_food(
    "yogurt",
    allergens=("milk",),
    nutrition=NutritionFacts.from_amounts(
        calories=200,
        protein=10,
        carbohydrates=30,
        fat=4,
        fiber=4,
        sugar=6,
        sodium_mg=100,
    ),
)
GRANOLA = make_food(
    "granola",
    allergens=("milk", "wheat"),
    nutrition=NutritionFacts.from_amounts(
        calories=400,
        protein=8,
        fat=20,
        saturated_fat=4,
        sugar=8,
        sodium_mg=200,
        vitamins=["Iron"],
    ),
)


def _ingredients() -> list[RecipeIngredient]:
    return [
        RecipeIngredient(food=YOGURT, amount=2),
        RecipeIngredient(food=GRANOLA, amount=1, unit="Cup"),
    ]


def test_unit_factors() -> None:
    assert unit_factor("cup") == 0.25
    assert unit_factor(" TBSP ") == 0.0625
    assert unit_factor("tsp") == 0.02
    assert unit_factor("serving") == 1.0
    assert unit_factor("handful") == 1.0


def test_per_serving_nutrition_divides_totals() -> None:
    facts = per_serving_nutrition(_ingredients(), servings=2)

    assert facts.calories == 250
    assert facts.protein.amount == 11
    assert facts.total_carbohydrates.amount == 30
    assert facts.total_fat.amount == 6.5
    assert facts.saturated_fat.amount == 0.5
    assert facts.dietary_fiber.amount == 4
    assert facts.total_sugars.amount == 7
    assert facts.sodium.amount == 125
    assert facts.vitamins == ["Iron"]


def test_recipe_analysis_scores_homemade_dish() -> None:
    analyzer = RecipeAnalyzer(ScoreAggregator())

    result = analyzer.analyze("Parfait", 2, _ingredients())

    assert result.product_name == "Parfait"
    assert result.health.score == 65
    assert result.taste.score == 100
    assert result.consumer.score == 75
    assert result.overall.vish_score == 80
    assert result.overall.grade == "B"
    assert result.health.allergens == ["milk", "wheat"]


def test_recipe_name_defaults() -> None:
    analyzer = RecipeAnalyzer(ScoreAggregator())

    result = analyzer.analyze("  ", 0, _ingredients())

    assert result.product_name == "My Recipe"
    assert result.overall.summary == "Recipe with 2 ingredients, 1 servings"


def test_recipe_without_usable_ingredients_is_rejected() -> None:
    analyzer = RecipeAnalyzer(ScoreAggregator())

    with pytest.raises(EmptyRecipeError):
        analyzer.analyze(
            "Nothing",
            1,
            [
                RecipeIngredient(food=None, amount=1),
                RecipeIngredient(food=YOGURT, amount=0),
            ],
        )
