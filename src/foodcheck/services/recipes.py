"""Local analysis of home recipes built from catalog ingredients."""

from collections.abc import Sequence
from dataclasses import dataclass

from foodcheck.domain.analysis import AnalysisResult, NutritionFacts
from foodcheck.domain.catalog import FoodItem
from foodcheck.services.food_scoring import nutrition_score, taste_score
from foodcheck.services.scoring import ScoreAggregator

UNIT_FACTORS = {"cup": 0.25, "tbsp": 0.0625, "tsp": 0.02}
HOMEMADE_TASTE_BASE = 60
HOMEMADE_CONSUMER_SCORE = 75


class EmptyRecipeError(ValueError):
    """Raised when a recipe has no usable ingredient."""


@dataclass(frozen=True)
class RecipeIngredient:
    """A catalog food used in a recipe."""

    food: FoodItem | None
    amount: float
    unit: str = "serving"


@dataclass
class RecipeAnalyzer:
    """Scores recipes with the same conventions as label analyses."""

    aggregator: ScoreAggregator

    def analyze(
        self,
        name: str,
        servings: int,
        ingredients: Sequence[RecipeIngredient],
    ) -> AnalysisResult:
        """Sum ingredient nutrition per serving and score the recipe."""
        usable = [item for item in ingredients if item.food and item.amount > 0]
        if not usable:
            raise EmptyRecipeError(
                "Add at least one ingredient with a food and a positive amount"
            )
        per_serving = per_serving_nutrition(usable, max(servings, 1))
        health = nutrition_score(per_serving)
        taste = taste_score(per_serving, base=HOMEMADE_TASTE_BASE)
        return self.aggregator.validate(
            {
                "productName": name.strip() or "My Recipe",
                "nutrition": per_serving.model_dump(),
                "health": {
                    "score": health,
                    "allergens": _allergens(usable),
                },
                "taste": {"score": taste, "profile": ["Homemade"]},
                "consumer": {
                    "score": HOMEMADE_CONSUMER_SCORE,
                    "satisfaction": "Homemade",
                },
                "overall": {
                    "summary": (
                        f"Recipe with {len(usable)} ingredients, "
                        f"{max(servings, 1)} servings"
                    )
                },
            }
        )


def unit_factor(unit: str) -> float:
    """Portion multiplier for a measuring unit."""
    return UNIT_FACTORS.get(unit.strip().lower(), 1.0)


def per_serving_nutrition(
    ingredients: Sequence[RecipeIngredient], servings: int
) -> NutritionFacts:
    """Total nutrition of the ingredients divided by the serving count."""
    totals = dict.fromkeys(
        (
            "calories",
            "protein",
            "carbohydrates",
            "fat",
            "saturated_fat",
            "fiber",
            "sugar",
            "sodium_mg",
            "cholesterol_mg",
        ),
        0.0,
    )
    vitamins: list[str] = []
    for ingredient in ingredients:
        food = ingredient.food
        if food is None:
            continue
        factor = ingredient.amount * unit_factor(ingredient.unit)
        facts = food.nutrition
        totals["calories"] += facts.calories * factor
        totals["protein"] += facts.protein.amount * factor
        totals["carbohydrates"] += facts.total_carbohydrates.amount * factor
        totals["fat"] += facts.total_fat.amount * factor
        totals["saturated_fat"] += facts.saturated_fat.amount * factor
        totals["fiber"] += facts.dietary_fiber.amount * factor
        totals["sugar"] += facts.total_sugars.amount * factor
        totals["sodium_mg"] += facts.sodium.amount * factor
        totals["cholesterol_mg"] += facts.cholesterol.amount * factor
        vitamins.extend(v for v in facts.vitamins if v not in vitamins)

    per_serving = {key: value / servings for key, value in totals.items()}
    return NutritionFacts.from_amounts(
        calories=round(per_serving.pop("calories")),
        sodium_mg=round(per_serving.pop("sodium_mg")),
        **{key: round(value, 1) for key, value in per_serving.items()},
        vitamins=vitamins,
    )


def _allergens(ingredients: Sequence[RecipeIngredient]) -> list[str]:
    found: list[str] = []
    for ingredient in ingredients:
        if ingredient.food is None:
            continue
        found.extend(a for a in ingredient.food.allergens if a not in found)
    return found
