"""Heuristic component scores computed from nutrition facts and branding."""

from collections.abc import Sequence

from foodcheck.domain.analysis import NutritionFacts

_POPULAR_TASTE_BRANDS = (
    "doritos",
    "lay's",
    "cheetos",
    "oreo",
    "coca-cola",
    "pepsi",
    "mcdonald's",
    "kfc",
    "burger king",
    "ben jerry",
    "haagen dazs",
    "kit kat",
    "snickers",
    "reese's",
    "hershey's",
    "twix",
    "mars",
    "skittles",
    "starburst",
    "haribo",
    "ferrero rocher",
)

_MEGA_BRANDS = (
    "coca-cola",
    "pepsi",
    "mcdonald's",
    "kfc",
    "burger king",
    "subway",
    "doritos",
    "lay's",
    "cheetos",
    "pringles",
    "oreo",
    "kit kat",
)

_POPULAR_BRANDS = (
    "nestle",
    "unilever",
    "kraft",
    "general mills",
    "kellogg",
    "mars",
    "ferrero",
    "mondelez",
    "danone",
    "campbell",
    "heinz",
    "frito-lay",
    "nabisco",
    "ben jerry",
    "haagen dazs",
    "taco bell",
    "domino's",
    "pizza hut",
    "starbucks",
    "dunkin",
    "hershey's",
    "snickers",
    "reese's",
    "twix",
    "skittles",
    "haribo",
)

_ICONIC_PRODUCTS = (
    "big mac",
    "whopper",
    "coca-cola",
    "pepsi",
    "oreo",
    "doritos",
    "cheerios",
    "frosted flakes",
    "kit kat",
    "snickers",
    "reese's",
    "twix",
    "skittles",
    "starburst",
    "haribo",
    "ferrero rocher",
)

# (minimum amount, points), checked from the highest tier down.
_PROTEIN_BONUS = ((20, 20), (15, 15), (10, 10), (5, 5))
_FIBER_BONUS = ((10, 20), (5, 15), (3, 10), (1, 5))
_SUGAR_PENALTY = ((30, 25), (20, 20), (15, 15), (10, 10), (5, 5))
_SODIUM_PENALTY = ((1000, 25), (800, 20), (600, 15), (400, 10), (200, 5))
_SATURATED_FAT_PENALTY = ((15, 20), (10, 15), (7, 10), (5, 5))
_CALORIE_PENALTY = ((500, 15), (400, 10), (300, 5))


def _clamp(score: float) -> int:
    return max(0, min(100, round(score)))


def _tier(value: float, tiers: Sequence[tuple[float, int]]) -> int:
    for minimum, points in tiers:
        if value >= minimum:
            return points
    return 0


def _contains_any(text: str | None, needles: Sequence[str]) -> bool:
    if not text:
        return False
    lowered = text.lower()
    return any(needle in lowered for needle in needles)


def nutrition_score(nutrition: NutritionFacts) -> int:
    """Score nutritional quality, rewarding protein and fiber."""
    calories = nutrition.calories
    score = 50
    score += _tier(nutrition.protein.amount, _PROTEIN_BONUS)
    score += _tier(nutrition.dietary_fiber.amount, _FIBER_BONUS)
    if calories <= 100:  # noqa: PLR2004
        score += 10
    elif calories <= 200:  # noqa: PLR2004
        score += 5
    score -= _tier(nutrition.total_sugars.amount, _SUGAR_PENALTY)
    score -= _tier(nutrition.sodium.amount, _SODIUM_PENALTY)
    score -= _tier(nutrition.saturated_fat.amount, _SATURATED_FAT_PENALTY)
    score -= _tier(calories, _CALORIE_PENALTY)
    return _clamp(score)


def taste_score(  # noqa: PLR0912
    nutrition: NutritionFacts,
    brand: str | None = None,
    category: str | None = None,
    base: int = 50,
) -> int:
    """Score expected taste from sugar, fat, salt and brand appeal."""
    sugar = nutrition.total_sugars.amount
    fat = nutrition.total_fat.amount
    sodium = nutrition.sodium.amount
    protein = nutrition.protein.amount
    score = base

    if 5 <= sugar <= 15:  # noqa: PLR2004
        score += 20
    elif 15 < sugar <= 25:  # noqa: PLR2004
        score += 15
    elif sugar > 25:  # noqa: PLR2004
        score += 10

    if 8 <= fat <= 20:  # noqa: PLR2004
        score += 20
    elif 20 < fat <= 30:  # noqa: PLR2004
        score += 15
    elif 5 <= fat < 8:  # noqa: PLR2004
        score += 10
    elif fat > 30:  # noqa: PLR2004
        score += 5

    if 200 <= sodium <= 600:  # noqa: PLR2004
        score += 15
    elif 600 < sodium <= 1000:  # noqa: PLR2004
        score += 10
    elif 100 <= sodium < 200:  # noqa: PLR2004
        score += 5
    elif sodium > 1000:  # noqa: PLR2004
        score -= 5

    if protein >= 10:  # noqa: PLR2004
        score += 10
    elif protein >= 5:  # noqa: PLR2004
        score += 5

    if _contains_any(brand, _POPULAR_TASTE_BRANDS):
        score += 15

    if _contains_any(category, ("dessert", "ice cream", "candy")):
        score += 10
    elif _contains_any(category, ("snack", "chip")):
        score += 8
    elif _contains_any(category, ("beverage", "soda")):
        score += 5
    return _clamp(score)


def consumer_score(
    brand: str | None = None,
    category: str | None = None,
    name: str | None = None,
) -> int:
    """Score consumer appeal from brand recognition and category."""
    score = 50
    if brand:
        if _contains_any(brand, _MEGA_BRANDS):
            score += 25
        elif _contains_any(brand, _POPULAR_BRANDS):
            score += 15
        else:
            score += 5

    if _contains_any(name, _ICONIC_PRODUCTS):
        score += 20

    if _contains_any(category, ("fast food", "pizza")):
        score += 15
    elif _contains_any(category, ("snack", "chip")):
        score += 12
    elif _contains_any(category, ("dessert", "ice cream", "candy")):
        score += 10
    elif _contains_any(category, ("beverage", "soda")):
        score += 8
    elif _contains_any(category, ("breakfast", "cereal")):
        score += 6
    return _clamp(score)
