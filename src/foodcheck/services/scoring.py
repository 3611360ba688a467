"""Validation, defaulting and grading of raw analysis payloads."""

import json
import logging
import math
import re
from collections.abc import Mapping

from foodcheck.domain.analysis import (
    DEFAULT_SCORE,
    PLACEHOLDER_TEXT,
    UNKNOWN_PRODUCT,
    AnalysisResult,
    ConsumerAssessment,
    HealthAssessment,
    Nutrient,
    NutritionFacts,
    OverallAssessment,
    TasteAssessment,
)

_logger = logging.getLogger(__name__)

GRADE_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
)
FAILING_GRADE = "F"

# field name -> (accepted payload keys, default unit)
_NUTRIENT_FIELDS: dict[str, tuple[tuple[str, ...], str]] = {
    "total_fat": (("totalFat", "total_fat", "fat"), "g"),
    "saturated_fat": (("saturatedFat", "saturated_fat"), "g"),
    "trans_fat": (("transFat", "trans_fat"), "g"),
    "cholesterol": (("cholesterol",), "mg"),
    "sodium": (("sodium",), "mg"),
    "total_carbohydrates": (
        ("totalCarbohydrates", "total_carbohydrates", "carbohydrates"),
        "g",
    ),
    "dietary_fiber": (("dietaryFiber", "dietary_fiber", "fiber"), "g"),
    "total_sugars": (("totalSugars", "total_sugars", "sugars", "sugar"), "g"),
    "added_sugars": (("addedSugars", "added_sugars"), "g"),
    "protein": (("protein",), "g"),
}

_QUANTITY_PATTERN = re.compile(
    r"^\s*(\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)\s*([a-zA-Zµ]*)"
)


class MalformedAnalysisError(ValueError):
    """Raised when no structured analysis can be recovered from a response."""


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up."""
    return math.floor(value + 0.5)


def vish_score(health: int, taste: int, consumer: int) -> int:
    """Composite Vish Score of the three component scores."""
    return round_half_up((health + taste + consumer) / 3)


def grade_for(score: int) -> str:
    """Map a Vish Score to its letter grade."""
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return FAILING_GRADE


def clamp_score(value: float) -> int:
    """Round a score and clamp it into 0-100."""
    return max(0, min(100, round_half_up(value)))


def extract_json_object(text: str) -> dict[str, object]:
    """Return the first JSON object embedded in free-form model output."""
    decoder = json.JSONDecoder()
    start = text.find("{")
    while start != -1:
        try:
            candidate, _ = decoder.raw_decode(text, start)
        except (ValueError, RecursionError):
            start = text.find("{", start + 1)
            continue
        if isinstance(candidate, dict):
            return candidate
        start = text.find("{", start + 1)
    raise MalformedAnalysisError("No structured analysis found in the response")


class ScoreAggregator:
    """Turns loosely typed analysis payloads into validated results."""

    def parse(self, text: str) -> AnalysisResult:
        """Extract the embedded payload from provider text and validate it."""
        if not text or not text.strip():
            raise MalformedAnalysisError("The analysis provider returned no text")
        try:
            payload = extract_json_object(text)
        except MalformedAnalysisError:
            _logger.warning("Analysis response had no JSON object: %.200s", text)
            raise
        return self.validate(payload)

    def validate(self, raw: object) -> AnalysisResult:
        """Validate and default a raw payload into an AnalysisResult."""
        if isinstance(raw, str | bytes):
            try:
                raw = json.loads(raw)
            except (ValueError, RecursionError) as exc:
                raise MalformedAnalysisError("Analysis payload is not JSON") from exc
        if not isinstance(raw, Mapping):
            raise MalformedAnalysisError("Analysis payload is not an object")

        health_raw = _section(raw, "health")
        taste_raw = _section(raw, "taste")
        consumer_raw = _section(raw, "consumer")
        overall_raw = _section(raw, "overall")

        health = HealthAssessment(
            score=_score(health_raw.get("score")),
            warnings=_string_list(health_raw.get("warnings")),
            recommendations=_string_list(health_raw.get("recommendations")),
            allergens=_string_list(health_raw.get("allergens")),
        )
        taste = TasteAssessment(
            score=_score(taste_raw.get("score")),
            profile=_string_list(taste_raw.get("profile")) or ["Neutral"],
            description=_text(taste_raw.get("description")),
        )
        consumer = ConsumerAssessment(
            score=_score(consumer_raw.get("score")),
            feedback=_text(consumer_raw.get("feedback")),
            satisfaction=_text(consumer_raw.get("satisfaction")),
            common_complaints=_string_list(
                _pick(consumer_raw, "commonComplaints", "common_complaints")
            ),
            positive_aspects=_string_list(
                _pick(consumer_raw, "positiveAspects", "positive_aspects")
            ),
        )

        composite = vish_score(health.score, taste.score, consumer.score)
        provided = _number(_pick(overall_raw, "vishScore", "vish_score"))
        if provided is not None and provided != composite:
            _logger.debug(
                "Replacing inconsistent vish score %s with %s", provided, composite
            )
        overall = OverallAssessment(
            vish_score=composite,
            grade=grade_for(composite),
            summary=_text(overall_raw.get("summary")),
            nutrition_score=health.score,
            taste_score=taste.score,
            consumer_score=consumer.score,
        )
        return AnalysisResult(
            product_name=_text(
                _pick(raw, "productName", "product_name", "foodName", "food_name"),
                default=UNKNOWN_PRODUCT,
            ),
            nutrition=_nutrition(_section(raw, "nutrition")),
            health=health,
            taste=taste,
            consumer=consumer,
            overall=overall,
        )


def _section(raw: Mapping, key: str) -> Mapping:
    value = raw.get(key)
    return value if isinstance(value, Mapping) else {}


def _pick(raw: Mapping, *keys: str) -> object | None:
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return None


def _number(value: object) -> float | None:
    """Read an int, float or numeric string; anything else is missing."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, int | float):
        return None
    try:
        parsed = float(value)
    except (OverflowError, ValueError):
        return None
    return parsed if math.isfinite(parsed) else None


def _score(value: object) -> int:
    number = _number(value)
    if number is None:
        return DEFAULT_SCORE
    return clamp_score(number)


def _text(value: object, default: str = PLACEHOLDER_TEXT) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _string_list(value: object) -> list[str]:
    if not isinstance(value, list | tuple):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def _quantity(value: object, default_unit: str) -> Nutrient:
    """Parse values like 12, "12", "12g" or "200 mg"."""
    number = _number(value)
    if number is not None:
        return Nutrient(amount=max(number, 0.0), unit=default_unit)
    if isinstance(value, str):
        match = _QUANTITY_PATTERN.match(value)
        if match:
            amount = _number(match.group(1))
            return Nutrient(amount=amount or 0.0, unit=match.group(2) or default_unit)
    if isinstance(value, Mapping):
        amount = _number(value.get("amount"))
        unit = value.get("unit")
        return Nutrient(
            amount=max(amount or 0.0, 0.0),
            unit=unit if isinstance(unit, str) and unit else default_unit,
        )
    return Nutrient(unit=default_unit)


def _nutrition(raw: Mapping) -> NutritionFacts:
    calories = _number(raw.get("calories"))
    nutrients = {
        name: _quantity(_pick(raw, *keys), unit)
        for name, (keys, unit) in _NUTRIENT_FIELDS.items()
    }
    return NutritionFacts(
        calories=max(calories or 0.0, 0.0),
        vitamins=_string_list(_pick(raw, "vitamins", "minerals")),
        **nutrients,
    )
