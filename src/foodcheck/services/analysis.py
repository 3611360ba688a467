"""Nutrition label analysis through an external vision model."""

import base64
from dataclasses import dataclass
from typing import Protocol

from foodcheck.domain.analysis import AnalysisResult
from foodcheck.services.scoring import ScoreAggregator

ANALYSIS_PROMPT = """\
You are a nutrition expert. Read the nutrition label in the image and reply \
with one JSON object of this shape:

{
  "productName": "product name if visible",
  "nutrition": {
    "calories": number,
    "totalFat": "amount with unit",
    "saturatedFat": "amount with unit",
    "transFat": "amount with unit",
    "cholesterol": "amount with unit",
    "sodium": "amount with unit",
    "totalCarbohydrates": "amount with unit",
    "dietaryFiber": "amount with unit",
    "totalSugars": "amount with unit",
    "addedSugars": "amount with unit",
    "protein": "amount with unit",
    "vitamins": ["vitamins and minerals listed"]
  },
  "health": {"score": 0-100, "warnings": [], "recommendations": [], "allergens": []},
  "taste": {"score": 0-100, "profile": [], "description": "short taste description"},
  "consumer": {
    "score": 0-100,
    "feedback": "typical consumer sentiment",
    "satisfaction": "overall satisfaction level",
    "commonComplaints": [],
    "positiveAspects": []
  },
  "overall": {"summary": "short overall assessment"}
}

Health score: start at 50; reward protein of 15g or more, fiber of 5g or more, \
sugar under 10g, sodium under 400mg and saturated fat under 5g; penalise sugar \
of 20g or more, sodium of 800mg or more, saturated fat of 10g or more and \
500 or more calories.
Taste score: start at 50; reward moderate sugar (5-15g), moderate fat (8-20g), \
moderate sodium (200-600mg), protein of 10g or more, popular brands and \
dessert or snack categories.
Consumer score: start at 50; reward widely known brands, iconic products, fast \
food, snacks and desserts.
"""


class AnalysisProvider(Protocol):
    """Interface for the external vision model."""

    async def analyze(self, *, model: str, image_data_url: str, prompt: str) -> str:
        """Return the model's free-form text response."""


@dataclass
class AnalysisService:
    """Prepares label prompts and validates the model's answer."""

    client: AnalysisProvider
    model: str
    aggregator: ScoreAggregator

    async def analyze(
        self, image_bytes: bytes, health_context: str | None = None
    ) -> AnalysisResult:
        """Analyze a label photo; raises MalformedAnalysisError on unusable output."""
        text = await self.client.analyze(
            model=self.model,
            image_data_url=_to_data_url(image_bytes),
            prompt=build_prompt(health_context),
        )
        return self.aggregator.parse(text)


def build_prompt(health_context: str | None = None) -> str:
    """Analysis prompt, personalised when health context is given."""
    prompt = ANALYSIS_PROMPT
    if health_context and health_context.strip():
        prompt += (
            f"\nUser health information: {health_context.strip()}. "
            "Give personalised warnings and recommendations for it.\n"
        )
    return prompt + "\nReply with the JSON object only."


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
