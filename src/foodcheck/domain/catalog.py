"""Domain models for the food catalog."""

from dataclasses import dataclass, field

from foodcheck.domain.analysis import NutritionFacts


@dataclass(frozen=True)
class FoodMetadata:
    """Descriptive attributes of a catalog entry."""

    certifications: tuple[str, ...] = ()
    price_range: str | None = None
    dietary_tags: tuple[str, ...] = ()
    origin: str | None = None
    mood_impact: int = 50
    serving_size: str | None = None


@dataclass(frozen=True)
class FoodItem:
    """Represents an immutable entry in the food catalog."""

    id: str
    name: str
    brand: str | None
    category: str
    health_score: int
    taste_score: int
    consumer_score: int
    environmental_score: int
    nutrition: NutritionFacts
    ingredients: tuple[str, ...] = ()
    allergens: tuple[str, ...] = ()
    barcode: str | None = None
    metadata: FoodMetadata = field(default_factory=FoodMetadata)

    def __post_init__(self) -> None:
        for name in (
            "health_score",
            "taste_score",
            "consumer_score",
            "environmental_score",
        ):
            value = getattr(self, name)
            if not 0 <= value <= 100:  # noqa: PLR2004
                raise ValueError(f"{name} must be within 0-100, got {value}")

    @property
    def vish_score(self) -> int:
        """Rounded mean of health, taste and consumer scores."""
        # A mean of three integers never lands on .5, so round() is exact here.
        return round((self.health_score + self.taste_score + self.consumer_score) / 3)

    @property
    def dietary_tags(self) -> tuple[str, ...]:
        """Dietary tags from the entry metadata."""
        return self.metadata.dietary_tags
