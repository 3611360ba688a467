"""Models for validated food analysis results."""

from pydantic import BaseModel, ConfigDict, Field

PLACEHOLDER_TEXT = "Not available"
UNKNOWN_PRODUCT = "Unknown Product"
DEFAULT_SCORE = 50


class Nutrient(BaseModel):
    """Amount of a single nutrient with its unit."""

    model_config = ConfigDict(frozen=True)

    amount: float = Field(default=0.0, ge=0.0)
    unit: str = "g"


class NutritionFacts(BaseModel):
    """Calories, labelled nutrient quantities and vitamins present."""

    model_config = ConfigDict(frozen=True)

    calories: float = Field(default=0.0, ge=0.0)
    total_fat: Nutrient = Nutrient()
    saturated_fat: Nutrient = Nutrient()
    trans_fat: Nutrient = Nutrient()
    cholesterol: Nutrient = Nutrient(unit="mg")
    sodium: Nutrient = Nutrient(unit="mg")
    total_carbohydrates: Nutrient = Nutrient()
    dietary_fiber: Nutrient = Nutrient()
    total_sugars: Nutrient = Nutrient()
    added_sugars: Nutrient = Nutrient()
    protein: Nutrient = Nutrient()
    vitamins: list[str] = Field(default_factory=list)

    @classmethod
    def from_amounts(  # noqa: PLR0913
        cls,
        *,
        calories: float = 0.0,
        protein: float = 0.0,
        carbohydrates: float = 0.0,
        fat: float = 0.0,
        saturated_fat: float = 0.0,
        fiber: float = 0.0,
        sugar: float = 0.0,
        sodium_mg: float = 0.0,
        cholesterol_mg: float = 0.0,
        vitamins: list[str] | None = None,
    ) -> "NutritionFacts":
        """Build facts from plain gram/milligram amounts."""
        return cls(
            calories=calories,
            total_fat=Nutrient(amount=fat),
            saturated_fat=Nutrient(amount=saturated_fat),
            cholesterol=Nutrient(amount=cholesterol_mg, unit="mg"),
            sodium=Nutrient(amount=sodium_mg, unit="mg"),
            total_carbohydrates=Nutrient(amount=carbohydrates),
            dietary_fiber=Nutrient(amount=fiber),
            total_sugars=Nutrient(amount=sugar),
            protein=Nutrient(amount=protein),
            vitamins=list(vitamins or []),
        )


class HealthAssessment(BaseModel):
    """Nutrition/health dimension of an analysis."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(default=DEFAULT_SCORE, ge=0, le=100)
    warnings: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    allergens: list[str] = Field(default_factory=list)


class TasteAssessment(BaseModel):
    """Taste dimension of an analysis."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(default=DEFAULT_SCORE, ge=0, le=100)
    profile: list[str] = Field(default_factory=lambda: ["Neutral"])
    description: str = PLACEHOLDER_TEXT


class ConsumerAssessment(BaseModel):
    """Consumer satisfaction dimension of an analysis."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(default=DEFAULT_SCORE, ge=0, le=100)
    feedback: str = PLACEHOLDER_TEXT
    satisfaction: str = PLACEHOLDER_TEXT
    common_complaints: list[str] = Field(default_factory=list)
    positive_aspects: list[str] = Field(default_factory=list)


class OverallAssessment(BaseModel):
    """Composite block with the Vish Score and mirrored component scores."""

    model_config = ConfigDict(frozen=True)

    vish_score: int = Field(ge=0, le=100)
    grade: str
    summary: str = PLACEHOLDER_TEXT
    nutrition_score: int = Field(ge=0, le=100)
    taste_score: int = Field(ge=0, le=100)
    consumer_score: int = Field(ge=0, le=100)


class AnalysisResult(BaseModel):
    """Fully populated, internally consistent analysis of one submission."""

    model_config = ConfigDict(frozen=True)

    product_name: str = UNKNOWN_PRODUCT
    nutrition: NutritionFacts = NutritionFacts()
    health: HealthAssessment = HealthAssessment()
    taste: TasteAssessment = TasteAssessment()
    consumer: ConsumerAssessment = ConsumerAssessment()
    overall: OverallAssessment
