"""Request models for the HTTP surface."""

from pydantic import BaseModel, Field


class SaveAnalysisRequest(BaseModel):
    """Raw provider-style payload to validate and store."""

    analysis: dict[str, object]
    food_name: str = ""
    image_url: str | None = None
    user_notes: str | None = None


class RecipeIngredientRequest(BaseModel):
    food_id: str
    amount: float = Field(gt=0)
    unit: str = "serving"


class RecipeRequest(BaseModel):
    """Home recipe built from catalog entries."""

    name: str = ""
    servings: int = Field(default=1, ge=1)
    ingredients: list[RecipeIngredientRequest] = Field(default_factory=list)
    save: bool = False


class NoteUpdate(BaseModel):
    notes: str
