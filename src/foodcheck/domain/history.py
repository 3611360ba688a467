"""Domain models for persisted analysis history."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from foodcheck.domain.analysis import AnalysisResult


class AnalysisRecord(BaseModel):
    """A saved analysis with its timestamp and optional user note."""

    model_config = ConfigDict(frozen=True)

    id: str
    created_at: datetime
    food_name: str
    analysis: AnalysisResult
    image_url: str | None = None
    user_notes: str | None = None

    @property
    def vish_score(self) -> int:
        """Composite score of the stored analysis."""
        return self.analysis.overall.vish_score
