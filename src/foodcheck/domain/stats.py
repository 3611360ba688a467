"""Domain models for statistics."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CategoryCount:
    """Number of analyses in a score band."""

    name: str
    count: int


@dataclass(frozen=True)
class MonthlyCount:
    """Number of analyses created in a calendar month."""

    month: str
    count: int


@dataclass(frozen=True)
class AnalysisStats:
    """Aggregate snapshot derived from the analysis history."""

    total_analyses: int = 0
    average_vish_score: int = 0
    average_nutrition_score: int = 0
    average_taste_score: int = 0
    average_consumer_score: int = 0
    healthy_choices: int = 0
    improvement_trend: int = 0
    top_categories: list[CategoryCount] = field(default_factory=list)
    monthly_analyses: list[MonthlyCount] = field(default_factory=list)


@dataclass(frozen=True)
class TrendMetric:
    """Current average and trend delta for one score dimension."""

    metric: str
    current: int
    trend: int
