"""Statistics derived from the analysis history."""

import csv
import io
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from foodcheck.domain.history import AnalysisRecord
from foodcheck.domain.stats import (
    AnalysisStats,
    CategoryCount,
    MonthlyCount,
    TrendMetric,
)
from foodcheck.services.catalog import SCORE_BANDS, score_band
from foodcheck.services.history import HistoryService
from foodcheck.services.scoring import round_half_up

TREND_WINDOW = 5
MONTH_WINDOW = 6
DECEMBER = 12
CATEGORY_ORDER = tuple(band.capitalize() for band in SCORE_BANDS)

_SCORE_GETTERS: dict[str, Callable[[AnalysisRecord], int]] = {
    "Vish Score": lambda record: record.analysis.overall.vish_score,
    "Nutrition Score": lambda record: record.analysis.health.score,
    "Taste Score": lambda record: record.analysis.taste.score,
    "Consumer Score": lambda record: record.analysis.consumer.score,
}


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class StatsService:
    """Computes statistics for the current history on every call."""

    history: HistoryService
    timezone_name: str = "UTC"
    clock: Callable[[], datetime] = _utc_now

    def get_stats(self) -> AnalysisStats:
        """Return statistics for the stored history."""
        return compute_stats(
            self.history.get_all(), now=self.clock(), timezone_name=self.timezone_name
        )

    def get_trends(self) -> list[TrendMetric]:
        """Return per-dimension averages and trends for the stored history."""
        return trend_metrics(self.history.get_all())

    def export_trends_csv(self) -> str:
        """Return the trend metrics as CSV."""
        return trends_to_csv(self.get_trends())


def compute_stats(
    records: Sequence[AnalysisRecord],
    now: datetime | None = None,
    timezone_name: str = "UTC",
) -> AnalysisStats:
    """Aggregate records that are ordered most recent first."""
    tz = ZoneInfo(timezone_name)
    reference = (now or _utc_now()).astimezone(tz)
    monthly = _monthly_counts(records, reference, tz)
    if not records:
        return AnalysisStats(monthly_analyses=monthly)

    vish_scores = [record.analysis.overall.vish_score for record in records]
    return AnalysisStats(
        total_analyses=len(records),
        average_vish_score=_average(vish_scores),
        average_nutrition_score=_average(
            [record.analysis.health.score for record in records]
        ),
        average_taste_score=_average(
            [record.analysis.taste.score for record in records]
        ),
        average_consumer_score=_average(
            [record.analysis.consumer.score for record in records]
        ),
        healthy_choices=sum(
            1 for score in vish_scores if score_band(score) == "healthy"
        ),
        improvement_trend=_trend(vish_scores),
        top_categories=_category_counts(vish_scores),
        monthly_analyses=monthly,
    )


def trend_metrics(records: Sequence[AnalysisRecord]) -> list[TrendMetric]:
    """Average and recent-versus-older trend for each score dimension."""
    metrics = []
    for name, getter in _SCORE_GETTERS.items():
        scores = [getter(record) for record in records]
        metrics.append(
            TrendMetric(metric=name, current=_average(scores), trend=_trend(scores))
        )
    return metrics


def trends_to_csv(metrics: Sequence[TrendMetric]) -> str:
    """Render trend metrics as CSV with signed trend values."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["Metric", "Value", "Trend"])
    for metric in metrics:
        trend = f"+{metric.trend}" if metric.trend > 0 else str(metric.trend)
        writer.writerow([metric.metric, metric.current, trend])
    return buffer.getvalue()


def category_for(vish_score: int) -> str:
    """Display label of the score band a Vish Score falls in."""
    return score_band(vish_score).capitalize()


def _average(scores: Sequence[int]) -> int:
    if not scores:
        return 0
    return round_half_up(sum(scores) / len(scores))


def _trend(scores: Sequence[int]) -> int:
    # For fewer than ten scores the two windows overlap and pull the trend
    # toward zero; with five or fewer they are identical.
    window = min(TREND_WINDOW, len(scores))
    if window == 0:
        return 0
    recent = scores[:window]
    older = scores[-window:]
    return round_half_up(sum(recent) / window - sum(older) / window)


def _category_counts(vish_scores: Sequence[int]) -> list[CategoryCount]:
    counts = dict.fromkeys(CATEGORY_ORDER, 0)
    for score in vish_scores:
        counts[category_for(score)] += 1
    ranked = sorted(counts.items(), key=lambda entry: entry[1], reverse=True)
    return [CategoryCount(name=name, count=count) for name, count in ranked]


def _month_starts(reference: datetime) -> list[tuple[int, int]]:
    """Year/month pairs for the window ending at the reference month."""
    months = []
    year, month = reference.year, reference.month
    for _ in range(MONTH_WINDOW):
        months.append((year, month))
        if month == 1:
            year, month = year - 1, DECEMBER
        else:
            month -= 1
    return list(reversed(months))


def _monthly_counts(
    records: Sequence[AnalysisRecord], reference: datetime, tz: ZoneInfo
) -> list[MonthlyCount]:
    buckets = dict.fromkeys(_month_starts(reference), 0)
    for record in records:
        created = record.created_at
        if created.tzinfo is None:
            created = created.replace(tzinfo=UTC)
        local = created.astimezone(tz)
        key = (local.year, local.month)
        if key in buckets:
            buckets[key] += 1
    return [
        MonthlyCount(month=datetime(year, month, 1).strftime("%b %Y"), count=count)
        for (year, month), count in buckets.items()
    ]
