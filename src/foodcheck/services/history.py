"""Bounded, most-recent-first history of saved analyses."""

import csv
import io
import logging
import secrets
import string
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from pydantic import TypeAdapter, ValidationError

from foodcheck.domain.analysis import AnalysisResult
from foodcheck.domain.history import AnalysisRecord
from foodcheck.services.catalog import SCORE_BANDS, score_band
from foodcheck.services.storage import KeyValueStore

_logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "foodcheck_analysis_history"
DEFAULT_RETENTION_CAP = 100
EXPORT_HEADERS = (
    "Date",
    "Food Name",
    "Vish Score",
    "Nutrition Score",
    "Taste Score",
    "Consumer Score",
    "Grade",
    "Notes",
)

_RECORDS = TypeAdapter(list[AnalysisRecord])
_ID_ALPHABET = string.ascii_lowercase + string.digits


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass(frozen=True)
class RecordFilter:
    """Criteria for narrowing the history."""

    min_score: int | None = None
    max_score: int | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None
    band: str | None = None
    query: str | None = None


@dataclass
class HistoryService:
    """Owns the ordered list of analysis records in a key-value store."""

    store: KeyValueStore
    storage_key: str = DEFAULT_STORAGE_KEY
    retention_cap: int = DEFAULT_RETENTION_CAP
    clock: Callable[[], datetime] = _utc_now

    def save(
        self,
        food_name: str,
        analysis: AnalysisResult,
        image_url: str | None = None,
        user_notes: str | None = None,
    ) -> AnalysisRecord:
        """Prepend a new record and drop the oldest beyond the retention cap."""
        history = self.get_all()
        now = self.clock()
        record = AnalysisRecord(
            id=self._new_id(now, {existing.id for existing in history}),
            created_at=now,
            food_name=food_name.strip() or analysis.product_name,
            analysis=analysis,
            image_url=image_url,
            user_notes=user_notes,
        )
        updated = [record, *history]
        if len(updated) > self.retention_cap:
            _logger.info(
                "Trimming %s history records beyond the cap of %s",
                len(updated) - self.retention_cap,
                self.retention_cap,
            )
            updated = updated[: self.retention_cap]
        self._write(updated)
        return record

    def get_all(self) -> list[AnalysisRecord]:
        """Return every record, most recent first."""
        stored = self.store.get(self.storage_key)
        if not stored:
            return []
        try:
            return _RECORDS.validate_json(stored)
        except ValidationError:
            _logger.exception(
                "Stored analysis history is unreadable; starting from empty"
            )
            self._back_up_corrupt(stored)
            return []

    def get_by_id(self, record_id: str) -> AnalysisRecord | None:
        """Return a record by id, if present."""
        for record in self.get_all():
            if record.id == record_id:
                return record
        return None

    def delete(self, record_id: str) -> bool:
        """Delete a record; returns False when the id is unknown."""
        history = self.get_all()
        remaining = [record for record in history if record.id != record_id]
        if len(remaining) == len(history):
            return False
        self._write(remaining)
        return True

    def update_note(self, record_id: str, notes: str) -> bool:
        """Replace a record's note; returns False when the id is unknown."""
        history = self.get_all()
        for index, record in enumerate(history):
            if record.id == record_id:
                history[index] = record.model_copy(update={"user_notes": notes})
                self._write(history)
                return True
        return False

    def clear(self) -> None:
        """Remove the whole history."""
        self.store.delete(self.storage_key)

    def recent(self, count: int = 10) -> list[AnalysisRecord]:
        """Return the most recent records."""
        return self.get_all()[: max(count, 0)]

    def search(self, query: str) -> list[AnalysisRecord]:
        """Records whose food name or note contains the query."""
        return self.filter(RecordFilter(query=query))

    def filter(self, criteria: RecordFilter) -> list[AnalysisRecord]:
        """Records matching every given criterion."""
        if criteria.band is not None and criteria.band not in SCORE_BANDS:
            return []
        return [record for record in self.get_all() if _accepts(criteria, record)]

    def between(self, start: datetime, end: datetime) -> list[AnalysisRecord]:
        """Records created within an inclusive time range."""
        return self.filter(RecordFilter(date_from=start, date_to=end))

    def export_csv(self) -> str:
        """Flatten the history into CSV, one row per record in store order."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(EXPORT_HEADERS)
        for record in self.get_all():
            analysis = record.analysis
            writer.writerow(
                [
                    record.created_at.date().isoformat(),
                    record.food_name,
                    analysis.overall.vish_score,
                    analysis.health.score,
                    analysis.taste.score,
                    analysis.consumer.score,
                    analysis.overall.grade,
                    record.user_notes or "",
                ]
            )
        return buffer.getvalue()

    def _write(self, records: list[AnalysisRecord]) -> None:
        self.store.set(self.storage_key, _RECORDS.dump_json(records).decode("utf-8"))

    def _back_up_corrupt(self, stored: str) -> None:
        backup_key = f"{self.storage_key}.corrupt"
        previous = self.store.get(backup_key)
        if previous == stored:
            return
        if previous is not None:
            _logger.warning("Replacing earlier history backup at %s", backup_key)
        self.store.set(backup_key, stored)

    @staticmethod
    def _new_id(now: datetime, taken: set[str]) -> str:
        millis = int(now.timestamp() * 1000)
        while True:
            suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
            record_id = f"analysis-{millis}-{suffix}"
            if record_id not in taken:
                return record_id


def _accepts(criteria: RecordFilter, record: AnalysisRecord) -> bool:  # noqa: PLR0911
    score = record.vish_score
    if criteria.min_score is not None and score < criteria.min_score:
        return False
    if criteria.max_score is not None and score > criteria.max_score:
        return False
    created = _aware(record.created_at)
    if criteria.date_from is not None and created < _aware(criteria.date_from):
        return False
    if criteria.date_to is not None and created > _aware(criteria.date_to):
        return False
    if criteria.band is not None and score_band(score) != criteria.band:
        return False
    return criteria.query is None or _mentions(record, criteria.query)


def _mentions(record: AnalysisRecord, query: str) -> bool:
    needle = query.lower()
    return needle in record.food_name.lower() or (
        record.user_notes is not None and needle in record.user_notes.lower()
    )


def _aware(moment: datetime) -> datetime:
    """Treat naive timestamps as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment
