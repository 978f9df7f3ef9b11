"""Body metric tracking service."""

from dataclasses import dataclass
from datetime import date
from typing import ClassVar, Protocol
from uuid import UUID

from health_tracker.domain.dashboard import WeightPoint
from health_tracker.domain.records import BodyRecord
from health_tracker.services.dates import subtract_months
from health_tracker.services.records import RecordRepository, RecordService

MIN_CHART_MONTHS = 1
MAX_CHART_MONTHS = 12


class BodyRecordRepository(RecordRepository[BodyRecord], Protocol):
    """Persistence interface for body records."""

    def list_between(
        self, user_id: UUID, start: date | None, end: date | None
    ) -> list[BodyRecord]:
        """Return active records in an inclusive date range, oldest first."""


@dataclass
class BodyRecordService(RecordService[BodyRecord]):
    """Service for body records and weight trends."""

    repository: BodyRecordRepository

    entity_type: ClassVar[str] = "body_record"

    def get_graph(
        self, user_id: UUID, start: date | None = None, end: date | None = None
    ) -> list[WeightPoint]:
        """Return weight and body fat points between two dates."""
        records = self.repository.list_between(user_id, start, end)
        return [
            WeightPoint(
                day=record.record_date,
                weight=record.weight,
                body_fat=record.body_fat_percentage,
            )
            for record in records
        ]

    def get_weight_chart(
        self, user_id: UUID, today: date, months: int = 3
    ) -> list[WeightPoint]:
        """Return the weight trend for the last few months."""
        months = max(MIN_CHART_MONTHS, min(MAX_CHART_MONTHS, months))
        return self.get_graph(user_id, subtract_months(today, months), today)
