"""Supabase repository for body records."""

from dataclasses import dataclass
from datetime import date
from typing import Any, ClassVar
from uuid import UUID

from health_tracker.adapters.supabase_records import (
    SupabaseRecordRepository,
    optional_float,
    parse_audit_fields,
    parse_date,
)
from health_tracker.domain.records import BodyRecord
from health_tracker.services.body_records import BodyRecordRepository


@dataclass
class SupabaseBodyRecordRepository(
    SupabaseRecordRepository[BodyRecord], BodyRecordRepository
):
    """Supabase implementation for body record persistence."""

    table_name: ClassVar[str] = "body_records"
    date_column: ClassVar[str] = "record_date"

    def list_between(
        self, user_id: UUID, start: date | None, end: date | None
    ) -> list[BodyRecord]:
        """Return active records in an inclusive date range, oldest first."""
        request = (
            self.client.table(self.table_name)
            .select("*")
            .eq("user_id", str(user_id))
            .is_("deleted_at", "null")
        )
        if start:
            request = request.gte(self.date_column, start.isoformat())
        if end:
            request = request.lte(self.date_column, end.isoformat())
        response = request.order(self.date_column, desc=False).execute()
        return [self.parse_row(row) for row in response.data or []]

    def parse_row(self, row: dict[str, Any]) -> BodyRecord:
        return BodyRecord(
            **parse_audit_fields(row),
            weight=float(row.get("weight", 0.0)),
            body_fat_percentage=optional_float(row.get("body_fat_percentage")),
            record_date=parse_date(row["record_date"]),
            notes=row.get("notes"),
        )
