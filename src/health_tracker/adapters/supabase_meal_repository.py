"""Supabase repository for meals."""

from dataclasses import dataclass
from datetime import date
from typing import Any, ClassVar
from uuid import UUID

from health_tracker.adapters.supabase_records import (
    SupabaseRecordRepository,
    parse_audit_fields,
    parse_date,
)
from health_tracker.domain.pagination import RecordQuery
from health_tracker.domain.records import MealRecord
from health_tracker.services.meals import MealRepository


@dataclass
class SupabaseMealRepository(SupabaseRecordRepository[MealRecord], MealRepository):
    """Supabase implementation for meal persistence."""

    table_name: ClassVar[str] = "meals"
    date_column: ClassVar[str] = "meal_date"

    def list_for_day(self, user_id: UUID, day: date) -> list[MealRecord]:
        """Return every active meal a user logged on a day."""
        response = (
            self.client.table(self.table_name)
            .select("*")
            .eq("user_id", str(user_id))
            .eq(self.date_column, day.isoformat())
            .is_("deleted_at", "null")
            .execute()
        )
        return [self.parse_row(row) for row in response.data or []]

    def apply_filters(self, request: Any, query: RecordQuery) -> Any:
        if query.meal_type:
            request = request.eq("meal_type", query.meal_type)
        return request

    def parse_row(self, row: dict[str, Any]) -> MealRecord:
        return MealRecord(
            **parse_audit_fields(row),
            meal_type=str(row.get("meal_type", "")),
            meal_date=parse_date(row["meal_date"]),
            image_url=str(row.get("image_url") or ""),
        )
