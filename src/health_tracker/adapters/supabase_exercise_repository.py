"""Supabase repository for exercise sessions."""

from dataclasses import dataclass
from typing import Any, ClassVar

from health_tracker.adapters.supabase_records import (
    SupabaseRecordRepository,
    ilike_any,
    parse_audit_fields,
    parse_date,
)
from health_tracker.domain.pagination import RecordQuery
from health_tracker.domain.records import ExerciseRecord
from health_tracker.services.records import RecordRepository


@dataclass
class SupabaseExerciseRepository(
    SupabaseRecordRepository[ExerciseRecord], RecordRepository[ExerciseRecord]
):
    """Supabase implementation for exercise persistence."""

    table_name: ClassVar[str] = "exercises"
    date_column: ClassVar[str] = "exercise_date"

    def apply_filters(self, request: Any, query: RecordQuery) -> Any:
        if query.category:
            request = request.eq("category", query.category)
        if query.search:
            request = request.or_(ilike_any(("title", "description"), query.search))
        if query.min_duration is not None:
            request = request.gte("duration_minutes", query.min_duration)
        if query.max_duration is not None:
            request = request.lte("duration_minutes", query.max_duration)
        if query.min_calories is not None:
            request = request.gte("calories_burned", query.min_calories)
        if query.max_calories is not None:
            request = request.lte("calories_burned", query.max_calories)
        return request

    def parse_row(self, row: dict[str, Any]) -> ExerciseRecord:
        return ExerciseRecord(
            **parse_audit_fields(row),
            title=str(row.get("title", "")),
            description=row.get("description"),
            duration_minutes=int(row.get("duration_minutes", 0)),
            calories_burned=int(row.get("calories_burned", 0)),
            exercise_date=parse_date(row["exercise_date"]),
            category=row.get("category"),
            notes=row.get("notes"),
        )
