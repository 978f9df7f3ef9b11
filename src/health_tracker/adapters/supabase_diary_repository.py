"""Supabase repository for diary entries."""

from dataclasses import dataclass
from typing import Any, ClassVar

from health_tracker.adapters.supabase_records import (
    SupabaseRecordRepository,
    ilike_any,
    parse_audit_fields,
    parse_date,
)
from health_tracker.domain.pagination import RecordQuery
from health_tracker.domain.records import DiaryEntry
from health_tracker.services.records import RecordRepository


@dataclass
class SupabaseDiaryRepository(
    SupabaseRecordRepository[DiaryEntry], RecordRepository[DiaryEntry]
):
    """Supabase implementation for diary persistence."""

    table_name: ClassVar[str] = "diaries"
    date_column: ClassVar[str] = "diary_date"

    def apply_filters(self, request: Any, query: RecordQuery) -> Any:
        if query.mood:
            request = request.eq("mood", query.mood)
        if query.search:
            request = request.or_(ilike_any(("title", "content"), query.search))
        return request

    def parse_row(self, row: dict[str, Any]) -> DiaryEntry:
        return DiaryEntry(
            **parse_audit_fields(row),
            title=str(row.get("title", "")),
            content=str(row.get("content", "")),
            tags=row.get("tags"),
            mood=row.get("mood"),
            is_private=bool(row.get("is_private", True)),
            diary_date=parse_date(row["diary_date"]),
        )
