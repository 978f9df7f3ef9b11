"""Supabase queries backing dashboard analytics."""

from collections import Counter
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from health_tracker.adapters.supabase_records import parse_date, parse_datetime
from health_tracker.domain.records import RecordKind
from health_tracker.services.dashboard import DashboardRepository

RECORD_TABLES: dict[RecordKind, tuple[str, str]] = {
    RecordKind.MEAL: ("meals", "meal_date"),
    RecordKind.EXERCISE: ("exercises", "exercise_date"),
    RecordKind.BODY_RECORD: ("body_records", "record_date"),
    RecordKind.DIARY: ("diaries", "diary_date"),
}


@dataclass
class SupabaseDashboardRepository(DashboardRepository):
    """Supabase implementation for dashboard reads.

    Every query excludes soft-deleted rows.
    """

    client: Client

    def list_activity_dates(self, user_id: UUID) -> set[date]:
        """Return the union of record dates across all record tables."""
        dates: set[date] = set()
        for table, date_column in RECORD_TABLES.values():
            response = (
                self.client.table(table)
                .select(date_column)
                .eq("user_id", str(user_id))
                .is_("deleted_at", "null")
                .execute()
            )
            dates.update(
                parse_date(row[date_column])
                for row in response.data or []
                if row.get(date_column)
            )
        return dates

    def count_meals_by_type(self, user_id: UUID, day: date) -> dict[str, int]:
        """Return active meal counts per meal type for a day."""
        table, date_column = RECORD_TABLES[RecordKind.MEAL]
        response = (
            self.client.table(table)
            .select("meal_type")
            .eq("user_id", str(user_id))
            .eq(date_column, day.isoformat())
            .is_("deleted_at", "null")
            .execute()
        )
        return dict(Counter(str(row["meal_type"]) for row in response.data or []))

    def count_records(self, user_id: UUID, day: date, kind: RecordKind) -> int:
        """Return the number of active records of one kind on a day."""
        table, date_column = RECORD_TABLES[kind]
        response = (
            self.client.table(table)
            .select("id", count="exact")
            .eq("user_id", str(user_id))
            .eq(date_column, day.isoformat())
            .is_("deleted_at", "null")
            .execute()
        )
        if response.count is not None:
            return response.count
        return len(response.data or [])

    def first_activity_date(self, user_id: UUID) -> date | None:
        """Return the creation date of the oldest active record."""
        first: date | None = None
        for table, _ in RECORD_TABLES.values():
            response = (
                self.client.table(table)
                .select("created_at")
                .eq("user_id", str(user_id))
                .is_("deleted_at", "null")
                .order("created_at", desc=False)
                .limit(1)
                .execute()
            )
            if not response.data:
                continue
            created_at = parse_datetime(response.data[0].get("created_at"))
            if created_at is None:
                continue
            if first is None or created_at.date() < first:
                first = created_at.date()
        return first

    def latest_weight(
        self, user_id: UUID, on_or_before: date | None = None
    ) -> float | None:
        """Return the most recent weight, optionally bounded by date."""
        table, date_column = RECORD_TABLES[RecordKind.BODY_RECORD]
        request = (
            self.client.table(table)
            .select("weight")
            .eq("user_id", str(user_id))
            .is_("deleted_at", "null")
        )
        if on_or_before:
            request = request.lte(date_column, on_or_before.isoformat())
        response = request.order(date_column, desc=True).limit(1).execute()
        if not response.data:
            return None
        return float(response.data[0]["weight"])
