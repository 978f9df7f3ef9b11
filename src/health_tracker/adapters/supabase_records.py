"""Shared Supabase plumbing for user-owned record tables."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID

from supabase import Client

from health_tracker.domain.pagination import Page, RecordQuery
from health_tracker.domain.records import (
    ACTIVE,
    AuditedRecord,
    Deleted,
    DeletionState,
)

RecordT = TypeVar("RecordT", bound=AuditedRecord)

_MIN_DATETIME = datetime.min.replace(tzinfo=UTC)


@dataclass
class SupabaseRecordRepository(Generic[RecordT]):
    """Base repository for audited tables with soft-delete columns.

    Subclasses name the table and its date column, parse rows, and apply any
    filters of their own.
    """

    client: Client

    table_name: ClassVar[str]
    date_column: ClassVar[str]

    def create(self, user_id: UUID, payload: dict[str, object]) -> RecordT:
        """Insert a record and return it."""
        response = (
            self.client.table(self.table_name)
            .insert({"user_id": str(user_id), **to_row(payload)})
            .execute()
        )
        if not response.data:
            raise RuntimeError(f"Failed to create row in {self.table_name}")
        return self.parse_row(response.data[0])

    def get(self, record_id: UUID) -> RecordT | None:
        """Return an active record by id, if present."""
        response = (
            self.client.table(self.table_name)
            .select("*")
            .eq("id", str(record_id))
            .is_("deleted_at", "null")
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return self.parse_row(response.data[0])

    def list_records(self, user_id: UUID, query: RecordQuery) -> Page[RecordT]:
        """Return a filtered page of a user's active records."""
        request = (
            self.client.table(self.table_name)
            .select("*", count="exact")
            .eq("user_id", str(user_id))
            .is_("deleted_at", "null")
        )
        if query.start_date:
            request = request.gte(self.date_column, query.start_date.isoformat())
        if query.end_date:
            request = request.lte(self.date_column, query.end_date.isoformat())
        request = self.apply_filters(request, query)
        start = query.page.offset
        response = (
            request.order(self.date_column, desc=not query.ascending)
            .order("created_at", desc=not query.ascending)
            .range(start, start + query.page.limit - 1)
            .execute()
        )
        rows = response.data or []
        total = response.count if response.count is not None else len(rows)
        return Page.create([self.parse_row(row) for row in rows], total, query.page)

    def update(self, record_id: UUID, payload: dict[str, object]) -> RecordT:
        """Apply a partial update and return the new record."""
        response = (
            self.client.table(self.table_name)
            .update(
                {**to_row(payload), "updated_at": datetime.now(tz=UTC).isoformat()}
            )
            .eq("id", str(record_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError(f"Failed to update row in {self.table_name}")
        return self.parse_row(response.data[0])

    def soft_delete(
        self, record_id: UUID, deleted_by: UUID, deleted_at: datetime
    ) -> None:
        """Stamp the deletion columns on a record."""
        self.client.table(self.table_name).update(
            {"deleted_at": deleted_at.isoformat(), "deleted_by": str(deleted_by)}
        ).eq("id", str(record_id)).execute()

    def apply_filters(self, request: Any, query: RecordQuery) -> Any:
        """Hook for table-specific list filters."""
        return request

    def parse_row(self, row: dict[str, Any]) -> RecordT:
        raise NotImplementedError


def to_row(payload: dict[str, object]) -> dict[str, object]:
    """Convert Python values into JSON-compatible column values."""
    row: dict[str, object] = {}
    for key, value in payload.items():
        if isinstance(value, (date, datetime)):
            row[key] = value.isoformat()
        elif isinstance(value, UUID):
            row[key] = str(value)
        else:
            row[key] = value
    return row


def ilike_any(columns: tuple[str, ...], term: str) -> str:
    """Build a PostgREST `or` filter matching the term in any of the columns.

    Values are double-quoted so commas and parentheses in the term stay literal.
    """
    escaped = term.replace("\\", "\\\\").replace('"', '\\"')
    return ",".join(f'{column}.ilike."%{escaped}%"' for column in columns)


def parse_date(raw: object) -> date:
    if isinstance(raw, date):
        return raw
    return date.fromisoformat(str(raw)[:10])


def parse_datetime(raw: object) -> datetime | None:
    if isinstance(raw, datetime):
        return raw
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def parse_audit_fields(row: dict[str, Any]) -> dict[str, Any]:
    """Return the AuditedRecord keyword arguments for a row."""
    return {
        "id": UUID(row["id"]),
        "user_id": UUID(row["user_id"]),
        "created_at": parse_datetime(row.get("created_at")) or _MIN_DATETIME,
        "updated_at": parse_datetime(row.get("updated_at")),
        "state": parse_state(row),
    }


def parse_state(row: dict[str, Any]) -> DeletionState:
    deleted_at = parse_datetime(row.get("deleted_at"))
    if deleted_at is None:
        return ACTIVE
    deleted_by = row.get("deleted_by")
    return Deleted(at=deleted_at, by=UUID(deleted_by) if deleted_by else None)


def optional_float(raw: object) -> float | None:
    if raw is None:
        return None
    return float(raw)  # type: ignore[arg-type]
