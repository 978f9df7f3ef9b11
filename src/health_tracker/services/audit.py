"""Audit logging service."""

from dataclasses import asdict, dataclass
from datetime import date, datetime
from enum import Enum
from typing import Protocol
from uuid import UUID

from health_tracker.domain.audit import AuditEventType
from health_tracker.domain.records import AuditedRecord, Deleted


class AuditRepository(Protocol):
    """Persistence interface for audit events."""

    def create_event(  # noqa: PLR0913
        self,
        user_id: UUID,
        entity_type: str,
        entity_id: UUID,
        event_type: str,
        before: dict[str, object] | None,
        after: dict[str, object] | None,
    ) -> None:
        """Create an audit event row."""


@dataclass
class AuditService:
    """Service for recording audit events."""

    repository: AuditRepository

    def record_event(  # noqa: PLR0913
        self,
        user_id: UUID,
        entity_type: str,
        entity_id: UUID,
        event_type: AuditEventType,
        before: AuditedRecord | None,
        after: AuditedRecord | None,
    ) -> None:
        """Persist an audit event with JSON snapshots of the record."""
        self.repository.create_event(
            user_id=user_id,
            entity_type=entity_type,
            entity_id=entity_id,
            event_type=event_type.value,
            before=record_snapshot(before) if before is not None else None,
            after=record_snapshot(after) if after is not None else None,
        )


def record_snapshot(record: AuditedRecord) -> dict[str, object]:
    """Return a JSON-compatible snapshot of a record."""
    data = asdict(record)
    data.pop("state", None)
    snapshot = {key: _jsonable(value) for key, value in data.items()}
    if isinstance(record.state, Deleted):
        snapshot["deleted_at"] = record.state.at.isoformat()
        snapshot["deleted_by"] = str(record.state.by) if record.state.by else None
    return snapshot


def _jsonable(value: object) -> object:
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return value
