"""Shared lifecycle logic for user-owned records."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import ClassVar, Generic, Protocol, TypeVar
from uuid import UUID

from health_tracker.domain.audit import AuditEventType
from health_tracker.domain.errors import ForbiddenError, NotFoundError
from health_tracker.domain.pagination import Page, RecordQuery
from health_tracker.domain.records import AuditedRecord
from health_tracker.services.audit import AuditService

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=AuditedRecord)
RecordT_co = TypeVar("RecordT_co", bound=AuditedRecord, covariant=True)


class RecordRepository(Protocol[RecordT_co]):
    """Persistence interface shared by every record table."""

    def create(self, user_id: UUID, payload: dict[str, object]) -> RecordT_co:
        """Insert a record and return it."""

    def get(self, record_id: UUID) -> RecordT_co | None:
        """Return an active record by id."""

    def list_records(self, user_id: UUID, query: RecordQuery) -> Page[RecordT_co]:
        """Return a filtered page of a user's active records."""

    def update(self, record_id: UUID, payload: dict[str, object]) -> RecordT_co:
        """Apply a partial update and return the new record."""

    def soft_delete(
        self, record_id: UUID, deleted_by: UUID, deleted_at: datetime
    ) -> None:
        """Mark a record as deleted."""


@dataclass
class RecordService(Generic[RecordT]):
    """Create, read, update and soft-delete records owned by a user."""

    repository: RecordRepository[RecordT]
    audit_service: AuditService

    entity_type: ClassVar[str] = "record"

    def create(self, user_id: UUID, payload: dict[str, object]) -> RecordT:
        """Create a record for the user."""
        record = self.repository.create(user_id, payload)
        self.audit_service.record_event(
            user_id=user_id,
            entity_type=self.entity_type,
            entity_id=record.id,
            event_type=AuditEventType.CREATED,
            before=None,
            after=record,
        )
        logger.info(
            "Created %s",
            self.entity_type,
            extra={"user_id": str(user_id), "record_id": str(record.id)},
        )
        return record

    def get(self, user_id: UUID, record_id: UUID) -> RecordT:
        """Return an active record owned by the user."""
        record = self.repository.get(record_id)
        if record is None:
            raise NotFoundError(self.entity_type, record_id)
        if record.user_id != user_id:
            raise ForbiddenError(self.entity_type, record_id)
        return record

    def list_records(
        self, user_id: UUID, query: RecordQuery | None = None
    ) -> Page[RecordT]:
        """Return a page of the user's records."""
        return self.repository.list_records(user_id, query or RecordQuery())

    def update(
        self, user_id: UUID, record_id: UUID, payload: dict[str, object]
    ) -> RecordT:
        """Apply a partial update to a record owned by the user."""
        current = self.get(user_id, record_id)
        if not payload:
            return current
        updated = self.repository.update(record_id, payload)
        self.audit_service.record_event(
            user_id=user_id,
            entity_type=self.entity_type,
            entity_id=record_id,
            event_type=AuditEventType.UPDATED,
            before=current,
            after=updated,
        )
        return updated

    def delete(self, user_id: UUID, record_id: UUID) -> None:
        """Soft-delete a record owned by the user."""
        current = self.get(user_id, record_id)
        self.repository.soft_delete(
            record_id, deleted_by=user_id, deleted_at=datetime.now(tz=UTC)
        )
        self.audit_service.record_event(
            user_id=user_id,
            entity_type=self.entity_type,
            entity_id=record_id,
            event_type=AuditEventType.DELETED,
            before=current,
            after=None,
        )
        logger.info(
            "Deleted %s",
            self.entity_type,
            extra={"user_id": str(user_id), "record_id": str(record_id)},
        )
