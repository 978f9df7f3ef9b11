"""Audit domain models."""

from enum import StrEnum


class AuditEventType(StrEnum):
    """Lifecycle events recorded for tracked records."""

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
