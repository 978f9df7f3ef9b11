"""Domain errors raised by application services."""

from uuid import UUID


class HealthTrackerError(Exception):
    """Base class for application errors."""


class NotFoundError(HealthTrackerError):
    """Raised when a record does not exist or has been deleted."""

    def __init__(self, entity_type: str, entity_id: UUID) -> None:
        super().__init__(f"{entity_type} {entity_id} was not found")
        self.entity_type = entity_type
        self.entity_id = entity_id


class ForbiddenError(HealthTrackerError):
    """Raised when a user acts on a record they do not own."""

    def __init__(self, entity_type: str, entity_id: UUID) -> None:
        super().__init__(f"Access to {entity_type} {entity_id} is not allowed")
        self.entity_type = entity_type
        self.entity_id = entity_id
