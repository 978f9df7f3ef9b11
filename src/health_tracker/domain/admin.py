"""Types returned by the admin user listing."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class AdminUser:
    """A tracked account as shown to operators, with its last API activity."""

    id: UUID
    email: str
    last_active_at: datetime | None
