"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from supabase import Client

from health_tracker.adapters.supabase_records import parse_datetime, to_row
from health_tracker.domain.models import UserRecord
from health_tracker.services.users import UserRepository

USER_COLUMNS = (
    "id, email, first_name, last_name, timezone, created_at, last_active_at"
)


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return a user by id, if present."""
        response = (
            self.client.table("users")
            .select(USER_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with an email, if present."""
        response = (
            self.client.table("users")
            .select(USER_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        """Create a new user row and return it."""
        response = self.client.table("users").insert(to_row(payload)).execute()
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def update_user(self, user_id: UUID, payload: dict[str, object]) -> UserRecord:
        """Update profile fields and return the user."""
        response = (
            self.client.table("users")
            .update(to_row(payload))
            .eq("id", str(user_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update user in Supabase")
        return _parse_user(response.data[0])

    def touch_last_active(self, user_id: UUID) -> None:
        """Update the last_active_at timestamp for a user."""
        self.client.table("users").update(
            {"last_active_at": datetime.now(tz=UTC).isoformat()}
        ).eq("id", str(user_id)).execute()


def _parse_user(row: dict[str, Any]) -> UserRecord:
    return UserRecord(
        id=UUID(row["id"]),
        email=str(row.get("email", "")),
        first_name=str(row.get("first_name") or ""),
        last_name=str(row.get("last_name") or ""),
        timezone=row.get("timezone"),
        created_at=parse_datetime(row.get("created_at")),
        last_active_at=parse_datetime(row.get("last_active_at")),
    )
