"""Supabase repository for admin queries."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from health_tracker.adapters.supabase_records import parse_datetime
from health_tracker.domain.admin import AdminUser
from health_tracker.services.admin import AdminRepository


@dataclass
class SupabaseAdminRepository(AdminRepository):
    """Supabase implementation for admin data."""

    client: Client

    def list_users(self) -> list[AdminUser]:
        """Return all users ordered by last activity."""
        response = (
            self.client.table("users")
            .select("id, email, last_active_at")
            .order("last_active_at", desc=True)
            .execute()
        )
        return [
            AdminUser(
                id=UUID(row["id"]),
                email=str(row.get("email", "")),
                last_active_at=parse_datetime(row.get("last_active_at")),
            )
            for row in response.data or []
        ]

    def list_audit_events(self, user_id: UUID, limit: int) -> list[dict[str, object]]:
        """Return recent audit events for a user."""
        response = (
            self.client.table("audit_events")
            .select("id, entity_type, entity_id, event_type, created_at")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return response.data or []
