"""Audit trail storage for record and profile changes."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from health_tracker.services.audit import AuditRepository


@dataclass
class SupabaseAuditRepository(AuditRepository):
    """Writes before/after snapshots to the `audit_events` table."""

    client: Client

    def create_event(  # noqa: PLR0913
        self,
        user_id: UUID,
        entity_type: str,
        entity_id: UUID,
        event_type: str,
        before: dict[str, object] | None,
        after: dict[str, object] | None,
    ) -> None:
        """Record one create, update or delete of a tracked entity."""
        self.client.table("audit_events").insert(
            {
                "user_id": str(user_id),
                "entity_type": entity_type,
                "entity_id": str(entity_id),
                "event_type": event_type,
                "before_json": before,
                "after_json": after,
            }
        ).execute()
