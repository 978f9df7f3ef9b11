"""Admin service for reporting."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID

from health_tracker.domain.admin import AdminUser
from health_tracker.services.dashboard import DashboardRepository


class AdminRepository(Protocol):
    """Persistence interface for admin data."""

    def list_users(self) -> list[AdminUser]:
        """Return all users."""

    def list_audit_events(self, user_id: UUID, limit: int) -> list[dict[str, object]]:
        """Return recent audit events for a user."""


@dataclass
class AdminService:
    """Service for admin dashboards."""

    admin_repository: AdminRepository
    dashboard_repository: DashboardRepository

    def list_users(self) -> list[dict[str, object]]:
        """Return users with recent activity summaries."""
        today = datetime.now(tz=UTC).date()
        start_7d = today - timedelta(days=6)
        start_30d = today - timedelta(days=29)
        summaries = []
        for user in self.admin_repository.list_users():
            activity = self.dashboard_repository.list_activity_dates(user.id)
            summaries.append(
                {
                    "id": str(user.id),
                    "email": user.email,
                    "last_active_at": user.last_active_at.isoformat()
                    if user.last_active_at
                    else None,
                    "active_days_7d": sum(1 for day in activity if day >= start_7d),
                    "active_days_30d": sum(1 for day in activity if day >= start_30d),
                }
            )
        return summaries

    def get_user_detail(self, user_id: UUID) -> dict[str, object]:
        """Return detailed info for a user."""
        activity = sorted(self.dashboard_repository.list_activity_dates(user_id))
        audits = self.admin_repository.list_audit_events(user_id, limit=20)
        return {
            "user_id": str(user_id),
            "first_activity_date": activity[0].isoformat() if activity else None,
            "last_activity_date": activity[-1].isoformat() if activity else None,
            "total_activity_days": len(activity),
            "audit_events": audits,
        }
