"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from health_tracker.config import DEFAULT_TIMEZONE
from health_tracker.domain.errors import NotFoundError
from health_tracker.domain.models import UserRecord


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return a user by id, if present."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with an email, if present."""

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        """Create and return a new user record."""

    def update_user(self, user_id: UUID, payload: dict[str, object]) -> UserRecord:
        """Update profile fields and return the user."""

    def touch_last_active(self, user_id: UUID) -> None:
        """Update the last active timestamp for the user."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def ensure_user(self, email: str, first_name: str, last_name: str) -> UserRecord:
        """Return the user for an email, creating it when missing."""
        normalized = email.strip().lower()
        existing = self.repository.get_by_email(normalized)
        if existing:
            self.repository.touch_last_active(existing.id)
            return existing

        return self.repository.create_user(
            {
                "email": normalized,
                "first_name": first_name,
                "last_name": last_name,
                "timezone": DEFAULT_TIMEZONE,
            }
        )

    def get_user(self, user_id: UUID) -> UserRecord:
        """Return a user or raise NotFoundError."""
        user = self.repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("user", user_id)
        return user

    def update_profile(self, user_id: UUID, payload: dict[str, object]) -> UserRecord:
        """Update a user's profile fields."""
        current = self.get_user(user_id)
        if not payload:
            return current
        return self.repository.update_user(user_id, payload)

    def get_timezone(self, user_id: UUID) -> str:
        """Return the user's timezone or UTC when unknown."""
        user = self.repository.get_by_id(user_id)
        if user is None or not user.timezone:
            return DEFAULT_TIMEZONE
        return user.timezone
