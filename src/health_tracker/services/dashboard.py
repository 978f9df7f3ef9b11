"""Dashboard analytics: streaks, daily goal completion and summary numbers."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from health_tracker.domain.dashboard import CompletionRate, DashboardSummary
from health_tracker.domain.records import RecordKind
from health_tracker.services.achievements import (
    EXERCISE_CATEGORY,
    REFLECTION_CATEGORY,
    TRACKING_CATEGORY,
    build_completion_rate,
    fallback_completion_rate,
    score_meals,
    score_presence,
)
from health_tracker.services.dates import subtract_months
from health_tracker.services.streaks import calculate_streaks

logger = logging.getLogger(__name__)


class DashboardRepository(Protocol):
    """Read-only queries over a user's active records."""

    def list_activity_dates(self, user_id: UUID) -> set[date]:
        """Return every date with at least one active record of any kind."""

    def count_meals_by_type(self, user_id: UUID, day: date) -> dict[str, int]:
        """Return active meal counts per meal type for a day."""

    def count_records(self, user_id: UUID, day: date, kind: RecordKind) -> int:
        """Return the number of active records of one kind on a day."""

    def first_activity_date(self, user_id: UUID) -> date | None:
        """Return the creation date of the user's oldest active record."""

    def latest_weight(
        self, user_id: UUID, on_or_before: date | None = None
    ) -> float | None:
        """Return the most recent recorded weight, optionally bounded by date."""


@dataclass
class DashboardService:
    """Computes dashboard analytics for one user at a time."""

    repository: DashboardRepository

    async def get_achievement(self, user_id: UUID, day: date) -> CompletionRate:
        """Score a day's goals across meals, exercise, tracking and reflection.

        Data-access failures produce a zero-valued result instead of an error.
        Cancellation propagates.
        """
        logger.info(
            "Calculating achievement rate",
            extra={"user_id": str(user_id), "day": day.isoformat()},
        )
        try:
            meal_counts, exercise_count, body_count, diary_count = (
                await asyncio.gather(
                    asyncio.to_thread(
                        self.repository.count_meals_by_type, user_id, day
                    ),
                    asyncio.to_thread(
                        self.repository.count_records,
                        user_id,
                        day,
                        RecordKind.EXERCISE,
                    ),
                    asyncio.to_thread(
                        self.repository.count_records,
                        user_id,
                        day,
                        RecordKind.BODY_RECORD,
                    ),
                    asyncio.to_thread(
                        self.repository.count_records, user_id, day, RecordKind.DIARY
                    ),
                )
            )
        except Exception:
            logger.warning(
                "Failed to calculate achievement rate",
                extra={"user_id": str(user_id), "day": day.isoformat()},
                exc_info=True,
            )
            return fallback_completion_rate()

        result = build_completion_rate(
            [
                score_meals(meal_counts),
                score_presence(EXERCISE_CATEGORY, exercise_count),
                score_presence(TRACKING_CATEGORY, body_count),
                score_presence(REFLECTION_CATEGORY, diary_count),
            ]
        )
        logger.info(
            "Achievement calculation completed: %s%% (%s/%s)",
            result.rate,
            result.breakdown.completed_goals,
            result.breakdown.total_goals,
        )
        return result

    async def get_summary(self, user_id: UUID, today: date) -> DashboardSummary:
        """Return streaks, active days and weight trend for a user."""
        month_ago = subtract_months(today, 1)
        try:
            activity_dates, first_day, current_weight, previous_weight = (
                await asyncio.gather(
                    asyncio.to_thread(self.repository.list_activity_dates, user_id),
                    asyncio.to_thread(self.repository.first_activity_date, user_id),
                    asyncio.to_thread(self.repository.latest_weight, user_id),
                    asyncio.to_thread(
                        self.repository.latest_weight, user_id, month_ago
                    ),
                )
            )
        except Exception:
            logger.warning(
                "Failed to calculate dashboard summary",
                extra={"user_id": str(user_id)},
                exc_info=True,
            )
            return DashboardSummary()

        streaks = calculate_streaks(activity_dates, today)
        weight_change = None
        if current_weight is not None and previous_weight is not None:
            weight_change = round(current_weight - previous_weight, 2)
        total_active_days = (today - first_day).days + 1 if first_day else 0
        return DashboardSummary(
            current_streak=streaks.current,
            best_streak=streaks.best,
            total_active_days=max(total_active_days, 0),
            current_weight=current_weight,
            weight_change=weight_change,
        )
