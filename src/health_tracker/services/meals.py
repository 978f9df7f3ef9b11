"""Meal logging service."""

from collections import Counter
from dataclasses import dataclass
from datetime import date
from typing import ClassVar, Protocol
from uuid import UUID

from health_tracker.domain.dashboard import MealHistory, MealStatistics
from health_tracker.domain.records import (
    MAIN_MEAL_TYPES,
    MEAL_TYPE_ORDER,
    MealRecord,
    MealType,
)
from health_tracker.services.records import RecordRepository, RecordService


class MealRepository(RecordRepository[MealRecord], Protocol):
    """Persistence interface for meals."""

    def list_for_day(self, user_id: UUID, day: date) -> list[MealRecord]:
        """Return every active meal a user logged on a day."""


@dataclass
class MealService(RecordService[MealRecord]):
    """Service for meal records and daily meal history."""

    repository: MealRepository

    entity_type: ClassVar[str] = "meal"

    def get_day_history(
        self, user_id: UUID, day: date, meal_type: str | None = None
    ) -> MealHistory:
        """Return a day's meals in slot order along with meal statistics."""
        meals = self.repository.list_for_day(user_id, day)
        selected = [
            meal for meal in meals if meal_type is None or meal.meal_type == meal_type
        ]
        return MealHistory(
            day=day,
            meals=sorted(selected, key=_meal_sort_key),
            statistics=_meal_statistics(meals),
        )


def _meal_sort_key(meal: MealRecord) -> tuple[int, float]:
    order = MEAL_TYPE_ORDER.get(meal.meal_type, len(MEAL_TYPE_ORDER))
    return order, -meal.created_at.timestamp()


def _meal_statistics(meals: list[MealRecord]) -> MealStatistics:
    counts = Counter(meal.meal_type for meal in meals)
    meal_type_count = {meal_type.value: 0 for meal_type in MealType}
    meal_type_count.update(counts)
    completed = sum(1 for meal_type in MAIN_MEAL_TYPES if counts[meal_type] > 0)
    return MealStatistics(
        total_meals=len(meals),
        meal_type_count=meal_type_count,
        completion_percentage=round(completed / len(MAIN_MEAL_TYPES) * 100, 1),
    )
