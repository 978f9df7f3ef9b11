"""Daily goal scoring for the dashboard."""

from collections.abc import Mapping, Sequence

from health_tracker.domain.dashboard import (
    CompletionRate,
    GoalBreakdown,
    GoalCategoryStatus,
)
from health_tracker.domain.records import MAIN_MEAL_TYPES

MEALS_CATEGORY = "Daily Meals"
EXERCISE_CATEGORY = "Exercise"
TRACKING_CATEGORY = "Body Tracking"
REFLECTION_CATEGORY = "Daily Reflection"

FALLBACK_MESSAGE = "Unable to calculate achievement rate at this time"
ZERO_ACTIVITY_MESSAGE = "New day, new opportunities! Start with one small goal."

PERFECT_RATE = 100
EXCELLENT_RATE = 80
GOOD_RATE = 60
ON_TRACK_RATE = 40
STARTED_RATE = 20


def _percentage(completed: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round(completed / total * 100, 1)


def score_meals(meal_counts: Mapping[str, int]) -> GoalCategoryStatus:
    """Score the main meals present on a day."""
    completed = sum(
        1 for meal_type in MAIN_MEAL_TYPES if meal_counts.get(meal_type, 0) > 0
    )
    total = len(MAIN_MEAL_TYPES)
    return GoalCategoryStatus(
        category=MEALS_CATEGORY,
        completed=completed,
        total=total,
        percentage=_percentage(completed, total),
    )


def score_presence(category: str, count: int, total: int = 1) -> GoalCategoryStatus:
    """Score a category whose goal is a number of entries per day."""
    completed = max(0, min(count, total))
    return GoalCategoryStatus(
        category=category,
        completed=completed,
        total=total,
        percentage=_percentage(completed, total),
    )


def motivational_message(rate: float, completed: int, total: int) -> str:
    """Pick a message for an overall completion rate."""
    if rate >= PERFECT_RATE:
        return "Perfect day! You've achieved all your health goals!"
    if rate >= EXCELLENT_RATE:
        return f"Excellent progress! {completed}/{total} goals completed."
    if rate >= GOOD_RATE:
        return f"Good work! {completed}/{total} goals done. Keep pushing!"
    if rate >= ON_TRACK_RATE:
        return f"You're on track! {completed}/{total} goals completed."
    if rate >= STARTED_RATE:
        return f"Getting started! {completed}/{total} goals done. Every step counts!"
    if rate > 0:
        return f"Great start! {completed}/{total} goals completed. Build momentum!"
    return ZERO_ACTIVITY_MESSAGE


def build_completion_rate(categories: Sequence[GoalCategoryStatus]) -> CompletionRate:
    """Combine category scores into an overall completion rate."""
    completed = sum(category.completed for category in categories)
    total = sum(category.total for category in categories)
    rate = completed / total * 100 if total > 0 else 0.0
    return CompletionRate(
        rate=round(rate, 1),
        message=motivational_message(rate, completed, total),
        breakdown=GoalBreakdown(
            completed_goals=completed,
            total_goals=total,
            categories=list(categories),
        ),
    )


def fallback_completion_rate() -> CompletionRate:
    """Zero-valued result returned when scoring cannot read its data."""
    return CompletionRate(rate=0.0, message=FALLBACK_MESSAGE, breakdown=GoalBreakdown())
