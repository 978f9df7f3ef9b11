"""Domain models for dashboard analytics."""

from dataclasses import dataclass, field
from datetime import date

from health_tracker.domain.records import MealRecord


@dataclass(frozen=True)
class GoalCategoryStatus:
    """Completion of one daily goal category."""

    category: str
    completed: int
    total: int
    percentage: float


@dataclass(frozen=True)
class GoalBreakdown:
    """Per-category completion for a day."""

    completed_goals: int = 0
    total_goals: int = 0
    categories: list[GoalCategoryStatus] = field(default_factory=list)


@dataclass(frozen=True)
class CompletionRate:
    """Overall daily goal completion."""

    rate: float
    message: str
    breakdown: GoalBreakdown


@dataclass(frozen=True)
class StreakStats:
    """Current and longest runs of consecutive activity days."""

    current: int
    best: int


@dataclass(frozen=True)
class DashboardSummary:
    """Headline engagement numbers."""

    current_streak: int = 0
    best_streak: int = 0
    total_active_days: int = 0
    current_weight: float | None = None
    weight_change: float | None = None


@dataclass(frozen=True)
class MealStatistics:
    """Meal counts for a single day."""

    total_meals: int
    meal_type_count: dict[str, int]
    completion_percentage: float


@dataclass(frozen=True)
class MealHistory:
    """Meals for a day and their statistics."""

    day: date
    meals: list[MealRecord]
    statistics: MealStatistics


@dataclass(frozen=True)
class WeightPoint:
    """A single point on the weight chart."""

    day: date
    weight: float
    body_fat: float | None
