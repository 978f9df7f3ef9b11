"""Domain models for tracked health records."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID


class RecordKind(StrEnum):
    """The four kinds of records a user can log."""

    MEAL = "meal"
    EXERCISE = "exercise"
    BODY_RECORD = "body_record"
    DIARY = "diary"


class MealType(StrEnum):
    """Meal slots within a day."""

    MORNING = "Morning"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


MAIN_MEAL_TYPES = (MealType.MORNING, MealType.LUNCH, MealType.DINNER)
MEAL_TYPE_ORDER = {meal_type: index for index, meal_type in enumerate(MealType)}


@dataclass(frozen=True)
class Active:
    """Deletion state of a record visible to default queries."""


@dataclass(frozen=True)
class Deleted:
    """Deletion state of a soft-deleted record."""

    at: datetime
    by: UUID | None = None


DeletionState = Active | Deleted

ACTIVE = Active()


@dataclass(frozen=True, kw_only=True)
class AuditedRecord:
    """Fields shared by every user-owned record."""

    id: UUID
    user_id: UUID
    created_at: datetime
    updated_at: datetime | None = None
    state: DeletionState = ACTIVE

    @property
    def is_deleted(self) -> bool:
        return isinstance(self.state, Deleted)


@dataclass(frozen=True, kw_only=True)
class MealRecord(AuditedRecord):
    """A meal photo logged for a meal slot."""

    meal_type: str
    meal_date: date
    image_url: str


@dataclass(frozen=True, kw_only=True)
class ExerciseRecord(AuditedRecord):
    """A single exercise session."""

    title: str
    duration_minutes: int
    calories_burned: int
    exercise_date: date
    description: str | None = None
    category: str | None = None
    notes: str | None = None


@dataclass(frozen=True, kw_only=True)
class BodyRecord(AuditedRecord):
    """A body metric measurement."""

    weight: float
    record_date: date
    body_fat_percentage: float | None = None
    notes: str | None = None


@dataclass(frozen=True, kw_only=True)
class DiaryEntry(AuditedRecord):
    """A free-form reflection entry."""

    title: str
    content: str
    diary_date: date
    tags: str | None = None
    mood: str | None = None
    is_private: bool = True
