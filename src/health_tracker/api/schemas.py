"""Pydantic request models for the REST API."""

from datetime import date
from typing import ClassVar
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from health_tracker.domain.records import MealType


class _RequestModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid", str_strip_whitespace=True, use_enum_values=True
    )


class _PartialUpdate(_RequestModel):
    not_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _reject_nulls(self) -> "_PartialUpdate":
        nulls = [
            name
            for name in self.not_nullable
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self


class MealCreate(_RequestModel):
    """Payload for logging a meal."""

    meal_type: MealType
    meal_date: date
    image_url: str = Field(min_length=1, max_length=500)


class MealUpdate(_PartialUpdate):
    """Partial update for a meal."""

    not_nullable = ("meal_type", "meal_date", "image_url")

    meal_type: MealType | None = None
    meal_date: date | None = None
    image_url: str | None = Field(default=None, min_length=1, max_length=500)


class ExerciseCreate(_RequestModel):
    """Payload for logging an exercise session."""

    title: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    duration_minutes: int = Field(ge=1)
    calories_burned: int = Field(default=0, ge=0, le=10000)
    exercise_date: date
    category: str | None = Field(default=None, max_length=100)
    notes: str | None = Field(default=None, max_length=500)


class ExerciseUpdate(_PartialUpdate):
    """Partial update for an exercise session."""

    not_nullable = ("title", "duration_minutes", "calories_burned", "exercise_date")

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    duration_minutes: int | None = Field(default=None, ge=1)
    calories_burned: int | None = Field(default=None, ge=0, le=10000)
    exercise_date: date | None = None
    category: str | None = Field(default=None, max_length=100)
    notes: str | None = Field(default=None, max_length=500)


class BodyRecordCreate(_RequestModel):
    """Payload for recording body metrics."""

    weight: float = Field(gt=0, le=500)
    body_fat_percentage: float | None = Field(default=None, ge=0, le=100)
    record_date: date
    notes: str | None = Field(default=None, max_length=500)


class BodyRecordUpdate(_PartialUpdate):
    """Partial update for body metrics."""

    not_nullable = ("weight", "record_date")

    weight: float | None = Field(default=None, gt=0, le=500)
    body_fat_percentage: float | None = Field(default=None, ge=0, le=100)
    record_date: date | None = None
    notes: str | None = Field(default=None, max_length=500)


class DiaryCreate(_RequestModel):
    """Payload for writing a diary entry."""

    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    tags: str | None = Field(default=None, max_length=500)
    mood: str | None = Field(default=None, max_length=100)
    is_private: bool = True
    diary_date: date


class DiaryUpdate(_PartialUpdate):
    """Partial update for a diary entry."""

    not_nullable = ("title", "content", "is_private", "diary_date")

    title: str | None = Field(default=None, min_length=1, max_length=200)
    content: str | None = Field(default=None, min_length=1)
    tags: str | None = Field(default=None, max_length=500)
    mood: str | None = Field(default=None, max_length=100)
    is_private: bool | None = None
    diary_date: date | None = None


class UserUpdate(_PartialUpdate):
    """Partial update for the current user's profile."""

    not_nullable = ("first_name", "last_name")

    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    timezone: str | None = Field(default=None, max_length=64)

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str | None) -> str | None:
        if value is None:
            return value
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value


def to_payload(model: BaseModel) -> dict[str, object]:
    """Return the fields a client actually sent on a partial update."""
    return model.model_dump(exclude_unset=True)
