"""Exercise routes."""

from typing import Any

from fastapi import Depends

from health_tracker.api.records import build_record_router, common_filters
from health_tracker.api.schemas import ExerciseCreate, ExerciseUpdate
from health_tracker.domain.pagination import RecordQuery


def exercise_query(  # noqa: PLR0913
    category: str | None = None,
    search: str | None = None,
    min_duration: int | None = None,
    max_duration: int | None = None,
    min_calories: int | None = None,
    max_calories: int | None = None,
    base: dict[str, Any] = Depends(common_filters),
) -> RecordQuery:
    return RecordQuery(
        **base,
        category=category,
        search=search.strip() if search and search.strip() else None,
        min_duration=min_duration,
        max_duration=max_duration,
        min_calories=min_calories,
        max_calories=max_calories,
    )


router = build_record_router(
    prefix="/api/exercises",
    service_name="exercise_service",
    create_model=ExerciseCreate,
    update_model=ExerciseUpdate,
    list_query=exercise_query,
)
