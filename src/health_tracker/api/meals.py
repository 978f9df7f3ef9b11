"""Meal routes."""

from typing import Any

from fastapi import Depends

from health_tracker.api.records import build_record_router, common_filters
from health_tracker.api.schemas import MealCreate, MealUpdate
from health_tracker.domain.pagination import RecordQuery
from health_tracker.domain.records import MealType


def meal_query(
    meal_type: MealType | None = None,
    base: dict[str, Any] = Depends(common_filters),
) -> RecordQuery:
    return RecordQuery(**base, meal_type=meal_type.value if meal_type else None)


router = build_record_router(
    prefix="/api/meals",
    service_name="meal_service",
    create_model=MealCreate,
    update_model=MealUpdate,
    list_query=meal_query,
)
