"""Dashboard routes: achievements, summary, today's meals and weight chart."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request
from fastapi.encoders import jsonable_encoder

from health_tracker.api.dependencies import (
    current_user_id,
    get_container,
    require_api_token,
)
from health_tracker.api.serializers import serialize_graph, serialize_meal_history
from health_tracker.domain.records import MealType
from health_tracker.services.dates import today_in

if TYPE_CHECKING:
    from health_tracker.containers import AppContainer

router = APIRouter(
    prefix="/api/dashboard",
    tags=["dashboard"],
    dependencies=[Depends(require_api_token)],
)


def _user_today(container: AppContainer, user_id: UUID) -> date:
    return today_in(container.user_service.get_timezone(user_id))


@router.get("/achievements")
async def achievements(
    request: Request,
    day: date | None = Query(default=None, alias="date"),
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return the completion rate of the day's goals."""
    container: AppContainer = get_container(request)
    target = day or _user_today(container, user_id)
    result = await container.dashboard_service.get_achievement(user_id, target)
    return jsonable_encoder(asdict(result))


@router.get("/summary")
async def summary(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return streaks, active days and the weight trend."""
    container: AppContainer = get_container(request)
    result = await container.dashboard_service.get_summary(
        user_id, _user_today(container, user_id)
    )
    return jsonable_encoder(asdict(result))


@router.get("/meals-today")
async def meals_today(
    request: Request,
    meal_type: MealType | None = Query(default=None, alias="type"),
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return today's meals in slot order with daily meal statistics."""
    container: AppContainer = get_container(request)
    history = container.meal_service.get_day_history(
        user_id,
        _user_today(container, user_id),
        meal_type.value if meal_type else None,
    )
    return serialize_meal_history(history)


@router.get("/weight-chart")
async def weight_chart(
    request: Request,
    months: int = 3,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return weight points for the last few months."""
    container: AppContainer = get_container(request)
    points = container.body_record_service.get_weight_chart(
        user_id, _user_today(container, user_id), months
    )
    return serialize_graph(points)
