"""Body record routes."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from health_tracker.api.dependencies import (
    current_user_id,
    get_container,
    require_api_token,
)
from health_tracker.api.records import build_record_router
from health_tracker.api.schemas import BodyRecordCreate, BodyRecordUpdate
from health_tracker.api.serializers import serialize_graph

if TYPE_CHECKING:
    from health_tracker.containers import AppContainer

router = APIRouter(
    prefix="/api/body-records",
    tags=["body-records"],
    dependencies=[Depends(require_api_token)],
)


@router.get("/graph")
async def body_record_graph(
    request: Request,
    start_date: date | None = None,
    end_date: date | None = None,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return weight and body fat points for a date range."""
    container: AppContainer = get_container(request)
    points = container.body_record_service.get_graph(user_id, start_date, end_date)
    return serialize_graph(points)


build_record_router(
    prefix="/api/body-records",
    service_name="body_record_service",
    create_model=BodyRecordCreate,
    update_model=BodyRecordUpdate,
    router=router,
)
