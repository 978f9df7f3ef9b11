"""Current user profile routes."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from health_tracker.api.dependencies import (
    current_user_id,
    get_container,
    require_api_token,
)
from health_tracker.api.schemas import UserUpdate, to_payload
from health_tracker.api.serializers import serialize_user

if TYPE_CHECKING:
    from health_tracker.containers import AppContainer

router = APIRouter(
    prefix="/api/users",
    tags=["users"],
    dependencies=[Depends(require_api_token)],
)


@router.get("/me")
async def get_me(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return the acting user's profile."""
    container: AppContainer = get_container(request)
    return serialize_user(container.user_service.get_user(user_id))


@router.patch("/me")
async def update_me(
    body: UserUpdate, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Update the acting user's profile."""
    container: AppContainer = get_container(request)
    user = container.user_service.update_profile(user_id, to_payload(body))
    return serialize_user(user)
