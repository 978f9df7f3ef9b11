"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from health_tracker.api.dependencies import get_container

if TYPE_CHECKING:
    from health_tracker.containers import AppContainer


def _get_admin_token(request: Request) -> str:
    return get_container(request).settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


router = APIRouter(
    prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)]
)


@router.get("/health")
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/users")
async def list_users(request: Request) -> dict[str, object]:
    """Return users with their recent activity counts."""
    container: AppContainer = get_container(request)
    return {"users": container.admin_service.list_users()}


@router.get("/users/{user_id}")
async def user_detail(user_id: UUID, request: Request) -> dict[str, object]:
    """Return a user's activity range and recent audit trail."""
    container: AppContainer = get_container(request)
    return container.admin_service.get_user_detail(user_id)
