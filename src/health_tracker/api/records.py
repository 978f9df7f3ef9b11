"""CRUD routes shared by every record type."""

from collections.abc import Callable
from datetime import date
from typing import Any, Literal
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response, status
from pydantic import BaseModel

from health_tracker.api.dependencies import (
    current_user_id,
    get_container,
    require_api_token,
)
from health_tracker.api.schemas import to_payload
from health_tracker.api.serializers import serialize_page, serialize_record
from health_tracker.domain.pagination import (
    DEFAULT_PAGE_SIZE,
    PageRequest,
    RecordQuery,
)
from health_tracker.services.records import RecordService


def common_filters(
    page: int = Query(default=1),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE),
    start_date: date | None = None,
    end_date: date | None = None,
    sort: Literal["asc", "desc"] = "desc",
) -> dict[str, Any]:
    """Pagination, date range and sort order accepted by every listing."""
    return {
        "page": PageRequest(page=page, page_size=page_size),
        "start_date": start_date,
        "end_date": end_date,
        "ascending": sort == "asc",
    }


def plain_query(base: dict[str, Any] = Depends(common_filters)) -> RecordQuery:
    return RecordQuery(**base)


def build_record_router(  # noqa: PLR0913
    *,
    prefix: str,
    service_name: str,
    create_model: type[BaseModel],
    update_model: type[BaseModel],
    list_query: Callable[..., RecordQuery] = plain_query,
    router: APIRouter | None = None,
) -> APIRouter:
    """Attach list/create/get/update/delete routes for one record type."""
    router = router or APIRouter(
        prefix=prefix,
        tags=[prefix.strip("/").rsplit("/", maxsplit=1)[-1]],
        dependencies=[Depends(require_api_token)],
    )

    def _service(request: Request) -> RecordService:
        return getattr(get_container(request), service_name)

    @router.get("")
    async def list_records(
        request: Request,
        query: RecordQuery = Depends(list_query),
        user_id: UUID = Depends(current_user_id),
    ) -> dict[str, object]:
        """Return a page of the current user's records."""
        return serialize_page(_service(request).list_records(user_id, query))

    @router.post("", status_code=status.HTTP_201_CREATED)
    async def create_record(
        body: create_model,  # type: ignore[valid-type]
        request: Request,
        user_id: UUID = Depends(current_user_id),
    ) -> dict[str, object]:
        """Create a record for the current user."""
        record = _service(request).create(user_id, body.model_dump())
        return serialize_record(record)

    @router.get("/{record_id}")
    async def get_record(
        record_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
    ) -> dict[str, object]:
        """Return one of the current user's records."""
        return serialize_record(_service(request).get(user_id, record_id))

    @router.patch("/{record_id}")
    async def update_record(
        record_id: UUID,
        body: update_model,  # type: ignore[valid-type]
        request: Request,
        user_id: UUID = Depends(current_user_id),
    ) -> dict[str, object]:
        """Apply a partial update to one of the current user's records."""
        record = _service(request).update(user_id, record_id, to_payload(body))
        return serialize_record(record)

    @router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_record(
        record_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
    ) -> Response:
        """Soft-delete one of the current user's records."""
        _service(request).delete(user_id, record_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
