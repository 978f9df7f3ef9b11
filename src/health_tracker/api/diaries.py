"""Diary routes."""

from typing import Any

from fastapi import Depends

from health_tracker.api.records import build_record_router, common_filters
from health_tracker.api.schemas import DiaryCreate, DiaryUpdate
from health_tracker.domain.pagination import RecordQuery


def diary_query(
    mood: str | None = None,
    search: str | None = None,
    base: dict[str, Any] = Depends(common_filters),
) -> RecordQuery:
    return RecordQuery(
        **base,
        mood=mood,
        search=search.strip() if search and search.strip() else None,
    )


router = build_record_router(
    prefix="/api/diaries",
    service_name="diary_service",
    create_model=DiaryCreate,
    update_model=DiaryUpdate,
    list_query=diary_query,
)
