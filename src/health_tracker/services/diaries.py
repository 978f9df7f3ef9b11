"""Diary service."""

from dataclasses import dataclass
from typing import ClassVar

from health_tracker.domain.records import DiaryEntry
from health_tracker.services.records import RecordService


@dataclass
class DiaryService(RecordService[DiaryEntry]):
    """Service for diary entries."""

    entity_type: ClassVar[str] = "diary"
