"""Exercise tracking service."""

from dataclasses import dataclass
from typing import ClassVar

from health_tracker.domain.records import ExerciseRecord
from health_tracker.services.records import RecordService


@dataclass
class ExerciseService(RecordService[ExerciseRecord]):
    """Service for exercise sessions."""

    entity_type: ClassVar[str] = "exercise"
