"""Tests for dashboard analytics."""

import asyncio
import logging
import threading
from dataclasses import dataclass, field
from datetime import date, timedelta
from uuid import UUID, uuid4

import pytest

from health_tracker.domain.records import MealType
from health_tracker.services.achievements import FALLBACK_MESSAGE
from health_tracker.services.dashboard import DashboardService
from tests.conftest import (
    FailingDashboardRepository,
    InMemoryDashboardRepository,
    make_body_record,
    make_diary,
    make_exercise,
    make_meal,
)

DAY = date(2024, 3, 15)


def test_achievement_for_mixed_day() -> None:
    user_id = uuid4()
    repository = InMemoryDashboardRepository()
    repository.meals.add(make_meal(user_id, MealType.MORNING, DAY))
    repository.meals.add(make_meal(user_id, MealType.LUNCH, DAY))
    repository.exercises.add(make_exercise(user_id, DAY))
    repository.exercises.add(make_exercise(user_id, DAY, title="Swim"))
    repository.body_records.add(make_body_record(user_id, DAY, 70.5))

    result = asyncio.run(DashboardService(repository).get_achievement(user_id, DAY))

    assert result.rate == 66.7
    statuses = {c.category: (c.completed, c.total) for c in result.breakdown.categories}
    assert statuses == {
        "Daily Meals": (2, 3),
        "Exercise": (1, 1),
        "Body Tracking": (1, 1),
        "Daily Reflection": (0, 1),
    }


def test_achievement_without_records() -> None:
    service = DashboardService(InMemoryDashboardRepository())

    result = asyncio.run(service.get_achievement(uuid4(), DAY))

    assert result.rate == 0
    assert result.breakdown.total_goals == 6
    assert result.message.startswith("New day")


def test_achievement_ignores_deleted_and_other_days() -> None:
    user_id = uuid4()
    repository = InMemoryDashboardRepository()
    diary = repository.diaries.add(make_diary(user_id, DAY))
    repository.diaries.soft_delete(diary.id, user_id, diary.created_at)
    repository.exercises.add(make_exercise(user_id, DAY - timedelta(days=1)))
    repository.meals.add(make_meal(uuid4(), MealType.DINNER, DAY))

    result = asyncio.run(DashboardService(repository).get_achievement(user_id, DAY))

    assert result.rate == 0
    assert result.breakdown.completed_goals == 0


def test_achievement_is_idempotent() -> None:
    user_id = uuid4()
    repository = InMemoryDashboardRepository()
    repository.meals.add(make_meal(user_id, MealType.DINNER, DAY))
    repository.diaries.add(make_diary(user_id, DAY))
    service = DashboardService(repository)

    first = asyncio.run(service.get_achievement(user_id, DAY))
    second = asyncio.run(service.get_achievement(user_id, DAY))

    assert first == second


def test_achievement_falls_back_when_reads_fail(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(logging.getLogger("health_tracker"), "propagate", True)
    service = DashboardService(FailingDashboardRepository())

    with caplog.at_level("WARNING", logger="health_tracker.services.dashboard"):
        result = asyncio.run(service.get_achievement(uuid4(), DAY))

    assert result.rate == 0
    assert result.message == FALLBACK_MESSAGE
    assert result.breakdown.categories == []
    assert "Failed to calculate achievement rate" in caplog.text


@dataclass
class BlockingDashboardRepository(InMemoryDashboardRepository):
    """Blocks meal reads until released."""

    started: threading.Event = field(default_factory=threading.Event)
    release: threading.Event = field(default_factory=threading.Event)

    def count_meals_by_type(self, user_id: UUID, day: date) -> dict[str, int]:
        self.started.set()
        self.release.wait(timeout=5)
        return super().count_meals_by_type(user_id, day)


def test_achievement_propagates_cancellation() -> None:
    repository = BlockingDashboardRepository()
    service = DashboardService(repository)

    async def scenario() -> None:
        task = asyncio.create_task(service.get_achievement(uuid4(), DAY))
        await asyncio.to_thread(repository.started.wait, 5)
        task.cancel()
        try:
            with pytest.raises(asyncio.CancelledError):
                await task
        finally:
            repository.release.set()

    asyncio.run(scenario())


def test_summary_reports_streaks_and_weight_change() -> None:
    user_id = uuid4()
    repository = InMemoryDashboardRepository()
    repository.body_records.add(make_body_record(user_id, date(2024, 2, 10), 80.0))
    repository.body_records.add(make_body_record(user_id, date(2024, 3, 14), 78.5))
    repository.meals.add(make_meal(user_id, MealType.MORNING, DAY))

    summary = asyncio.run(DashboardService(repository).get_summary(user_id, DAY))

    assert summary.current_streak == 2
    assert summary.best_streak == 2
    assert summary.current_weight == 78.5
    assert summary.weight_change == -1.5
    assert summary.total_active_days == (DAY - date(2024, 2, 10)).days + 1


def test_summary_for_new_user() -> None:
    summary = asyncio.run(
        DashboardService(InMemoryDashboardRepository()).get_summary(uuid4(), DAY)
    )

    assert summary.current_streak == 0
    assert summary.best_streak == 0
    assert summary.total_active_days == 0
    assert summary.current_weight is None
    assert summary.weight_change is None


def test_summary_falls_back_when_reads_fail() -> None:
    service = DashboardService(FailingDashboardRepository())

    summary = asyncio.run(service.get_summary(uuid4(), DAY))

    assert summary.current_streak == 0
    assert summary.total_active_days == 0
