"""Shared test fixtures."""

from collections import Counter
from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime
from typing import ClassVar, Generic, TypeVar
from uuid import UUID, uuid4

import pytest

from health_tracker.config import Settings
from health_tracker.containers import AppContainer
from health_tracker.domain.admin import AdminUser
from health_tracker.domain.models import UserRecord
from health_tracker.domain.pagination import Page, RecordQuery
from health_tracker.domain.records import (
    AuditedRecord,
    BodyRecord,
    Deleted,
    DiaryEntry,
    ExerciseRecord,
    MealRecord,
    RecordKind,
)
from health_tracker.services.admin import AdminRepository, AdminService
from health_tracker.services.audit import AuditRepository, AuditService
from health_tracker.services.body_records import (
    BodyRecordRepository,
    BodyRecordService,
)
from health_tracker.services.dashboard import DashboardRepository, DashboardService
from health_tracker.services.diaries import DiaryService
from health_tracker.services.exercises import ExerciseService
from health_tracker.services.meals import MealRepository, MealService
from health_tracker.services.records import RecordRepository
from health_tracker.services.users import UserRepository, UserService

RecordT = TypeVar("RecordT", bound=AuditedRecord)

API_HEADERS = {"X-Api-Token": "api-token"}


def _now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class InMemoryRecordRepository(Generic[RecordT]):
    """In-memory record table with soft delete."""

    records: dict[UUID, RecordT] = field(default_factory=dict)

    record_type: ClassVar[type]
    date_field: ClassVar[str]

    def add(self, record: RecordT) -> RecordT:
        self.records[record.id] = record
        return record

    def create(self, user_id: UUID, payload: dict[str, object]) -> RecordT:
        record = self.record_type(
            id=uuid4(), user_id=user_id, created_at=_now(), **payload
        )
        return self.add(record)

    def get(self, record_id: UUID) -> RecordT | None:
        record = self.records.get(record_id)
        if record is None or record.is_deleted:
            return None
        return record

    def active_for(self, user_id: UUID) -> list[RecordT]:
        return [
            record
            for record in self.records.values()
            if record.user_id == user_id and not record.is_deleted
        ]

    def list_records(self, user_id: UUID, query: RecordQuery) -> Page[RecordT]:
        items = [
            record for record in self.active_for(user_id) if self.matches(record, query)
        ]
        items.sort(
            key=lambda record: (getattr(record, self.date_field), record.created_at),
            reverse=not query.ascending,
        )
        start = query.page.offset
        return Page.create(
            items[start : start + query.page.limit], len(items), query.page
        )

    def matches(self, record: RecordT, query: RecordQuery) -> bool:
        day = getattr(record, self.date_field)
        if query.start_date and day < query.start_date:
            return False
        return not (query.end_date and day > query.end_date)

    def update(self, record_id: UUID, payload: dict[str, object]) -> RecordT:
        record = replace(self.records[record_id], **payload, updated_at=_now())
        return self.add(record)

    def soft_delete(
        self, record_id: UUID, deleted_by: UUID, deleted_at: datetime
    ) -> None:
        record = self.records[record_id]
        self.records[record_id] = replace(
            record, state=Deleted(at=deleted_at, by=deleted_by)
        )


@dataclass
class InMemoryMealRepository(InMemoryRecordRepository[MealRecord], MealRepository):
    """In-memory meal repository for tests."""

    record_type: ClassVar[type] = MealRecord
    date_field: ClassVar[str] = "meal_date"

    def list_for_day(self, user_id: UUID, day: date) -> list[MealRecord]:
        return [meal for meal in self.active_for(user_id) if meal.meal_date == day]

    def matches(self, record: MealRecord, query: RecordQuery) -> bool:
        if query.meal_type and record.meal_type != query.meal_type:
            return False
        return super().matches(record, query)


@dataclass
class InMemoryExerciseRepository(
    InMemoryRecordRepository[ExerciseRecord], RecordRepository[ExerciseRecord]
):
    """In-memory exercise repository for tests."""

    record_type: ClassVar[type] = ExerciseRecord
    date_field: ClassVar[str] = "exercise_date"

    def matches(self, record: ExerciseRecord, query: RecordQuery) -> bool:
        checks = [
            query.category is None or record.category == query.category,
            query.min_duration is None
            or record.duration_minutes >= query.min_duration,
            query.max_duration is None
            or record.duration_minutes <= query.max_duration,
            query.min_calories is None or record.calories_burned >= query.min_calories,
            query.max_calories is None or record.calories_burned <= query.max_calories,
        ]
        if query.search:
            needle = query.search.lower()
            checks.append(
                needle in record.title.lower()
                or needle in (record.description or "").lower()
            )
        return all(checks) and super().matches(record, query)


@dataclass
class InMemoryBodyRecordRepository(
    InMemoryRecordRepository[BodyRecord], BodyRecordRepository
):
    """In-memory body record repository for tests."""

    record_type: ClassVar[type] = BodyRecord
    date_field: ClassVar[str] = "record_date"

    def list_between(
        self, user_id: UUID, start: date | None, end: date | None
    ) -> list[BodyRecord]:
        return sorted(
            (
                record
                for record in self.active_for(user_id)
                if (start is None or record.record_date >= start)
                and (end is None or record.record_date <= end)
            ),
            key=lambda record: record.record_date,
        )


@dataclass
class InMemoryDiaryRepository(
    InMemoryRecordRepository[DiaryEntry], RecordRepository[DiaryEntry]
):
    """In-memory diary repository for tests."""

    record_type: ClassVar[type] = DiaryEntry
    date_field: ClassVar[str] = "diary_date"

    def matches(self, record: DiaryEntry, query: RecordQuery) -> bool:
        if query.mood and record.mood != query.mood:
            return False
        if query.search:
            needle = query.search.lower()
            text = f"{record.title} {record.content}".lower()
            if needle not in text:
                return False
        return super().matches(record, query)


@dataclass
class InMemoryDashboardRepository(DashboardRepository):
    """Dashboard reads over the in-memory record repositories."""

    meals: InMemoryMealRepository = field(default_factory=InMemoryMealRepository)
    exercises: InMemoryExerciseRepository = field(
        default_factory=InMemoryExerciseRepository
    )
    body_records: InMemoryBodyRecordRepository = field(
        default_factory=InMemoryBodyRecordRepository
    )
    diaries: InMemoryDiaryRepository = field(default_factory=InMemoryDiaryRepository)

    def _repository(self, kind: RecordKind) -> InMemoryRecordRepository:
        return {
            RecordKind.MEAL: self.meals,
            RecordKind.EXERCISE: self.exercises,
            RecordKind.BODY_RECORD: self.body_records,
            RecordKind.DIARY: self.diaries,
        }[kind]

    def _active(self, user_id: UUID) -> list[tuple[AuditedRecord, date]]:
        rows = []
        for kind in RecordKind:
            repository = self._repository(kind)
            rows.extend(
                (record, getattr(record, repository.date_field))
                for record in repository.active_for(user_id)
            )
        return rows

    def list_activity_dates(self, user_id: UUID) -> set[date]:
        return {day for _, day in self._active(user_id)}

    def count_meals_by_type(self, user_id: UUID, day: date) -> dict[str, int]:
        return dict(
            Counter(meal.meal_type for meal in self.meals.list_for_day(user_id, day))
        )

    def count_records(self, user_id: UUID, day: date, kind: RecordKind) -> int:
        repository = self._repository(kind)
        return sum(
            1
            for record in repository.active_for(user_id)
            if getattr(record, repository.date_field) == day
        )

    def first_activity_date(self, user_id: UUID) -> date | None:
        created = [record.created_at.date() for record, _ in self._active(user_id)]
        return min(created) if created else None

    def latest_weight(
        self, user_id: UUID, on_or_before: date | None = None
    ) -> float | None:
        records = self.body_records.list_between(user_id, None, on_or_before)
        return records[-1].weight if records else None


@dataclass
class FailingDashboardRepository(DashboardRepository):
    """Dashboard repository whose every read fails."""

    def list_activity_dates(self, user_id: UUID) -> set[date]:
        raise RuntimeError("database unavailable")

    def count_meals_by_type(self, user_id: UUID, day: date) -> dict[str, int]:
        raise RuntimeError("database unavailable")

    def count_records(self, user_id: UUID, day: date, kind: RecordKind) -> int:
        raise RuntimeError("database unavailable")

    def first_activity_date(self, user_id: UUID) -> date | None:
        raise RuntimeError("database unavailable")

    def latest_weight(
        self, user_id: UUID, on_or_before: date | None = None
    ) -> float | None:
        raise RuntimeError("database unavailable")


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)
    touched: list[UUID] = field(default_factory=list)

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)

    def get_by_email(self, email: str) -> UserRecord | None:
        return next(
            (user for user in self.users.values() if user.email == email), None
        )

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        user = UserRecord(id=uuid4(), created_at=_now(), **payload)
        self.users[user.id] = user
        return user

    def update_user(self, user_id: UUID, payload: dict[str, object]) -> UserRecord:
        user = replace(self.users[user_id], **payload)
        self.users[user_id] = user
        return user

    def touch_last_active(self, user_id: UUID) -> None:
        self.touched.append(user_id)


@dataclass
class InMemoryAdminRepository(AdminRepository):
    """In-memory admin repository for tests."""

    users: list[AdminUser] = field(default_factory=list)
    audits: dict[UUID, list[dict[str, object]]] = field(default_factory=dict)

    def list_users(self) -> list[AdminUser]:
        return self.users

    def list_audit_events(self, user_id: UUID, limit: int) -> list[dict[str, object]]:
        return self.audits.get(user_id, [])[:limit]


@dataclass
class InMemoryAuditRepository(AuditRepository):
    """In-memory audit repository for tests."""

    events: list[dict[str, object]] = field(default_factory=list)

    def create_event(  # noqa: PLR0913
        self,
        user_id: UUID,
        entity_type: str,
        entity_id: UUID,
        event_type: str,
        before: dict[str, object] | None,
        after: dict[str, object] | None,
    ) -> None:
        self.events.append(
            {
                "user_id": user_id,
                "entity_type": entity_type,
                "entity_id": entity_id,
                "event_type": event_type,
                "before": before,
                "after": after,
            }
        )


def make_meal(
    user_id: UUID,
    meal_type: str,
    meal_date: date,
    created_at: datetime | None = None,
) -> MealRecord:
    return MealRecord(
        id=uuid4(),
        user_id=user_id,
        created_at=created_at or _now(),
        meal_type=meal_type,
        meal_date=meal_date,
        image_url="https://example.com/meal.jpg",
    )


def make_exercise(  # noqa: PLR0913
    user_id: UUID,
    exercise_date: date,
    title: str = "Morning run",
    duration_minutes: int = 30,
    calories_burned: int = 250,
    category: str | None = "cardio",
) -> ExerciseRecord:
    return ExerciseRecord(
        id=uuid4(),
        user_id=user_id,
        created_at=_now(),
        title=title,
        duration_minutes=duration_minutes,
        calories_burned=calories_burned,
        exercise_date=exercise_date,
        category=category,
    )


def make_body_record(
    user_id: UUID,
    record_date: date,
    weight: float,
    body_fat_percentage: float | None = None,
) -> BodyRecord:
    return BodyRecord(
        id=uuid4(),
        user_id=user_id,
        created_at=datetime.combine(record_date, datetime.min.time(), tzinfo=UTC),
        weight=weight,
        record_date=record_date,
        body_fat_percentage=body_fat_percentage,
    )


def make_diary(
    user_id: UUID, diary_date: date, title: str = "Evening notes"
) -> DiaryEntry:
    return DiaryEntry(
        id=uuid4(),
        user_id=user_id,
        created_at=_now(),
        title=title,
        content="Felt good today.",
        diary_date=diary_date,
    )


def user_headers(user_id: UUID) -> dict[str, str]:
    return {**API_HEADERS, "X-User-Id": str(user_id)}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        api_token="api-token",
        admin_token="admin-token",
    )


@pytest.fixture
def dashboard_repository() -> InMemoryDashboardRepository:
    return InMemoryDashboardRepository()


@pytest.fixture
def audit_repository() -> InMemoryAuditRepository:
    return InMemoryAuditRepository()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def container(
    settings: Settings,
    dashboard_repository: InMemoryDashboardRepository,
    audit_repository: InMemoryAuditRepository,
    user_repository: InMemoryUserRepository,
) -> AppContainer:
    audit_service = AuditService(audit_repository)
    return AppContainer(
        settings=settings,
        user_service=UserService(user_repository),
        meal_service=MealService(
            repository=dashboard_repository.meals, audit_service=audit_service
        ),
        exercise_service=ExerciseService(
            repository=dashboard_repository.exercises, audit_service=audit_service
        ),
        body_record_service=BodyRecordService(
            repository=dashboard_repository.body_records,
            audit_service=audit_service,
        ),
        diary_service=DiaryService(
            repository=dashboard_repository.diaries, audit_service=audit_service
        ),
        dashboard_service=DashboardService(dashboard_repository),
        admin_service=AdminService(
            admin_repository=InMemoryAdminRepository(),
            dashboard_repository=dashboard_repository,
        ),
    )
