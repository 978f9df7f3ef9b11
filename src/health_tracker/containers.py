"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from health_tracker.adapters.supabase_admin_repository import SupabaseAdminRepository
from health_tracker.adapters.supabase_audit_repository import SupabaseAuditRepository
from health_tracker.adapters.supabase_body_record_repository import (
    SupabaseBodyRecordRepository,
)
from health_tracker.adapters.supabase_dashboard_repository import (
    SupabaseDashboardRepository,
)
from health_tracker.adapters.supabase_diary_repository import SupabaseDiaryRepository
from health_tracker.adapters.supabase_exercise_repository import (
    SupabaseExerciseRepository,
)
from health_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from health_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from health_tracker.config import Settings
from health_tracker.services.admin import AdminService
from health_tracker.services.audit import AuditService
from health_tracker.services.body_records import BodyRecordService
from health_tracker.services.dashboard import DashboardService
from health_tracker.services.diaries import DiaryService
from health_tracker.services.exercises import ExerciseService
from health_tracker.services.meals import MealService
from health_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    meal_service: MealService
    exercise_service: ExerciseService
    body_record_service: BodyRecordService
    diary_service: DiaryService
    dashboard_service: DashboardService
    admin_service: AdminService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    audit_service = AuditService(SupabaseAuditRepository(supabase_client))
    dashboard_repository = SupabaseDashboardRepository(supabase_client)

    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(SupabaseUserRepository(supabase_client)),
        meal_service=MealService(
            repository=SupabaseMealRepository(supabase_client),
            audit_service=audit_service,
        ),
        exercise_service=ExerciseService(
            repository=SupabaseExerciseRepository(supabase_client),
            audit_service=audit_service,
        ),
        body_record_service=BodyRecordService(
            repository=SupabaseBodyRecordRepository(supabase_client),
            audit_service=audit_service,
        ),
        diary_service=DiaryService(
            repository=SupabaseDiaryRepository(supabase_client),
            audit_service=audit_service,
        ),
        dashboard_service=DashboardService(dashboard_repository),
        admin_service=AdminService(
            admin_repository=SupabaseAdminRepository(supabase_client),
            dashboard_repository=dashboard_repository,
        ),
    )
