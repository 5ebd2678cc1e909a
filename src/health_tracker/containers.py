"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from health_tracker.adapters.supabase_activity_repository import (
    SupabaseActivityRepository,
)
from health_tracker.adapters.supabase_appointment_repository import (
    SupabaseAppointmentRepository,
)
from health_tracker.adapters.supabase_program_repository import (
    SupabaseProgramRepository,
)
from health_tracker.adapters.supabase_recommendation_repository import (
    SupabaseRecommendationRepository,
)
from health_tracker.config import Settings
from health_tracker.services.activities import ActivityService
from health_tracker.services.appointments import AppointmentService
from health_tracker.services.dashboard import DashboardService
from health_tracker.services.programs import ProgramService
from health_tracker.services.recommendations import RecommendationService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    program_service: ProgramService
    activity_service: ActivityService
    appointment_service: AppointmentService
    recommendation_service: RecommendationService
    dashboard_service: DashboardService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    program_repository = SupabaseProgramRepository(supabase_client)
    activity_repository = SupabaseActivityRepository(supabase_client)
    appointment_repository = SupabaseAppointmentRepository(supabase_client)
    recommendation_repository = SupabaseRecommendationRepository(supabase_client)

    program_service = ProgramService(program_repository)
    activity_service = ActivityService(
        repository=activity_repository,
        program_repository=program_repository,
    )
    appointment_service = AppointmentService(appointment_repository)
    recommendation_service = RecommendationService(
        repository=recommendation_repository,
        activity_repository=activity_repository,
        program_repository=program_repository,
    )
    dashboard_service = DashboardService(
        activity_repository=activity_repository,
        appointment_repository=appointment_repository,
        upcoming_limit=resolved_settings.upcoming_appointments_limit,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        program_service=program_service,
        activity_service=activity_service,
        appointment_service=appointment_service,
        recommendation_service=recommendation_service,
        dashboard_service=dashboard_service,
        close_resources=close_resources,
    )
