"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime, time
from uuid import UUID, uuid4

import pytest

from health_tracker.config import Settings
from health_tracker.containers import AppContainer
from health_tracker.domain.activity import (
    AnalysisResult,
    DailyActivity,
    DailyIntake,
    NutritionLog,
)
from health_tracker.domain.appointments import Appointment
from health_tracker.domain.programs import FitnessProgram
from health_tracker.domain.recommendations import Recommendation, RecommendationCard
from health_tracker.services.activities import ActivityRepository, ActivityService
from health_tracker.services.appointments import (
    AppointmentRepository,
    AppointmentService,
)
from health_tracker.services.dashboard import DashboardService
from health_tracker.services.programs import (
    ProgramGenerator,
    ProgramRepository,
    ProgramService,
)
from health_tracker.services.recommendations import (
    RecommendationRepository,
    RecommendationService,
)

FIXED_NOW = datetime(2024, 5, 1, 8, 30, tzinfo=UTC)
USER_ID = UUID("8a1f9c52-4a0e-4c1b-9d55-2f1a6b7c3e10")


@dataclass
class InMemoryProgramRepository(ProgramRepository):
    """In-memory program repository for tests."""

    programs: list[FitnessProgram] = field(default_factory=list)

    def create_program(self, user_id: UUID, program: FitnessProgram) -> FitnessProgram:
        saved = replace(program, id=uuid4(), user_id=user_id)
        self.programs.append(saved)
        return saved

    def list_programs(self, user_id: UUID) -> list[FitnessProgram]:
        owned = [program for program in self.programs if program.user_id == user_id]
        return sorted(owned, key=lambda program: program.created_at, reverse=True)

    def get_latest_program(self, user_id: UUID) -> FitnessProgram | None:
        programs = self.list_programs(user_id)
        return programs[0] if programs else None

    def delete_program(self, user_id: UUID, program_id: UUID) -> bool:
        before = len(self.programs)
        self.programs = [
            program
            for program in self.programs
            if not (program.id == program_id and program.user_id == user_id)
        ]
        return len(self.programs) < before


@dataclass
class InMemoryActivityRepository(ActivityRepository):
    """In-memory activity repository with per-day upsert."""

    activities: dict[tuple[UUID, date], DailyActivity] = field(default_factory=dict)
    logs: dict[tuple[UUID, date], NutritionLog] = field(default_factory=dict)

    def upsert_activity(  # noqa: PLR0913
        self,
        user_id: UUID,
        day: date,
        sleep_hours: float,
        water_intake: float,
        calorie_intake: float,
        fitness_program_id: UUID | None,
    ) -> DailyActivity:
        existing = self.activities.get((user_id, day))
        activity = DailyActivity(
            id=existing.id if existing else uuid4(),
            user_id=user_id,
            date=day,
            sleep_hours=sleep_hours,
            water_intake=water_intake,
            calorie_intake=calorie_intake,
            fitness_program_id=fitness_program_id,
        )
        self.activities[(user_id, day)] = activity
        return activity

    def upsert_nutrition_log(
        self,
        activity: DailyActivity,
        program: FitnessProgram,
        intake: DailyIntake,
        result: AnalysisResult,
    ) -> NutritionLog:
        key = (activity.user_id, activity.date)
        existing = self.logs.get(key)
        log = NutritionLog(
            id=existing.id if existing else uuid4(),
            user_id=activity.user_id,
            date=activity.date,
            daily_activity_id=activity.id,
            fitness_program_id=program.id,
            actual_calories=intake.calories,
            actual_protein=intake.protein,
            actual_carbs=intake.carbs,
            actual_fat=intake.fat,
            target_calories=program.nutrition.calories,
            target_protein=program.nutrition.protein,
            target_carbs=program.nutrition.carbs,
            target_fat=program.nutrition.fat,
            calorie_achievement=result.calorie_achievement,
            protein_achievement=result.protein_achievement,
            carbs_achievement=result.carbs_achievement,
            fat_achievement=result.fat_achievement,
            analysis=result.analysis,
            recommendations=list(result.recommendations),
            achievements=list(result.achievements),
        )
        self.logs[key] = log
        return log

    def get_activity(self, user_id: UUID, day: date) -> DailyActivity | None:
        return self.activities.get((user_id, day))

    def get_nutrition_log(self, user_id: UUID, day: date) -> NutritionLog | None:
        return self.logs.get((user_id, day))

    def list_activities(self, user_id: UUID) -> list[DailyActivity]:
        owned = [item for (owner, _), item in self.activities.items() if owner == user_id]
        return sorted(owned, key=lambda item: item.date, reverse=True)

    def list_nutrition_logs(self, user_id: UUID) -> list[NutritionLog]:
        owned = [item for (owner, _), item in self.logs.items() if owner == user_id]
        return sorted(owned, key=lambda item: item.date, reverse=True)

    def get_latest_activity(self, user_id: UUID) -> DailyActivity | None:
        activities = self.list_activities(user_id)
        return activities[0] if activities else None

    def count_activities(self, user_id: UUID) -> int:
        return len(self.list_activities(user_id))


@dataclass
class InMemoryAppointmentRepository(AppointmentRepository):
    """In-memory appointment repository for tests."""

    appointments: list[Appointment] = field(default_factory=list)
    deleted: list[UUID] = field(default_factory=list)

    def create_appointment(
        self, user_id: UUID, day: date, at: time, description: str
    ) -> Appointment:
        appointment = Appointment(
            id=uuid4(), user_id=user_id, date=day, time=at, description=description
        )
        self.appointments.append(appointment)
        return appointment

    def list_appointments(self, user_id: UUID) -> list[Appointment]:
        owned = [item for item in self.appointments if item.user_id == user_id]
        return sorted(owned, key=lambda item: (item.date, item.time))

    def list_upcoming(self, user_id: UUID, since: date, limit: int) -> list[Appointment]:
        upcoming = [item for item in self.list_appointments(user_id) if item.date >= since]
        return upcoming[:limit]

    def count_appointments(self, user_id: UUID) -> int:
        return len(self.list_appointments(user_id))

    def delete_appointment(self, user_id: UUID, appointment_id: UUID) -> bool:
        before = len(self.appointments)
        self.appointments = [
            item
            for item in self.appointments
            if not (item.id == appointment_id and item.user_id == user_id)
        ]
        if len(self.appointments) == before:
            return False
        self.deleted.append(appointment_id)
        return True


@dataclass
class InMemoryRecommendationRepository(RecommendationRepository):
    """In-memory recommendation repository for tests."""

    items: list[Recommendation] = field(default_factory=list)

    def replace_recommendations(
        self, user_id: UUID, cards: list[RecommendationCard]
    ) -> list[Recommendation]:
        self.items = [item for item in self.items if item.user_id != user_id]
        saved = [
            Recommendation(
                id=uuid4(),
                user_id=user_id,
                category=card.category,
                title=card.title,
                content=card.content,
                image_url=card.image_url,
                created_at=FIXED_NOW,
            )
            for card in cards
        ]
        self.items.extend(saved)
        return saved

    def list_recommendations(self, user_id: UUID) -> list[Recommendation]:
        return [item for item in self.items if item.user_id == user_id]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        api_token="api-token",
    )


@pytest.fixture
def program_repository() -> InMemoryProgramRepository:
    return InMemoryProgramRepository()


@pytest.fixture
def activity_repository() -> InMemoryActivityRepository:
    return InMemoryActivityRepository()


@pytest.fixture
def appointment_repository() -> InMemoryAppointmentRepository:
    return InMemoryAppointmentRepository()


@pytest.fixture
def recommendation_repository() -> InMemoryRecommendationRepository:
    return InMemoryRecommendationRepository()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"X-Api-Token": "api-token", "X-User-Id": str(USER_ID)}


@pytest.fixture
def container(
    settings: Settings,
    program_repository: InMemoryProgramRepository,
    activity_repository: InMemoryActivityRepository,
    appointment_repository: InMemoryAppointmentRepository,
    recommendation_repository: InMemoryRecommendationRepository,
) -> AppContainer:
    program_service = ProgramService(
        repository=program_repository,
        generator=ProgramGenerator(clock=lambda: FIXED_NOW),
    )
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
        upcoming_limit=settings.upcoming_appointments_limit,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        program_service=program_service,
        activity_service=activity_service,
        appointment_service=appointment_service,
        recommendation_service=recommendation_service,
        dashboard_service=dashboard_service,
        close_resources=close_resources,
    )
