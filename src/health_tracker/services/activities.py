"""Daily activity logging with achievement analysis."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from health_tracker.domain.activity import (
    AnalysisResult,
    DailyActivity,
    DailyIntake,
    NutritionLog,
)
from health_tracker.domain.errors import NoProgramError
from health_tracker.domain.programs import FitnessProgram
from health_tracker.services.analyzer import analyze
from health_tracker.services.programs import ProgramRepository

_logger = logging.getLogger(__name__)


class ActivityRepository(Protocol):
    """Persistence interface for daily activities and nutrition logs."""

    def upsert_activity(  # noqa: PLR0913
        self,
        user_id: UUID,
        day: date,
        sleep_hours: float,
        water_intake: float,
        calorie_intake: float,
        fitness_program_id: UUID | None,
    ) -> DailyActivity:
        """Insert or overwrite the activity row for (user, day)."""

    def upsert_nutrition_log(
        self,
        activity: DailyActivity,
        program: FitnessProgram,
        intake: DailyIntake,
        result: AnalysisResult,
    ) -> NutritionLog:
        """Insert or overwrite the nutrition log for (user, day)."""

    def get_activity(self, user_id: UUID, day: date) -> DailyActivity | None:
        """Return the activity for a day, if present."""

    def get_nutrition_log(self, user_id: UUID, day: date) -> NutritionLog | None:
        """Return the nutrition log for a day, if present."""

    def list_activities(self, user_id: UUID) -> list[DailyActivity]:
        """Return activities, newest day first."""

    def list_nutrition_logs(self, user_id: UUID) -> list[NutritionLog]:
        """Return nutrition logs, newest day first."""

    def get_latest_activity(self, user_id: UUID) -> DailyActivity | None:
        """Return the most recent activity, if any."""

    def count_activities(self, user_id: UUID) -> int:
        """Return the number of recorded activity days."""


@dataclass(frozen=True)
class DayRecord:
    """Activity and nutrition log stored for one day."""

    activity: DailyActivity | None
    log: NutritionLog | None


@dataclass
class ActivityService:
    """Service that analyzes and stores daily entries."""

    repository: ActivityRepository
    program_repository: ProgramRepository

    def log_day(self, user_id: UUID, day: date, intake: DailyIntake) -> NutritionLog:
        """Analyze a day against the latest program and persist both rows."""
        program = self.program_repository.get_latest_program(user_id)
        if program is None or program.id is None:
            raise NoProgramError("Create a fitness program before logging a day.")
        result = analyze(intake, program.nutrition)
        activity = self.repository.upsert_activity(
            user_id=user_id,
            day=day,
            sleep_hours=intake.sleep_hours,
            water_intake=intake.water_intake,
            calorie_intake=intake.calories,
            fitness_program_id=program.id,
        )
        log = self.repository.upsert_nutrition_log(activity, program, intake, result)
        _logger.info(
            "Logged day: user_id=%s date=%s achievements=%s recommendations=%s",
            user_id,
            day.isoformat(),
            len(result.achievements),
            len(result.recommendations),
        )
        return log

    def get_day(self, user_id: UUID, day: date) -> DayRecord:
        """Return what was stored for a day."""
        return DayRecord(
            activity=self.repository.get_activity(user_id, day),
            log=self.repository.get_nutrition_log(user_id, day),
        )

    def list_logs(self, user_id: UUID) -> list[NutritionLog]:
        """Return nutrition logs, newest first."""
        return self.repository.list_nutrition_logs(user_id)

    def list_activities(self, user_id: UUID) -> list[DailyActivity]:
        """Return activity rows, newest first."""
        return self.repository.list_activities(user_id)
