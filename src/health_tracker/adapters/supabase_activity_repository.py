"""Supabase repository for daily activities and nutrition logs."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from health_tracker.domain.activity import (
    AnalysisResult,
    DailyActivity,
    DailyIntake,
    NutritionLog,
)
from health_tracker.domain.programs import FitnessProgram
from health_tracker.services.activities import ActivityRepository

_ACTIVITY_COLUMNS = (
    "id, user_id, date, sleep_hours, water_intake, calorie_intake, fitness_program_id"
)


@dataclass
class SupabaseActivityRepository(ActivityRepository):
    """Supabase implementation for daily activity persistence."""

    client: Client

    def upsert_activity(  # noqa: PLR0913
        self,
        user_id: UUID,
        day: date,
        sleep_hours: float,
        water_intake: float,
        calorie_intake: float,
        fitness_program_id: UUID | None,
    ) -> DailyActivity:
        """Insert or overwrite the activity for (user, day)."""
        response = (
            self.client.table("daily_activities")
            .upsert(
                {
                    "user_id": str(user_id),
                    "date": day.isoformat(),
                    "sleep_hours": sleep_hours,
                    "water_intake": water_intake,
                    "calorie_intake": calorie_intake,
                    "fitness_program_id": (
                        str(fitness_program_id) if fitness_program_id else None
                    ),
                },
                on_conflict="user_id,date",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save daily activity")
        return _parse_activity(response.data[0])

    def upsert_nutrition_log(
        self,
        activity: DailyActivity,
        program: FitnessProgram,
        intake: DailyIntake,
        result: AnalysisResult,
    ) -> NutritionLog:
        """Insert or overwrite the nutrition log for (user, day)."""
        targets = program.nutrition
        response = (
            self.client.table("daily_nutrition_logs")
            .upsert(
                {
                    "user_id": str(activity.user_id),
                    "date": activity.date.isoformat(),
                    "daily_activity_id": str(activity.id),
                    "fitness_program_id": str(program.id),
                    "actual_calories": intake.calories,
                    "actual_protein": intake.protein,
                    "actual_carbs": intake.carbs,
                    "actual_fat": intake.fat,
                    "target_calories": targets.calories,
                    "target_protein": targets.protein,
                    "target_carbs": targets.carbs,
                    "target_fat": targets.fat,
                    "calorie_achievement": result.calorie_achievement,
                    "protein_achievement": result.protein_achievement,
                    "carbs_achievement": result.carbs_achievement,
                    "fat_achievement": result.fat_achievement,
                    "analysis": result.analysis,
                    "recommendations": list(result.recommendations),
                    "achievements": list(result.achievements),
                },
                on_conflict="user_id,date",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save nutrition log")
        return _parse_log(response.data[0])

    def get_activity(self, user_id: UUID, day: date) -> DailyActivity | None:
        """Return the activity for a day."""
        response = (
            self.client.table("daily_activities")
            .select(_ACTIVITY_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_activity(response.data[0])

    def get_nutrition_log(self, user_id: UUID, day: date) -> NutritionLog | None:
        """Return the nutrition log for a day."""
        response = (
            self.client.table("daily_nutrition_logs")
            .select("*")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_log(response.data[0])

    def list_activities(self, user_id: UUID) -> list[DailyActivity]:
        """Return activities, newest day first."""
        response = (
            self.client.table("daily_activities")
            .select(_ACTIVITY_COLUMNS)
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .execute()
        )
        return [_parse_activity(row) for row in response.data or []]

    def list_nutrition_logs(self, user_id: UUID) -> list[NutritionLog]:
        """Return nutrition logs, newest day first."""
        response = (
            self.client.table("daily_nutrition_logs")
            .select("*")
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .execute()
        )
        return [_parse_log(row) for row in response.data or []]

    def get_latest_activity(self, user_id: UUID) -> DailyActivity | None:
        """Return the most recent activity."""
        response = (
            self.client.table("daily_activities")
            .select(_ACTIVITY_COLUMNS)
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_activity(response.data[0])

    def count_activities(self, user_id: UUID) -> int:
        """Return the number of activity rows for a user."""
        response = (
            self.client.table("daily_activities")
            .select("id", count="exact")
            .eq("user_id", str(user_id))
            .execute()
        )
        if response.count is not None:
            return int(response.count)
        return len(response.data or [])


def _parse_activity(row: dict[str, object]) -> DailyActivity:
    program_id = row.get("fitness_program_id")
    return DailyActivity(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        date=date.fromisoformat(str(row["date"])),
        sleep_hours=float(row.get("sleep_hours") or 0.0),
        water_intake=float(row.get("water_intake") or 0.0),
        calorie_intake=float(row.get("calorie_intake") or 0.0),
        fitness_program_id=UUID(str(program_id)) if program_id else None,
    )


def _parse_log(row: dict[str, object]) -> NutritionLog:
    return NutritionLog(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        date=date.fromisoformat(str(row["date"])),
        daily_activity_id=UUID(str(row["daily_activity_id"])),
        fitness_program_id=UUID(str(row["fitness_program_id"])),
        actual_calories=float(row.get("actual_calories") or 0.0),
        actual_protein=float(row.get("actual_protein") or 0.0),
        actual_carbs=float(row.get("actual_carbs") or 0.0),
        actual_fat=float(row.get("actual_fat") or 0.0),
        target_calories=int(row.get("target_calories") or 0),
        target_protein=int(row.get("target_protein") or 0),
        target_carbs=int(row.get("target_carbs") or 0),
        target_fat=int(row.get("target_fat") or 0),
        calorie_achievement=int(row.get("calorie_achievement") or 0),
        protein_achievement=int(row.get("protein_achievement") or 0),
        carbs_achievement=int(row.get("carbs_achievement") or 0),
        fat_achievement=int(row.get("fat_achievement") or 0),
        analysis=str(row.get("analysis") or ""),
        recommendations=[str(text) for text in row.get("recommendations") or []],
        achievements=[str(text) for text in row.get("achievements") or []],
    )
