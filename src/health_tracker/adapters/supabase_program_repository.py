"""Supabase repository for fitness programs."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from health_tracker.domain.metrics import NutritionTargets, parse_goal
from health_tracker.domain.programs import Exercise, FitnessProgram
from health_tracker.services.programs import ProgramRepository

_COLUMNS = "id, user_id, goal, exercises, nutrition, created_at"


@dataclass
class SupabaseProgramRepository(ProgramRepository):
    """Supabase implementation for program persistence."""

    client: Client

    def create_program(self, user_id: UUID, program: FitnessProgram) -> FitnessProgram:
        """Insert a program row and return the stored program."""
        payload = program_to_row(program)
        payload["user_id"] = str(user_id)
        response = self.client.table("fitness_programs").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create fitness program")
        return program_from_row(response.data[0])

    def list_programs(self, user_id: UUID) -> list[FitnessProgram]:
        """Return a user's programs, newest first."""
        response = (
            self.client.table("fitness_programs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [program_from_row(row) for row in response.data or []]

    def get_latest_program(self, user_id: UUID) -> FitnessProgram | None:
        """Return the most recent program for a user."""
        response = (
            self.client.table("fitness_programs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return program_from_row(response.data[0])

    def delete_program(self, user_id: UUID, program_id: UUID) -> bool:
        """Delete a program owned by the user."""
        response = (
            self.client.table("fitness_programs")
            .delete()
            .eq("id", str(program_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def program_to_row(program: FitnessProgram) -> dict[str, object]:
    """Serialize a program into a fitness_programs row payload."""
    return {
        "goal": program.goal.value,
        "exercises": [
            {
                "name": exercise.name,
                "sets": exercise.sets,
                "reps": exercise.reps,
                "description": exercise.description,
            }
            for exercise in program.exercises
        ],
        "nutrition": {
            "calories": program.nutrition.calories,
            "protein": program.nutrition.protein,
            "carbs": program.nutrition.carbs,
            "fat": program.nutrition.fat,
            "recommendations": list(program.nutrition.recommendations),
        },
        "created_at": program.created_at.isoformat(),
    }


def program_from_row(row: dict[str, object]) -> FitnessProgram:
    """Parse a fitness_programs row."""
    nutrition = row.get("nutrition") or {}
    exercises = row.get("exercises") or []
    user_id = row.get("user_id")
    return FitnessProgram(
        id=UUID(str(row["id"])),
        user_id=UUID(str(user_id)) if user_id else None,
        goal=parse_goal(row.get("goal")),
        exercises=[
            Exercise(
                name=str(item["name"]),
                sets=int(item["sets"]),
                reps=int(item["reps"]),
                description=str(item.get("description", "")),
            )
            for item in exercises
        ],
        nutrition=NutritionTargets(
            calories=int(nutrition.get("calories", 0)),
            protein=int(nutrition.get("protein", 0)),
            carbs=int(nutrition.get("carbs", 0)),
            fat=int(nutrition.get("fat", 0)),
            recommendations=[str(text) for text in nutrition.get("recommendations", [])],
        ),
        created_at=_parse_timestamp(row.get("created_at")),
    )


def _parse_timestamp(raw: object) -> datetime:
    if isinstance(raw, str) and raw:
        parsed = datetime.fromisoformat(raw)
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)
    return datetime.min.replace(tzinfo=UTC)
