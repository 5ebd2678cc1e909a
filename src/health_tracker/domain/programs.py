"""Fitness program models."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from health_tracker.domain.metrics import Goal, NutritionTargets


@dataclass(frozen=True)
class Exercise:
    """Single exercise entry in a program."""

    name: str
    sets: int
    reps: int
    description: str


@dataclass(frozen=True)
class ProgramTemplate:
    """Static per-goal exercises and recommendation texts."""

    exercises: list[Exercise]
    recommendations: list[str]


@dataclass(frozen=True)
class FitnessProgram:
    """Generated or persisted fitness program.

    ``id`` and ``user_id`` stay ``None`` until the program is saved.
    """

    goal: Goal
    exercises: list[Exercise]
    nutrition: NutritionTargets
    created_at: datetime
    id: UUID | None = None
    user_id: UUID | None = None
