"""Domain models for daily activity and nutrition analysis."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class DailyIntake:
    """Actual intake, water and sleep recorded for one day."""

    calories: float
    protein: float
    carbs: float
    fat: float
    water_intake: float
    sleep_hours: float


@dataclass(frozen=True)
class AnalysisResult:
    """Achievement scores and guidance for one day."""

    analysis: str
    recommendations: list[str]
    achievements: list[str]
    calorie_achievement: int
    protein_achievement: int
    carbs_achievement: int
    fat_achievement: int


@dataclass(frozen=True)
class DailyActivity:
    """Per-user daily activity row, unique on (user_id, date)."""

    id: UUID
    user_id: UUID
    date: date
    sleep_hours: float
    water_intake: float
    calorie_intake: float
    fitness_program_id: UUID | None = None


@dataclass(frozen=True)
class NutritionLog:
    """Analyzed nutrition entry with targets snapshotted from a program."""

    id: UUID
    user_id: UUID
    date: date
    daily_activity_id: UUID
    fitness_program_id: UUID
    actual_calories: float
    actual_protein: float
    actual_carbs: float
    actual_fat: float
    target_calories: int
    target_protein: int
    target_carbs: int
    target_fat: int
    calorie_achievement: int
    protein_achievement: int
    carbs_achievement: int
    fat_achievement: int
    analysis: str
    recommendations: list[str] = field(default_factory=list)
    achievements: list[str] = field(default_factory=list)
