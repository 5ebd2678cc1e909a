"""Body metric and nutrition target models."""

from dataclasses import dataclass, field
from enum import StrEnum

from health_tracker.domain.errors import InvalidInputError


class Goal(StrEnum):
    """Training goal that selects formulas and templates."""

    LOSE = "lose"
    GAIN = "gain"
    MAINTAIN = "maintain"


def parse_goal(raw: object) -> Goal:
    """Parse a goal value, rejecting anything outside the enumeration."""
    if isinstance(raw, Goal):
        return raw
    if isinstance(raw, str):
        try:
            return Goal(raw.strip().lower())
        except ValueError:
            pass
    raise InvalidInputError(f"Unknown goal: {raw!r}")


@dataclass(frozen=True)
class UserMetrics:
    """Input for program generation."""

    height: float
    weight: float
    age: int
    goal: Goal


@dataclass(frozen=True)
class BodyMetrics:
    """Display-only body metrics."""

    bmr: float
    bmi: float


@dataclass(frozen=True)
class NutritionTargets:
    """Daily calorie and macro targets with guidance."""

    calories: int
    protein: int
    carbs: int
    fat: int
    recommendations: list[str] = field(default_factory=list)
