"""Metric calculator for BMR, BMI and daily nutrition targets."""

import math
from dataclasses import dataclass

from health_tracker.domain.errors import InvalidInputError
from health_tracker.domain.metrics import BodyMetrics, Goal, NutritionTargets, UserMetrics

_KCAL_PER_GRAM_CARBS = 4
_KCAL_PER_GRAM_FAT = 9


@dataclass(frozen=True)
class _GoalFactors:
    activity_factor: float
    calorie_offset: float
    protein_per_kg: float
    carb_ratio: float
    fat_ratio: float


_GOAL_FACTORS: dict[Goal, _GoalFactors] = {
    Goal.LOSE: _GoalFactors(
        activity_factor=1.2,
        calorie_offset=-500,
        protein_per_kg=2.0,
        carb_ratio=0.4,
        fat_ratio=0.3,
    ),
    Goal.GAIN: _GoalFactors(
        activity_factor=1.5,
        calorie_offset=300,
        protein_per_kg=2.2,
        carb_ratio=0.5,
        fat_ratio=0.25,
    ),
    Goal.MAINTAIN: _GoalFactors(
        activity_factor=1.4,
        calorie_offset=0,
        protein_per_kg=1.6,
        carb_ratio=0.45,
        fat_ratio=0.3,
    ),
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    if not math.isfinite(value):
        raise InvalidInputError(f"Cannot round {value!r}: value is out of range")
    return math.floor(value + 0.5)


def validate_metrics(metrics: UserMetrics) -> None:
    """Raise InvalidInputError unless height, weight, age and goal are usable."""
    for name in ("height", "weight"):
        value = getattr(metrics, name)
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise InvalidInputError(f"{name} must be a number")
        if not math.isfinite(value) or value <= 0:
            raise InvalidInputError(f"{name} must be positive")
    if isinstance(metrics.age, bool) or not isinstance(metrics.age, int):
        raise InvalidInputError("age must be an integer")
    if metrics.age <= 0:
        raise InvalidInputError("age must be positive")
    if not isinstance(metrics.goal, Goal):
        raise InvalidInputError(f"Unknown goal: {metrics.goal!r}")


def calculate_bmr(metrics: UserMetrics) -> float:
    """Mifflin-St Jeor BMR without the sex term."""
    validate_metrics(metrics)
    return _require_finite(
        10 * metrics.weight + 6.25 * metrics.height - 5 * metrics.age, "bmr"
    )


def calculate_bmi(metrics: UserMetrics) -> float:
    """Body mass index from height in cm and weight in kg."""
    validate_metrics(metrics)
    height_m = metrics.height / 100
    squared = height_m * height_m
    if squared == 0:
        raise InvalidInputError("height is out of range")
    return _require_finite(metrics.weight / squared, "bmi")


def calculate_body_metrics(metrics: UserMetrics) -> BodyMetrics:
    """Return BMR and BMI for display."""
    return BodyMetrics(bmr=calculate_bmr(metrics), bmi=calculate_bmi(metrics))


def calculate_targets(metrics: UserMetrics) -> NutritionTargets:
    """Return calorie and macro targets for the metrics' goal.

    Each field is rounded on its own, so macro calories may drift slightly
    from the calorie target.
    """
    bmr = calculate_bmr(metrics)
    factors = _GOAL_FACTORS[metrics.goal]
    calories = round_half_up(bmr * factors.activity_factor + factors.calorie_offset)
    return NutritionTargets(
        calories=calories,
        protein=round_half_up(metrics.weight * factors.protein_per_kg),
        carbs=round_half_up(calories * factors.carb_ratio / _KCAL_PER_GRAM_CARBS),
        fat=round_half_up(calories * factors.fat_ratio / _KCAL_PER_GRAM_FAT),
    )


def _require_finite(value: float, name: str) -> float:
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} is out of range")
    return value
