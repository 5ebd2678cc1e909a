"""Daily achievement analysis against program targets."""

import math
from enum import StrEnum

from health_tracker.domain.activity import AnalysisResult, DailyIntake
from health_tracker.domain.errors import InvalidInputError, InvalidTargetError
from health_tracker.domain.metrics import NutritionTargets
from health_tracker.services.calculator import round_half_up

ANALYSIS_HEADER = "Daily nutrition and activity analysis:\n\n"
ACHIEVEMENTS_HEADING = "Achievements:"
RECOMMENDATIONS_HEADING = "Recommendations:"

CALORIES_ACHIEVED = "You reached your daily calorie target! 🎯"
CALORIES_LOW = "Consider increasing your calorie intake."
CALORIES_HIGH = "Consider reducing your calorie intake."
PROTEIN_ACHIEVED = "You hit your protein target! 💪"
PROTEIN_LOW = (
    "Eat more protein. Favor protein sources such as eggs, chicken and fish."
)
CARBS_ACHIEVED = "You are keeping your carbohydrate balance well! 🌟"
CARBS_LOW = "Increase your complex carbohydrate intake. Favor whole grains."
CARBS_HIGH = "Reduce your carbohydrate intake and focus on eating more protein."
FAT_ACHIEVED = "Your fat intake is within the target range! 👍"
FAT_HIGH = "Reduce your fat intake. Eat fewer processed foods."
WATER_ACHIEVED = "You exceeded your daily water target! 💧"
WATER_LOW = "Drink more water. Aim for at least 2.5 liters a day."
SLEEP_ACHIEVED = "You reached the ideal sleep duration! 😴"
SLEEP_LOW = "Try to sleep more. The ideal sleep duration is 7-9 hours."
SLEEP_HIGH = (
    "Long sleep can point to poor sleep quality. Check your sleep quality and "
    "keep your bedroom dark, quiet and cool."
)

WATER_TARGET_LITERS = 2.5
WATER_MINIMUM_LITERS = 2.0
SLEEP_MIN_HOURS = 7
SLEEP_MAX_HOURS = 9
HOURS_PER_DAY = 24
TARGET_PCT = 100
CALORIE_BAND_PCT = 10
MACRO_BAND_PCT = 15
PROTEIN_MIN_PCT = 90
BADGE_LOW_PCT = 90
BADGE_HIGH_PCT = 110


class AchievementBadge(StrEnum):
    """Badge shown next to a percentage in the log view."""

    ON_TARGET = "on_target"
    LOW = "low"
    HIGH = "high"


def achievement_badge(percentage: float) -> AchievementBadge:
    """Classify a percentage as on target (90-110), low or high."""
    if BADGE_LOW_PCT <= percentage <= BADGE_HIGH_PCT:
        return AchievementBadge.ON_TARGET
    if percentage < BADGE_LOW_PCT:
        return AchievementBadge.LOW
    return AchievementBadge.HIGH


def percentage_of(actual: float, target: float, *, name: str) -> float:
    """Return actual as a percentage of a positive target."""
    if isinstance(target, bool) or not isinstance(target, int | float):
        raise InvalidTargetError(f"{name} target must be a number")
    if not math.isfinite(target) or target <= 0:
        raise InvalidTargetError(f"{name} target must be positive")
    percentage = actual / target * 100
    if not math.isfinite(percentage):
        raise InvalidInputError(f"{name} percentage is out of range")
    return percentage


def analyze(actual: DailyIntake, targets: NutritionTargets) -> AnalysisResult:
    """Score a day's intake against targets and build guidance text."""
    _validate_intake(actual)
    calorie_pct = percentage_of(actual.calories, targets.calories, name="calories")
    protein_pct = percentage_of(actual.protein, targets.protein, name="protein")
    carbs_pct = percentage_of(actual.carbs, targets.carbs, name="carbs")
    fat_pct = percentage_of(actual.fat, targets.fat, name="fat")

    achievements: list[str] = []
    recommendations: list[str] = []

    if abs(calorie_pct - TARGET_PCT) <= CALORIE_BAND_PCT:
        achievements.append(CALORIES_ACHIEVED)
    elif calorie_pct < TARGET_PCT - CALORIE_BAND_PCT:
        recommendations.append(CALORIES_LOW)
    elif calorie_pct > TARGET_PCT + CALORIE_BAND_PCT:
        recommendations.append(CALORIES_HIGH)

    if protein_pct >= PROTEIN_MIN_PCT:
        achievements.append(PROTEIN_ACHIEVED)
    else:
        recommendations.append(PROTEIN_LOW)

    if abs(carbs_pct - TARGET_PCT) <= MACRO_BAND_PCT:
        achievements.append(CARBS_ACHIEVED)
    elif carbs_pct < TARGET_PCT - MACRO_BAND_PCT:
        recommendations.append(CARBS_LOW)
    elif carbs_pct > TARGET_PCT + MACRO_BAND_PCT:
        recommendations.append(CARBS_HIGH)

    # Fat below the band has no rule.
    if abs(fat_pct - TARGET_PCT) <= MACRO_BAND_PCT:
        achievements.append(FAT_ACHIEVED)
    elif fat_pct > TARGET_PCT + MACRO_BAND_PCT:
        recommendations.append(FAT_HIGH)

    # 2.0-2.5 L is neither flagged nor rewarded.
    if actual.water_intake >= WATER_TARGET_LITERS:
        achievements.append(WATER_ACHIEVED)
    elif actual.water_intake < WATER_MINIMUM_LITERS:
        recommendations.append(WATER_LOW)

    if SLEEP_MIN_HOURS <= actual.sleep_hours <= SLEEP_MAX_HOURS:
        achievements.append(SLEEP_ACHIEVED)
    elif actual.sleep_hours < SLEEP_MIN_HOURS:
        recommendations.append(SLEEP_LOW)
    else:
        recommendations.append(SLEEP_HIGH)

    return AnalysisResult(
        analysis=compose_analysis(achievements, recommendations),
        recommendations=recommendations,
        achievements=achievements,
        calorie_achievement=round_half_up(calorie_pct),
        protein_achievement=round_half_up(protein_pct),
        carbs_achievement=round_half_up(carbs_pct),
        fat_achievement=round_half_up(fat_pct),
    )


def compose_analysis(achievements: list[str], recommendations: list[str]) -> str:
    """Build the analysis text from the fired achievements and recommendations."""
    text = ANALYSIS_HEADER
    if achievements:
        text += f"{ACHIEVEMENTS_HEADING}\n- " + "\n- ".join(achievements) + "\n\n"
    if recommendations:
        text += f"{RECOMMENDATIONS_HEADING}\n- " + "\n- ".join(recommendations)
    return text


def _validate_intake(actual: DailyIntake) -> None:
    for name in ("calories", "protein", "carbs", "fat", "water_intake", "sleep_hours"):
        value = getattr(actual, name)
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise InvalidInputError(f"{name} must be a number")
        if not math.isfinite(value) or value < 0:
            raise InvalidInputError(f"{name} must not be negative")
    if actual.sleep_hours > HOURS_PER_DAY:
        raise InvalidInputError("sleep_hours must not exceed 24")
