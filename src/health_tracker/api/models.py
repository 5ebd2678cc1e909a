"""Pydantic models for API request payloads."""

from datetime import date, datetime, time

from pydantic import BaseModel, Field

from health_tracker.domain.metrics import Goal


class GenerateProgramRequest(BaseModel):
    """Body metrics submitted for a program preview."""

    height: float
    weight: float
    age: int
    goal: str


class ExercisePayload(BaseModel):
    """Exercise entry of a program being saved."""

    name: str
    sets: int = Field(gt=0)
    reps: int = Field(gt=0)
    description: str = ""


class NutritionPayload(BaseModel):
    """Nutrition targets of a program being saved."""

    calories: int = Field(gt=0)
    protein: int = Field(gt=0)
    carbs: int = Field(gt=0)
    fat: int = Field(gt=0)
    recommendations: list[str] = Field(default_factory=list)


class SaveProgramRequest(BaseModel):
    """Previously generated or reconstructed program to persist."""

    goal: Goal
    exercises: list[ExercisePayload]
    nutrition: NutritionPayload
    created_at: datetime | None = None


class LogDayRequest(BaseModel):
    """Actual intake, water and sleep for a day."""

    date: date
    sleep_hours: float
    water_intake: float
    actual_calories: float
    actual_protein: float
    actual_carbs: float
    actual_fat: float


class AppointmentRequest(BaseModel):
    """Appointment booking payload."""

    date: date
    time: time
    description: str = ""
