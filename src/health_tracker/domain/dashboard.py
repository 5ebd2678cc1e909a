"""Dashboard domain models."""

from dataclasses import dataclass

from health_tracker.domain.activity import DailyActivity
from health_tracker.domain.appointments import Appointment


@dataclass(frozen=True)
class DashboardSummary:
    """Counts and highlights shown on the dashboard."""

    activity_count: int
    appointment_count: int
    latest_activity: DailyActivity | None
    upcoming_appointments: list[Appointment]
