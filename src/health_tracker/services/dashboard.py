"""Dashboard summary service."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from health_tracker.domain.dashboard import DashboardSummary
from health_tracker.services.activities import ActivityRepository
from health_tracker.services.appointments import AppointmentRepository


@dataclass
class DashboardService:
    """Aggregate counts and highlights for the dashboard."""

    activity_repository: ActivityRepository
    appointment_repository: AppointmentRepository
    upcoming_limit: int = 3

    def get_summary(self, user_id: UUID, today: date) -> DashboardSummary:
        """Return the dashboard summary as of a day."""
        return DashboardSummary(
            activity_count=self.activity_repository.count_activities(user_id),
            appointment_count=self.appointment_repository.count_appointments(user_id),
            latest_activity=self.activity_repository.get_latest_activity(user_id),
            upcoming_appointments=self.appointment_repository.list_upcoming(
                user_id, since=today, limit=self.upcoming_limit
            ),
        )
