"""Appointment service."""

import logging
from dataclasses import dataclass
from datetime import date, time
from typing import Protocol
from uuid import UUID

from health_tracker.domain.appointments import Appointment

_logger = logging.getLogger(__name__)


class AppointmentRepository(Protocol):
    """Persistence interface for appointments."""

    def create_appointment(
        self, user_id: UUID, day: date, at: time, description: str
    ) -> Appointment:
        """Create an appointment and return it."""

    def list_appointments(self, user_id: UUID) -> list[Appointment]:
        """Return appointments ordered by date and time."""

    def list_upcoming(self, user_id: UUID, since: date, limit: int) -> list[Appointment]:
        """Return appointments on or after a date, earliest first."""

    def count_appointments(self, user_id: UUID) -> int:
        """Return the number of appointments."""

    def delete_appointment(self, user_id: UUID, appointment_id: UUID) -> bool:
        """Delete an appointment owned by the user; False when none matched."""


@dataclass
class AppointmentService:
    """Service for booking and cancelling appointments."""

    repository: AppointmentRepository

    def create(
        self, user_id: UUID, day: date, at: time, description: str
    ) -> Appointment:
        """Book an appointment."""
        return self.repository.create_appointment(user_id, day, at, description)

    def list_appointments(self, user_id: UUID) -> list[Appointment]:
        """Return the user's appointments in calendar order."""
        return self.repository.list_appointments(user_id)

    def delete(self, user_id: UUID, appointment_id: UUID) -> bool:
        """Delete an appointment if the user owns it."""
        if not self.repository.delete_appointment(user_id, appointment_id):
            return False
        _logger.info(
            "Deleted appointment: user_id=%s appointment_id=%s",
            user_id,
            appointment_id,
        )
        return True
