"""Supabase repository for appointments."""

from dataclasses import dataclass
from datetime import date, time
from uuid import UUID

from supabase import Client

from health_tracker.domain.appointments import Appointment
from health_tracker.services.appointments import AppointmentRepository

_COLUMNS = "id, user_id, date, time, description"


@dataclass
class SupabaseAppointmentRepository(AppointmentRepository):
    """Supabase implementation for appointment persistence."""

    client: Client

    def create_appointment(
        self, user_id: UUID, day: date, at: time, description: str
    ) -> Appointment:
        """Insert an appointment row."""
        response = (
            self.client.table("appointments")
            .insert(
                {
                    "user_id": str(user_id),
                    "date": day.isoformat(),
                    "time": at.isoformat(),
                    "description": description,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create appointment")
        return _parse_row(response.data[0])

    def list_appointments(self, user_id: UUID) -> list[Appointment]:
        """Return appointments by date then time."""
        response = (
            self.client.table("appointments")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("date", desc=False)
            .order("time", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def list_upcoming(self, user_id: UUID, since: date, limit: int) -> list[Appointment]:
        """Return appointments on or after a date."""
        response = (
            self.client.table("appointments")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("date", since.isoformat())
            .order("date", desc=False)
            .order("time", desc=False)
            .limit(limit)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def count_appointments(self, user_id: UUID) -> int:
        """Return the number of appointments."""
        response = (
            self.client.table("appointments")
            .select("id", count="exact")
            .eq("user_id", str(user_id))
            .execute()
        )
        if response.count is not None:
            return int(response.count)
        return len(response.data or [])

    def delete_appointment(self, user_id: UUID, appointment_id: UUID) -> bool:
        """Delete an appointment owned by the user."""
        response = (
            self.client.table("appointments")
            .delete()
            .eq("id", str(appointment_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _parse_row(row: dict[str, object]) -> Appointment:
    return Appointment(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        date=date.fromisoformat(str(row["date"])),
        time=time.fromisoformat(str(row["time"])),
        description=str(row.get("description") or ""),
    )
