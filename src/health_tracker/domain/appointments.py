"""Appointment domain models."""

from dataclasses import dataclass
from datetime import date, time
from uuid import UUID


@dataclass(frozen=True)
class Appointment:
    """A booked appointment owned by one user."""

    id: UUID
    user_id: UUID
    date: date
    time: time
    description: str
