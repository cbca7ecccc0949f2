"""
Appointment-related data models.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

from .base import Entity
from .doctor import Doctor
from ..enums import AppointmentStatus, AppointmentType


class Appointment(Entity):
    """Booked visit linking a patient to a doctor."""

    patient_id: str
    doctor_id: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM
    type: AppointmentType = AppointmentType.CONSULTATION
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    notes: Optional[str] = None
    symptoms: Optional[str] = None

    def starts_at(self) -> Optional[datetime]:
        """Get the naive start datetime, or None if date/time do not parse."""
        try:
            return datetime.strptime(f"{self.date} {self.time}", "%Y-%m-%d %H:%M")
        except (TypeError, ValueError):
            return None

    def is_upcoming(self, now: datetime) -> bool:
        """Check if the appointment is still scheduled and in the future."""
        start = self.starts_at()
        return (
            self.status == AppointmentStatus.SCHEDULED
            and start is not None
            and start > now
        )


class BookingRequest(BaseModel):
    """Selections made by a patient on the doctor page."""

    model_config = ConfigDict(extra="forbid")

    doctor_id: str
    date: Optional[str] = None
    time: Optional[str] = None
    type: AppointmentType = AppointmentType.CONSULTATION
    notes: Optional[str] = None
    symptoms: Optional[str] = None


@dataclass
class AppointmentView:
    """Appointment joined with its doctor; doctor is None when the reference dangles."""

    appointment: Appointment
    doctor: Optional[Doctor] = None

    @property
    def doctor_name(self) -> str:
        return self.doctor.name if self.doctor else "Unknown doctor"
