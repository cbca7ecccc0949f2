"""
Doctor-related data models.
"""

from typing import List
from pydantic import Field

from .base import Entity, RecordModel
from ..enums import DoctorStatus


class Availability(RecordModel):
    """Weekdays and HH:MM slots a doctor accepts bookings for."""

    days: List[str] = Field(default_factory=list)
    time_slots: List[str] = Field(default_factory=list)

    def offers(self, weekday: str, time: str) -> bool:
        """Check whether the weekday and slot are both declared."""
        return weekday in self.days and time in self.time_slots


class Doctor(Entity):
    """Doctor listed in the clinic directory."""

    name: str
    specialization: str
    qualifications: List[str] = Field(default_factory=list)
    experience: int = Field(default=0, ge=0)
    rating: float = Field(default=0.0, ge=0.0, le=5.0)
    review_count: int = Field(default=0, ge=0)
    image: str = ""
    availability: Availability = Field(default_factory=Availability)
    consultation_fee: float = Field(default=0.0, ge=0.0)
    status: DoctorStatus = DoctorStatus.OFFLINE
    languages: List[str] = Field(default_factory=list)
    location: str = ""
    bio: str = ""

    def is_available(self) -> bool:
        """Check if the doctor currently takes appointments."""
        return self.status == DoctorStatus.AVAILABLE
