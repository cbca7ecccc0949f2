"""
Admin view models: statistics and the export snapshot.
"""

from typing import List
from pydantic import Field

from .base import RecordModel
from .patient import Patient
from .doctor import Doctor
from .appointment import Appointment
from .chat import ChatMessage


class PortalStats(RecordModel):
    """Record counts shown on the admin panel."""

    patients: int = 0
    doctors: int = 0
    appointments: int = 0
    chat_messages: int = 0

    @property
    def total_records(self) -> int:
        return self.patients + self.doctors + self.appointments


class PortalSnapshot(RecordModel):
    """Read-only projection of every collection for download."""

    patients: List[Patient] = Field(default_factory=list)
    doctors: List[Doctor] = Field(default_factory=list)
    appointments: List[Appointment] = Field(default_factory=list)
    chat_history: List[ChatMessage] = Field(default_factory=list)
    export_date: str
