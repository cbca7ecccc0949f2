"""
Session model handed to services instead of a global current user.
"""

from dataclasses import dataclass
from typing import Optional

from .patient import Patient


@dataclass(frozen=True)
class Session:
    """The patient this client is acting as."""

    patient: Patient
    token: str
    # None when the stored pointer predates sign-in timestamps.
    started_at: Optional[str] = None

    @property
    def patient_id(self) -> str:
        return self.patient.id
