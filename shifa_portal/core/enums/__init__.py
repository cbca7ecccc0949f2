"""
Enums for the Shifa Portal.
"""

from .patient import Gender
from .doctor import DoctorStatus
from .appointment import AppointmentType, AppointmentStatus
from .chat import MessageType, Intent
from .storage import Collection

__all__ = [
    "Gender",
    "DoctorStatus",
    "AppointmentType",
    "AppointmentStatus",
    "MessageType",
    "Intent",
    "Collection",
]
