"""
Appointment-related enums.
"""

from enum import Enum


class AppointmentType(str, Enum):
    """Kind of visit being booked."""

    CONSULTATION = "consultation"
    FOLLOW_UP = "follow-up"
    EMERGENCY = "emergency"


class AppointmentStatus(str, Enum):
    """Appointment lifecycle status."""

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
