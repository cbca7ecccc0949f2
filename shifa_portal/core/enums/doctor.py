"""
Doctor-related enums.
"""

from enum import Enum


class DoctorStatus(str, Enum):
    """Current availability of a doctor."""

    AVAILABLE = "available"
    BUSY = "busy"
    OFFLINE = "offline"
