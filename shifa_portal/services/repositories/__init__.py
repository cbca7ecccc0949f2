"""
Domain repositories, one per stored collection.
"""

from .patient import PatientRepository
from .doctor import DoctorRepository
from .appointment import AppointmentRepository
from .chat import ChatRepository

__all__ = [
    "PatientRepository",
    "DoctorRepository",
    "AppointmentRepository",
    "ChatRepository",
]
