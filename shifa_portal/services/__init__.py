"""
Service layer for the Shifa Portal.
"""

from .storage import KeyValueStore, Repository, StoreResult
from .repositories import (
    PatientRepository,
    DoctorRepository,
    AppointmentRepository,
    ChatRepository,
)
from .patient import PatientService
from .booking import BookingService
from .chat import ChatService, DialogueResponder
from .seed import SeedLoader
from .admin import AdminService

__all__ = [
    "KeyValueStore",
    "Repository",
    "StoreResult",
    "PatientRepository",
    "DoctorRepository",
    "AppointmentRepository",
    "ChatRepository",
    "PatientService",
    "BookingService",
    "ChatService",
    "DialogueResponder",
    "SeedLoader",
    "AdminService",
]
