"""
Core data models for the Shifa Portal.
"""

from .base import Entity, RecordModel
from .patient import Patient, EmergencyContact, RegistrationRequest
from .doctor import Doctor, Availability
from .appointment import Appointment, AppointmentView, BookingRequest
from .chat import ChatMessage, ChatExchange
from .session import Session
from .admin import PortalSnapshot, PortalStats

__all__ = [
    "Entity",
    "RecordModel",
    "Patient",
    "EmergencyContact",
    "RegistrationRequest",
    "Doctor",
    "Availability",
    "Appointment",
    "AppointmentView",
    "BookingRequest",
    "ChatMessage",
    "ChatExchange",
    "Session",
    "PortalSnapshot",
    "PortalStats",
]
