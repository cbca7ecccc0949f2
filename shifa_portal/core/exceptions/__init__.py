"""
Custom exceptions for the Shifa Portal.
"""

from .storage import StorageError, StorageWriteError
from .patient import (
    RegistrationError,
    DuplicateEmailError,
    PatientNotFoundError,
    NotSignedInError,
)
from .booking import (
    BookingFlowError,
    BookingValidationError,
    SlotUnavailableError,
    AppointmentNotFoundError,
)

__all__ = [
    "StorageError",
    "StorageWriteError",
    "RegistrationError",
    "DuplicateEmailError",
    "PatientNotFoundError",
    "NotSignedInError",
    "BookingFlowError",
    "BookingValidationError",
    "SlotUnavailableError",
    "AppointmentNotFoundError",
]
