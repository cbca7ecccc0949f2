"""
Booking-related exceptions.
"""

from typing import List, Optional


class BookingFlowError(Exception):
    """Base exception for booking flow errors."""
    pass


class BookingValidationError(BookingFlowError):
    """Exception raised when booking validation fails."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or [message]


class SlotUnavailableError(BookingFlowError):
    """Exception raised when a booking slot is not offered or already taken."""
    pass


class AppointmentNotFoundError(BookingFlowError):
    """Exception raised when an appointment does not exist for the patient."""
    pass
