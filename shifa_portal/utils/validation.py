"""
Validation utilities for form input.
"""

import re
from typing import List, Optional, Tuple

from ..core.enums import Gender
from ..core.models.appointment import BookingRequest
from ..core.models.patient import RegistrationRequest
from .date import DateParser, TimeParser

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class ValidationUtils:
    """Validation utilities for registration and booking forms."""

    @staticmethod
    def validate_email(email: str) -> Tuple[bool, Optional[str]]:
        """
        Validate email format.

        Args:
            email: Email address to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not email or not email.strip():
            return False, "Email is required"
        if not _EMAIL_RE.match(email.strip()):
            return False, "Email address is not valid"
        return True, None

    @staticmethod
    def validate_registration(request: RegistrationRequest) -> List[str]:
        """
        Validate registration form for completeness.

        Args:
            request: Registration form data

        Returns:
            List of validation error messages
        """
        errors = []

        required = (
            ("name", "Name is required"),
            ("email", "Email is required"),
            ("phone", "Phone number is required"),
            ("date_of_birth", "Date of birth is required"),
            ("gender", "Gender is required"),
        )
        for field_name, message in required:
            if not getattr(request, field_name).strip():
                errors.append(message)

        if request.email.strip():
            is_valid, error_msg = ValidationUtils.validate_email(request.email)
            if not is_valid:
                errors.append(error_msg)

        if request.date_of_birth.strip() and not DateParser.is_valid_iso_date(request.date_of_birth.strip()):
            errors.append("Date of birth must be in YYYY-MM-DD format")

        if request.gender.strip():
            try:
                Gender.from_string(request.gender)
            except ValueError:
                errors.append("Gender must be male or female")

        return errors

    @staticmethod
    def validate_booking_request(request: BookingRequest) -> List[str]:
        """
        Validate that a date and time slot were chosen.

        Args:
            request: Booking selections

        Returns:
            List of validation error messages
        """
        errors = []

        if not request.date:
            errors.append("Please select a date")
        elif not DateParser.is_valid_iso_date(request.date):
            errors.append("Date must be in YYYY-MM-DD format")

        if not request.time:
            errors.append("Please select a time slot")
        elif not TimeParser.is_valid_time_format(request.time):
            errors.append("Time slot must be in HH:MM format")

        return errors
