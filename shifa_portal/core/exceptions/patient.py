"""
Patient-related exceptions.
"""

from typing import List, Optional


class RegistrationError(Exception):
    """Exception raised when registration or sign-in input is rejected."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or [message]


class DuplicateEmailError(RegistrationError):
    """Exception raised when an account with the email already exists."""
    pass


class PatientNotFoundError(Exception):
    """Exception raised when no patient matches a sign-in email."""
    pass


class NotSignedInError(Exception):
    """Exception raised when an operation needs a signed-in patient."""
    pass
