"""
Patient service for registration, sign-in and the current session.

Email is the only login key and no credential is checked; this is
placeholder authentication, not a security boundary.
"""

from typing import Optional

from ..repositories import PatientRepository
from ..storage import ensure_written
from ...config import Settings, get_settings
from ...core.enums import Gender
from ...core.exceptions import (
    DuplicateEmailError,
    NotSignedInError,
    PatientNotFoundError,
    RegistrationError,
)
from ...core.models.patient import EmergencyContact, Patient, RegistrationRequest
from ...core.models.session import Session
from ...utils.date import now_iso
from ...utils.ids import new_id
from ...utils.logging import get_logger
from ...utils.validation import ValidationUtils

logger = get_logger("shifa.patients")


class PatientService:
    """Service for handling patient accounts and the active session."""

    def __init__(self, patients: PatientRepository, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.patients = patients

    def _open_session(self, patient: Patient) -> Session:
        started_at = now_iso(self.settings.timezone)
        ensure_written(self.patients.set_current(patient, started_at), "current session")
        return Session(patient=patient, token=patient.id, started_at=started_at)

    def register(self, request: RegistrationRequest) -> Session:
        """
        Register a new patient and sign them in.

        Args:
            request: Registration form data

        Returns:
            Session for the new patient

        Raises:
            RegistrationError: required fields missing or malformed
            DuplicateEmailError: an account already uses the email
        """
        errors = ValidationUtils.validate_registration(request)
        if errors:
            raise RegistrationError("Please fill in all required fields", errors)

        email = request.email.strip()
        if self.patients.find_by_email(email) is not None:
            raise DuplicateEmailError(
                "An account with this email already exists. Please sign in."
            )

        patient = Patient(
            id=new_id("patient"),
            name=request.name.strip(),
            email=email,
            phone=request.phone.strip(),
            date_of_birth=request.date_of_birth.strip(),
            gender=Gender.from_string(request.gender),
            address=request.address.strip(),
            emergency_contact=EmergencyContact(
                name=request.emergency_contact_name.strip(),
                phone=request.emergency_contact_phone.strip(),
                relation=request.emergency_contact_relation.strip(),
            ),
            registration_date=now_iso(self.settings.timezone),
        )
        ensure_written(self.patients.add(patient), "patient")
        logger.info(f"registered patient {patient.id}")
        return self._open_session(patient)

    def sign_in(self, email: str) -> Session:
        """
        Sign in an existing patient by email.

        Raises:
            RegistrationError: email left blank
            PatientNotFoundError: no account with this email
        """
        if not email or not email.strip():
            raise RegistrationError("Please enter your email address")

        patient = self.patients.find_by_email(email.strip())
        if patient is None:
            raise PatientNotFoundError(
                "No account found with this email. Please register first."
            )
        logger.info(f"patient {patient.id} signed in")
        return self._open_session(patient)

    def sign_out(self) -> None:
        ensure_written(self.patients.set_current(None), "current session")

    def current_session(self) -> Optional[Session]:
        """Get the session restored from the stored pointer, or None."""
        patient = self.patients.get_current()
        if patient is None:
            return None
        return Session(
            patient=patient,
            token=patient.id,
            started_at=self.patients.get_current_started_at(),
        )

    def require_session(self) -> Session:
        """Get the current session; raises NotSignedInError when signed out."""
        session = self.current_session()
        if session is None:
            raise NotSignedInError("Please sign in to continue")
        return session

