"""
First-run population of demo data.
"""

from .data import SAMPLE_PATIENT, SEED_DOCTORS
from ..repositories import (
    AppointmentRepository,
    ChatRepository,
    DoctorRepository,
    PatientRepository,
)
from ..storage import ensure_written
from ...core.models.doctor import Doctor
from ...core.models.patient import Patient
from ...utils.logging import get_logger

logger = get_logger("shifa.seed")


class SeedLoader:
    """Writes the demo directory and sample patient when no doctors exist."""

    def __init__(
        self,
        patients: PatientRepository,
        doctors: DoctorRepository,
        appointments: AppointmentRepository,
        chat: ChatRepository,
    ):
        self.patients = patients
        self.doctors = doctors
        self.appointments = appointments
        self.chat = chat

    def initialize(self) -> bool:
        """
        Seed the store if the doctor collection is empty.

        Returns:
            True if demo data was written, False if data already existed
        """
        if self.doctors.has_records():
            return False

        doctors = [Doctor.model_validate(record) for record in SEED_DOCTORS]
        ensure_written(self.doctors.replace_all(doctors), "seed doctors")
        ensure_written(
            self.patients.replace_all([Patient.model_validate(SAMPLE_PATIENT)]),
            "seed patient",
        )
        ensure_written(self.appointments.replace_all([]), "seed appointments")
        ensure_written(self.chat.replace_all([]), "seed chat history")

        logger.info(f"seeded {len(doctors)} doctors and 1 sample patient")
        return True
