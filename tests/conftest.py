"""
Pytest configuration and fixtures.
"""

import pytest

from shifa_portal.app import create_portal
from shifa_portal.config import Settings
from shifa_portal.core.enums import AppointmentStatus, AppointmentType, DoctorStatus, Gender
from shifa_portal.core.models import Appointment, Availability, Doctor, Patient, Session
from shifa_portal.services.repositories import (
    AppointmentRepository,
    ChatRepository,
    DoctorRepository,
    PatientRepository,
)
from shifa_portal.services.storage import KeyValueStore


def _patient(patient_id="pt-1", email="p@x.com", name="Test Patient"):
    return Patient(
        id=patient_id,
        name=name,
        email=email,
        phone="+92-300-0000000",
        date_of_birth="1990-01-01",
        gender=Gender.FEMALE,
        registration_date="2025-01-01T09:00:00+05:00",
    )


def _doctor(doctor_id="dr-1", name="Dr. Test", specialization="Cardiology",
            status=DoctorStatus.AVAILABLE, rating=4.5):
    return Doctor(
        id=doctor_id,
        name=name,
        specialization=specialization,
        rating=rating,
        status=status,
        availability=Availability(days=["Monday", "Wednesday"], time_slots=["09:00", "10:00"]),
    )


def _appointment(appointment_id="apt-1", patient_id="pt-1", doctor_id="dr-1",
                 date="2030-01-07", time="09:00", status=AppointmentStatus.SCHEDULED):
    return Appointment(
        id=appointment_id,
        patient_id=patient_id,
        doctor_id=doctor_id,
        date=date,
        time=time,
        type=AppointmentType.CONSULTATION,
        status=status,
    )


@pytest.fixture
def make_patient():
    return _patient


@pytest.fixture
def make_doctor():
    return _doctor


@pytest.fixture
def make_appointment():
    return _appointment


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a temporary database, without typing delay or seeding."""
    return Settings(
        storage_path=str(tmp_path / "portal.db"),
        typing_delay_min=0.0,
        typing_delay_max=0.0,
        seed_demo_data=False,
    )


@pytest.fixture
def store(settings):
    return KeyValueStore(settings.storage_config())


@pytest.fixture
def patients(store):
    return PatientRepository(store)


@pytest.fixture
def doctors(store):
    return DoctorRepository(store)


@pytest.fixture
def appointments(store):
    return AppointmentRepository(store)


@pytest.fixture
def chat(store):
    return ChatRepository(store)


@pytest.fixture
def portal(settings):
    """Portal seeded with the demo directory."""
    seeded = settings.model_copy(update={"seed_demo_data": True})
    return create_portal(seeded)


@pytest.fixture
def session():
    """Session for the default test patient (not stored)."""
    patient = _patient()
    return Session(patient=patient, token=patient.id, started_at="2025-01-01T09:00:00+05:00")
