"""
Portal factory: wires store, repositories and services from settings.
"""

from dataclasses import dataclass
from typing import Optional

from .config import Settings, get_settings
from .services.admin import AdminService
from .services.booking import BookingService
from .services.chat import ChatService, DialogueResponder
from .services.patient import PatientService
from .services.repositories import (
    AppointmentRepository,
    ChatRepository,
    DoctorRepository,
    PatientRepository,
)
from .services.seed import SeedLoader
from .services.storage import KeyValueStore
from .utils.logging import get_logger

logger = get_logger("shifa.app")


@dataclass
class ClinicPortal:
    """Everything a presentation layer needs, created once per process."""

    settings: Settings
    store: KeyValueStore
    patients: PatientRepository
    doctors: DoctorRepository
    appointments: AppointmentRepository
    chat: ChatRepository
    patient_service: PatientService
    booking_service: BookingService
    chat_service: ChatService
    admin_service: AdminService
    seed_loader: SeedLoader


def create_portal(settings: Optional[Settings] = None) -> ClinicPortal:
    """Create and configure the clinic portal."""
    settings = settings or get_settings()

    store = KeyValueStore(settings.storage_config())
    patients = PatientRepository(store)
    doctors = DoctorRepository(store)
    appointments = AppointmentRepository(store)
    chat = ChatRepository(store)

    responder = DialogueResponder(clinic=settings.clinic_config())
    seed_loader = SeedLoader(patients, doctors, appointments, chat)

    portal = ClinicPortal(
        settings=settings,
        store=store,
        patients=patients,
        doctors=doctors,
        appointments=appointments,
        chat=chat,
        patient_service=PatientService(patients, settings),
        booking_service=BookingService(appointments, doctors, settings),
        chat_service=ChatService(chat, doctors, responder, settings),
        admin_service=AdminService(store, patients, doctors, appointments, chat, settings),
        seed_loader=seed_loader,
    )

    if settings.seed_demo_data and seed_loader.initialize():
        logger.info(f"{settings.app_name}: demo data loaded into {settings.storage_path}")

    return portal
