"""
Admin service: statistics, data export and reset.
"""

import json
from typing import Optional

from ..repositories import (
    AppointmentRepository,
    ChatRepository,
    DoctorRepository,
    PatientRepository,
)
from ..storage import KeyValueStore, ensure_written
from ...config import Settings, get_settings
from ...core.models.admin import PortalSnapshot, PortalStats
from ...utils.date import DateParser, now_iso
from ...utils.logging import get_logger

logger = get_logger("shifa.admin")


class AdminService:
    """Read-only views over every collection, plus a full reset."""

    def __init__(
        self,
        store: KeyValueStore,
        patients: PatientRepository,
        doctors: DoctorRepository,
        appointments: AppointmentRepository,
        chat: ChatRepository,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.store = store
        self.patients = patients
        self.doctors = doctors
        self.appointments = appointments
        self.chat = chat

    def stats(self) -> PortalStats:
        return PortalStats(
            patients=self.patients.count(),
            doctors=self.doctors.count(),
            appointments=self.appointments.count(),
            chat_messages=self.chat.count(),
        )

    def snapshot(self) -> PortalSnapshot:
        """Get every collection as one export object."""
        return PortalSnapshot(
            patients=self.patients.get_all(),
            doctors=self.doctors.get_all(),
            appointments=self.appointments.get_all(),
            chat_history=self.chat.get_history(),
            export_date=now_iso(self.settings.timezone),
        )

    def export_json(self, snapshot: Optional[PortalSnapshot] = None) -> str:
        """Serialize a snapshot as an indented JSON document."""
        snapshot = snapshot or self.snapshot()
        return json.dumps(snapshot.to_record(), indent=2, ensure_ascii=False)

    def export_filename(self) -> str:
        today = DateParser(self.settings.timezone).today()
        return f"shifa-hospital-data-{today}.json"

    def clear_all_data(self) -> None:
        """Delete every stored record, including the current session."""
        ensure_written(self.store.clear(), "reset")
        logger.warning("all portal data cleared")
