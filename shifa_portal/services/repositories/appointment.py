"""
Appointment repository.
"""

from typing import List

from ..storage import Repository
from ...core.enums import AppointmentStatus, Collection
from ...core.models.appointment import Appointment


class AppointmentRepository(Repository[Appointment]):
    """Appointments with foreign-key filters."""

    collection = Collection.APPOINTMENTS
    model = Appointment

    def get_by_patient(self, patient_id: str) -> List[Appointment]:
        return [apt for apt in self.get_all() if apt.patient_id == patient_id]

    def get_by_doctor(self, doctor_id: str) -> List[Appointment]:
        return [apt for apt in self.get_all() if apt.doctor_id == doctor_id]

    def get_by_slot(self, doctor_id: str, date: str, time: str) -> List[Appointment]:
        """Get scheduled appointments holding a doctor's date and time."""
        return [
            apt
            for apt in self.get_by_doctor(doctor_id)
            if apt.date == date
            and apt.time == time
            and apt.status == AppointmentStatus.SCHEDULED
        ]
