"""
Booking service for handling appointment bookings.
"""

from datetime import datetime
from typing import List, Optional

from ..repositories import AppointmentRepository, DoctorRepository
from ..storage import ensure_written
from ...config import Settings, get_settings
from ...core.enums import AppointmentStatus
from ...core.exceptions import (
    AppointmentNotFoundError,
    BookingValidationError,
    SlotUnavailableError,
)
from ...core.models.appointment import Appointment, AppointmentView, BookingRequest
from ...core.models.doctor import Doctor
from ...core.models.session import Session
from ...utils.date import DateParser
from ...utils.ids import new_id
from ...utils.logging import get_logger
from ...utils.validation import ValidationUtils

logger = get_logger("shifa.booking")


class BookingService:
    """
    Service for booking, cancelling and listing appointments.

    Double-booking is allowed unless ``enforce_slot_conflicts`` is enabled
    in settings, in which case the slot must be one the doctor declares and
    must not already hold a scheduled appointment.
    """

    def __init__(
        self,
        appointments: AppointmentRepository,
        doctors: DoctorRepository,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.appointments = appointments
        self.doctors = doctors
        self.date_parser = DateParser(self.settings.timezone)

    def _check_slot(self, doctor: Doctor, date: str, time: str) -> None:
        weekday = DateParser.weekday_name(date)
        if not doctor.availability.offers(weekday, time):
            raise SlotUnavailableError(
                f"{doctor.name} does not take appointments on {weekday} at {time}"
            )
        if self.appointments.get_by_slot(doctor.id, date, time):
            raise SlotUnavailableError(f"{doctor.name} is already booked on {date} at {time}")

    def book(self, session: Session, request: BookingRequest) -> Appointment:
        """
        Book an appointment for the signed-in patient.

        Args:
            session: Signed-in session
            request: Doctor, date, slot and visit details

        Returns:
            The saved appointment

        Raises:
            BookingValidationError: missing selections, unknown or unavailable doctor
            SlotUnavailableError: slot not offered or taken (only when enforced)
        """
        errors = ValidationUtils.validate_booking_request(request)
        if errors:
            raise BookingValidationError("Please select a date and time slot", errors)

        doctor = self.doctors.find_by_id(request.doctor_id)
        if doctor is None:
            raise BookingValidationError(f"Doctor {request.doctor_id} not found")
        if not doctor.is_available():
            raise BookingValidationError(f"Doctor is currently {doctor.status.value}")

        if self.settings.enforce_slot_conflicts:
            self._check_slot(doctor, request.date, request.time)

        appointment = Appointment(
            id=new_id("apt"),
            patient_id=session.patient_id,
            doctor_id=doctor.id,
            date=request.date,
            time=request.time,
            type=request.type,
            status=AppointmentStatus.SCHEDULED,
            notes=request.notes,
            symptoms=request.symptoms,
        )
        ensure_written(self.appointments.add(appointment), "appointment")
        logger.info(
            f"booked {appointment.id} with {doctor.id} on {appointment.date} at {appointment.time}"
        )
        return appointment

    def cancel(self, session: Session, appointment_id: str) -> Appointment:
        """
        Cancel one of the patient's appointments.

        Raises:
            AppointmentNotFoundError: no such appointment for this patient
        """
        appointment = self.appointments.find(appointment_id)
        if appointment is None or appointment.patient_id != session.patient_id:
            raise AppointmentNotFoundError(f"Appointment {appointment_id} not found")

        cancelled = appointment.model_copy(update={"status": AppointmentStatus.CANCELLED})
        ensure_written(self.appointments.add(cancelled), "appointment")
        logger.info(f"cancelled {appointment_id}")
        return cancelled

    def list_for_patient(self, session: Session) -> List[AppointmentView]:
        """Get the patient's appointments with their doctors, newest first."""
        doctors = {doctor.id: doctor for doctor in self.doctors.get_all()}
        views = [
            AppointmentView(appointment=apt, doctor=doctors.get(apt.doctor_id))
            for apt in self.appointments.get_by_patient(session.patient_id)
        ]
        views.sort(key=lambda view: (view.appointment.date, view.appointment.time), reverse=True)
        return views

    def upcoming(self, session: Session, now: Optional[datetime] = None) -> List[AppointmentView]:
        """Get scheduled appointments that start after ``now``."""
        now = now or self.date_parser.now()
        return [v for v in self.list_for_patient(session) if v.appointment.is_upcoming(now)]

    def past(self, session: Session, now: Optional[datetime] = None) -> List[AppointmentView]:
        """Get every appointment that is not upcoming."""
        now = now or self.date_parser.now()
        return [v for v in self.list_for_patient(session) if not v.appointment.is_upcoming(now)]

    def upcoming_count(self, session: Session, today: Optional[str] = None) -> int:
        """Count scheduled appointments dated today or later (dashboard counter)."""
        today = today or self.date_parser.today()
        return sum(
            1
            for apt in self.appointments.get_by_patient(session.patient_id)
            if apt.status == AppointmentStatus.SCHEDULED and apt.date >= today
        )
