"""
Tests for booking and cancelling appointments.
"""

from datetime import datetime

import pytest

from shifa_portal.core.enums import AppointmentStatus, AppointmentType, Collection, DoctorStatus
from shifa_portal.core.exceptions import (
    AppointmentNotFoundError,
    BookingValidationError,
    SlotUnavailableError,
)
from shifa_portal.core.models import BookingRequest
from shifa_portal.services.booking import BookingService

# 2030-01-07 is a Monday.
MONDAY = "2030-01-07"
TUESDAY = "2030-01-08"


@pytest.fixture
def service(appointments, doctors, settings, make_doctor):
    doctors.add(make_doctor("dr-1"))
    doctors.add(make_doctor("dr-busy", status=DoctorStatus.BUSY))
    return BookingService(appointments, doctors, settings)


@pytest.fixture
def strict_service(appointments, doctors, settings, make_doctor):
    doctors.add(make_doctor("dr-1"))
    strict = settings.model_copy(update={"enforce_slot_conflicts": True})
    return BookingService(appointments, doctors, strict)


class TestAppointmentRoundTrip:
    """Add, list and cancel through the repository."""

    def test_round_trip(self, appointments, make_appointment):
        appointments.add(make_appointment("apt-1", patient_id="pt-1", doctor_id="dr-1"))

        found = appointments.get_by_patient("pt-1")
        assert [a.id for a in found] == ["apt-1"]

        cancelled = found[0].model_copy(update={"status": AppointmentStatus.CANCELLED})
        appointments.add(cancelled)

        found = appointments.get_by_patient("pt-1")
        assert len(found) == 1
        assert found[0].status == AppointmentStatus.CANCELLED


class TestBook:
    """Booking validation."""

    def test_book_creates_scheduled_appointment(self, service, session, appointments):
        apt = service.book(session, BookingRequest(doctor_id="dr-1", date=MONDAY, time="09:00"))

        assert apt.id.startswith("apt-")
        assert apt.patient_id == "pt-1"
        assert apt.status == AppointmentStatus.SCHEDULED
        assert apt.type == AppointmentType.CONSULTATION
        assert appointments.find(apt.id) == apt

    def test_blank_optional_fields_not_stored(self, service, session, store):
        service.book(session, BookingRequest(doctor_id="dr-1", date=MONDAY, time="09:00"))

        record = store.get(Collection.APPOINTMENTS)[0]
        assert "notes" not in record
        assert "symptoms" not in record

    def test_missing_date_or_time(self, service, session):
        with pytest.raises(BookingValidationError) as exc_info:
            service.book(session, BookingRequest(doctor_id="dr-1"))
        assert "Please select a date" in exc_info.value.errors
        assert "Please select a time slot" in exc_info.value.errors

    def test_malformed_date(self, service, session):
        with pytest.raises(BookingValidationError):
            service.book(session, BookingRequest(doctor_id="dr-1", date="07/01/2030", time="09:00"))

    def test_unknown_doctor(self, service, session):
        with pytest.raises(BookingValidationError):
            service.book(session, BookingRequest(doctor_id="dr-404", date=MONDAY, time="09:00"))

    def test_unavailable_doctor(self, service, session):
        with pytest.raises(BookingValidationError):
            service.book(session, BookingRequest(doctor_id="dr-busy", date=MONDAY, time="09:00"))

    def test_double_booking_allowed_by_default(self, service, session, appointments):
        request = BookingRequest(doctor_id="dr-1", date=TUESDAY, time="23:00")
        service.book(session, request)
        service.book(session, request)
        assert len(appointments.get_by_doctor("dr-1")) == 2


class TestSlotConflicts:
    """Optional availability and overlap checks."""

    def test_slot_must_be_declared(self, strict_service, session):
        with pytest.raises(SlotUnavailableError):
            strict_service.book(session, BookingRequest(doctor_id="dr-1", date=TUESDAY, time="09:00"))
        with pytest.raises(SlotUnavailableError):
            strict_service.book(session, BookingRequest(doctor_id="dr-1", date=MONDAY, time="11:00"))

    def test_taken_slot_rejected(self, strict_service, session):
        request = BookingRequest(doctor_id="dr-1", date=MONDAY, time="09:00")
        strict_service.book(session, request)
        with pytest.raises(SlotUnavailableError):
            strict_service.book(session, request)

    def test_cancelled_slot_can_be_rebooked(self, strict_service, session):
        request = BookingRequest(doctor_id="dr-1", date=MONDAY, time="10:00")
        first = strict_service.book(session, request)
        strict_service.cancel(session, first.id)
        assert strict_service.book(session, request).status == AppointmentStatus.SCHEDULED


class TestCancelAndList:
    """Cancelling and listing a patient's appointments."""

    def test_cancel_keeps_single_entry(self, service, session, appointments):
        apt = service.book(session, BookingRequest(doctor_id="dr-1", date=MONDAY, time="09:00"))

        cancelled = service.cancel(session, apt.id)

        assert cancelled.status == AppointmentStatus.CANCELLED
        stored = appointments.get_by_patient("pt-1")
        assert len(stored) == 1
        assert stored[0].status == AppointmentStatus.CANCELLED

    def test_cannot_cancel_other_patients_appointment(self, service, session, appointments,
                                                      make_appointment):
        appointments.add(make_appointment("apt-x", patient_id="pt-2"))
        with pytest.raises(AppointmentNotFoundError):
            service.cancel(session, "apt-x")
        with pytest.raises(AppointmentNotFoundError):
            service.cancel(session, "apt-missing")

    def test_list_joins_doctors_newest_first(self, service, session, appointments,
                                              make_appointment):
        appointments.add(make_appointment("apt-old", date="2024-05-01", time="09:00"))
        appointments.add(make_appointment("apt-new", date="2030-01-07", time="10:00"))
        appointments.add(make_appointment("apt-orphan", doctor_id="dr-deleted",
                                          date="2030-01-07", time="09:00"))

        views = service.list_for_patient(session)

        assert [v.appointment.id for v in views] == ["apt-new", "apt-orphan", "apt-old"]
        assert views[0].doctor.id == "dr-1"
        assert views[1].doctor is None
        assert views[1].doctor_name == "Unknown doctor"

    def test_upcoming_and_past(self, service, session, appointments, make_appointment):
        appointments.add(make_appointment("apt-past", date="2024-05-01"))
        appointments.add(make_appointment("apt-future", date="2030-01-07"))
        appointments.add(make_appointment("apt-cancelled", date="2030-01-07", time="10:00",
                                          status=AppointmentStatus.CANCELLED))
        now = datetime(2025, 6, 1, 12, 0)

        assert [v.appointment.id for v in service.upcoming(session, now)] == ["apt-future"]
        assert [v.appointment.id for v in service.past(session, now)] == ["apt-cancelled", "apt-past"]
        assert service.upcoming_count(session, today="2025-06-01") == 1

    def test_upcoming_count_includes_today(self, service, session, appointments,
                                           make_appointment):
        appointments.add(make_appointment("apt-today", date="2025-06-01", time="08:00"))
        appointments.add(make_appointment("apt-yesterday", date="2025-05-31"))

        assert service.upcoming_count(session, today="2025-06-01") == 1
