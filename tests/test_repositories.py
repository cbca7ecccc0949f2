"""
Tests for the domain repositories.
"""

from shifa_portal.core.enums import Collection, DoctorStatus, MessageType
from shifa_portal.core.models import ChatMessage


def _message(message_id, patient_id=None, kind=MessageType.USER):
    return ChatMessage(
        id=message_id,
        type=kind,
        message="hello",
        timestamp="2025-01-01T09:00:00+05:00",
        patient_id=patient_id,
    )


class TestPatientRepository:
    """Email lookup and the current-session pointer."""

    def test_find_by_email_exact_match(self, patients, make_patient):
        patients.add(make_patient("pt-1", email="a@x.com"))
        assert patients.find_by_email("a@x.com").id == "pt-1"
        assert patients.find_by_email("A@X.com") is None
        assert patients.find_by_email("b@x.com") is None

    def test_find_by_email_returns_first_match(self, patients, make_patient):
        patients.add(make_patient("pt-1", email="a@x.com"))
        patients.add(make_patient("pt-2", email="a@x.com"))
        assert patients.find_by_email("a@x.com").id == "pt-1"

    def test_set_and_get_current(self, patients, make_patient):
        patient = make_patient()
        patients.add(patient)
        patients.set_current(patient)
        assert patients.get_current() == patient

    def test_set_current_none_clears(self, patients, make_patient):
        patient = make_patient()
        patients.add(patient)
        patients.set_current(patient)

        patients.set_current(None)

        assert patients.get_current() is None

    def test_pointer_stores_only_token(self, store, patients, make_patient):
        patient = make_patient()
        patients.add(patient)
        patients.set_current(patient)
        assert store.get_record(Collection.CURRENT_USER) == {"patientId": "pt-1"}

    def test_dangling_pointer_reads_none(self, patients, make_patient):
        patients.set_current(make_patient("pt-gone"))
        assert patients.get_current_token() == "pt-gone"
        assert patients.get_current() is None

    def test_legacy_pointer_with_full_patient(self, store, patients, make_patient):
        patient = make_patient()
        patients.add(patient)
        store.set_record(Collection.CURRENT_USER, patient.to_record())
        assert patients.get_current() == patient

    def test_pointer_survives_profile_update(self, patients, make_patient):
        patients.add(make_patient(name="Old Name"))
        patients.set_current(make_patient(name="Old Name"))
        patients.add(make_patient(name="New Name"))
        assert patients.get_current().name == "New Name"

    def test_pointer_keeps_sign_in_time(self, store, patients, make_patient):
        patient = make_patient()
        patients.add(patient)
        patients.set_current(patient, "2025-01-01T09:00:00+05:00")

        assert store.get_record(Collection.CURRENT_USER) == {
            "patientId": "pt-1",
            "startedAt": "2025-01-01T09:00:00+05:00",
        }
        assert patients.get_current_started_at() == "2025-01-01T09:00:00+05:00"

    def test_legacy_pointer_has_no_sign_in_time(self, store, patients, make_patient):
        patient = make_patient()
        patients.add(patient)
        store.set_record(Collection.CURRENT_USER, patient.to_record())
        assert patients.get_current_started_at() is None


class TestDoctorRepository:
    """Directory search."""

    def _seed(self, doctors, make_doctor):
        doctors.add(make_doctor("1", name="Dr. Sarah Johnson", specialization="Cardiology"))
        doctors.add(make_doctor("2", name="Dr. Ahmed Khan", specialization="Orthopedics"))
        doctors.add(make_doctor("3", name="Dr. John Reed", specialization="Cardiology",
                                status=DoctorStatus.BUSY))
        doctors.add(make_doctor("4", name="Dr. Michael Chen", specialization="Neurology"))

    def test_empty_query_without_filter_returns_all(self, doctors, make_doctor):
        self._seed(doctors, make_doctor)
        assert [d.id for d in doctors.search("")] == ["1", "2", "3", "4"]
        assert [d.id for d in doctors.search("", None)] == ["1", "2", "3", "4"]

    def test_specialization_filter_is_exact(self, doctors, make_doctor):
        self._seed(doctors, make_doctor)
        assert [d.id for d in doctors.search("", "Cardiology")] == ["1", "3"]
        assert doctors.search("", "cardiology") == []
        assert doctors.search("", "Cardio") == []

    def test_query_matches_name_case_insensitively(self, doctors, make_doctor):
        self._seed(doctors, make_doctor)
        assert [d.id for d in doctors.search("john")] == ["1", "3"]

    def test_query_matches_specialization(self, doctors, make_doctor):
        self._seed(doctors, make_doctor)
        assert [d.id for d in doctors.search("NEURO")] == ["4"]

    def test_query_and_filter_combine(self, doctors, make_doctor):
        self._seed(doctors, make_doctor)
        assert [d.id for d in doctors.search("john", "Orthopedics")] == []
        assert [d.id for d in doctors.search("reed", "Cardiology")] == ["3"]

    def test_find_by_id(self, doctors, make_doctor):
        self._seed(doctors, make_doctor)
        assert doctors.find_by_id("2").name == "Dr. Ahmed Khan"
        assert doctors.find_by_id("99") is None

    def test_specializations_and_available(self, doctors, make_doctor):
        self._seed(doctors, make_doctor)
        assert doctors.specializations() == ["Cardiology", "Orthopedics", "Neurology"]
        assert [d.id for d in doctors.available()] == ["1", "2", "4"]


class TestAppointmentRepository:
    """Foreign-key filters."""

    def test_get_by_patient_and_doctor(self, appointments, make_appointment):
        appointments.add(make_appointment("apt-1", patient_id="pt-1", doctor_id="dr-1"))
        appointments.add(make_appointment("apt-2", patient_id="pt-2", doctor_id="dr-1"))
        appointments.add(make_appointment("apt-3", patient_id="pt-1", doctor_id="dr-2"))

        assert [a.id for a in appointments.get_by_patient("pt-1")] == ["apt-1", "apt-3"]
        assert [a.id for a in appointments.get_by_doctor("dr-1")] == ["apt-1", "apt-2"]
        assert appointments.get_by_patient("pt-404") == []

    def test_dangling_references_are_kept(self, appointments, doctors, make_appointment):
        appointments.add(make_appointment("apt-1", doctor_id="dr-deleted"))
        assert doctors.find("dr-deleted") is None
        assert len(appointments.get_by_patient("pt-1")) == 1


class TestChatRepository:
    """Transcript history."""

    def test_history_filters_by_patient(self, chat):
        chat.add_message(_message("msg-1", "pt-1"))
        chat.add_message(_message("msg-2", "pt-2"))
        chat.add_message(_message("msg-3"))

        assert [m.id for m in chat.get_history()] == ["msg-1", "msg-2", "msg-3"]
        assert [m.id for m in chat.get_history("pt-1")] == ["msg-1"]

    def test_clear_history(self, chat):
        chat.add_message(_message("msg-1", "pt-1"))
        assert chat.clear_history().ok
        assert chat.get_history() == []
