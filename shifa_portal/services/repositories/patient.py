"""
Patient repository and the current-session pointer.
"""

from typing import Optional

from ..storage import Repository, StoreResult
from ...core.enums import Collection
from ...core.models.patient import Patient


class PatientRepository(Repository[Patient]):
    """Patients keyed by id, with email lookup."""

    collection = Collection.PATIENTS
    model = Patient

    def find_by_email(self, email: str) -> Optional[Patient]:
        """Get the first patient whose email matches exactly (case-sensitive)."""
        for patient in self.get_all():
            if patient.email == email:
                return patient
        return None

    def get_current_token(self) -> Optional[str]:
        """Get the stored patient id of the current session, if any."""
        record = self.store.get_record(Collection.CURRENT_USER)
        if not record:
            return None
        # Older records hold the whole patient object rather than a token.
        token = record.get("patientId") or record.get("id")
        return token if isinstance(token, str) and token else None

    def get_current_started_at(self) -> Optional[str]:
        """Get the sign-in time stored with the pointer, if any."""
        record = self.store.get_record(Collection.CURRENT_USER)
        if not record or "patientId" not in record:
            return None
        started_at = record.get("startedAt")
        return started_at if isinstance(started_at, str) and started_at else None

    def get_current(self) -> Optional[Patient]:
        """
        Get the patient this client is acting as.

        The pointer stores the patient id and sign-in time; it is resolved against the
        patient collection, so a dangling pointer reads as None.
        """
        token = self.get_current_token()
        if token is None:
            return None
        return self.find(token)

    def set_current(
        self, patient: Optional[Patient], started_at: Optional[str] = None
    ) -> StoreResult:
        """Point the session at a patient; None clears it."""
        if patient is None:
            return self.store.set_record(Collection.CURRENT_USER, None)
        record = {"patientId": patient.id}
        if started_at:
            record["startedAt"] = started_at
        return self.store.set_record(Collection.CURRENT_USER, record)
