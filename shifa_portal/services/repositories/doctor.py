"""
Doctor repository.
"""

from typing import List, Optional

from ..storage import Repository
from ...core.enums import Collection
from ...core.models.doctor import Doctor


class DoctorRepository(Repository[Doctor]):
    """Doctor directory."""

    collection = Collection.DOCTORS
    model = Doctor

    def find_by_id(self, doctor_id: str) -> Optional[Doctor]:
        return self.find(doctor_id)

    def search(self, query: str = "", specialization: Optional[str] = None) -> List[Doctor]:
        """
        Filter the directory.

        Args:
            query: Case-insensitive text matched against name or specialization;
                empty matches everything
            specialization: Exact specialization to keep; None or empty keeps all

        Returns:
            Matching doctors in storage order
        """
        needle = (query or "").lower()
        results = []
        for doctor in self.get_all():
            matches_query = (
                needle == ""
                or needle in doctor.name.lower()
                or needle in doctor.specialization.lower()
            )
            matches_specialization = not specialization or doctor.specialization == specialization
            if matches_query and matches_specialization:
                results.append(doctor)
        return results

    def specializations(self) -> List[str]:
        """Get distinct specializations in first-seen order."""
        seen: List[str] = []
        for doctor in self.get_all():
            if doctor.specialization not in seen:
                seen.append(doctor.specialization)
        return seen

    def available(self) -> List[Doctor]:
        return [doctor for doctor in self.get_all() if doctor.is_available()]
