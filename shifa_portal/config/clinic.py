"""
Clinic contact details shown by the assistant.
"""

from typing import List
from pydantic import BaseModel, Field


class ClinicConfig(BaseModel):
    """Static clinic information."""

    name: str = "Shifa Hospital"
    location: str = "Main Campus, Healthcare District"
    main_line: str = "+92-21-1234567"
    emergency_numbers: str = "911 or 1122"
    hours: str = "24/7 Emergency, 8 AM - 8 PM General"
    departments: List[str] = Field(
        default_factory=lambda: [
            "Emergency Medicine",
            "Cardiology",
            "Orthopedics",
            "Dermatology",
            "Neurology",
        ]
    )
