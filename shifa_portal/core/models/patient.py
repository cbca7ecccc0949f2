"""
Patient-related data models.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .base import Entity, RecordModel
from ..enums import Gender


class EmergencyContact(RecordModel):
    """Person to call on the patient's behalf."""

    name: str = ""
    phone: str = ""
    relation: str = ""


class Patient(Entity):
    """Registered patient profile."""

    name: str
    email: str
    phone: str
    date_of_birth: str
    gender: Gender
    address: str = ""
    emergency_contact: EmergencyContact = Field(default_factory=EmergencyContact)
    medical_history: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)
    current_medications: List[str] = Field(default_factory=list)
    last_visit: Optional[str] = None
    registration_date: str


class RegistrationRequest(BaseModel):
    """Form data submitted when a new patient registers."""

    model_config = ConfigDict(extra="forbid")

    name: str = ""
    email: str = ""
    phone: str = ""
    date_of_birth: str = ""
    gender: str = ""
    address: str = ""
    emergency_contact_name: str = ""
    emergency_contact_phone: str = ""
    emergency_contact_relation: str = ""
