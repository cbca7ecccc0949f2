"""
Names of the persisted records.
"""

from enum import Enum


class Collection(str, Enum):
    """Named records kept in the key-value store."""

    PATIENTS = "patients"
    DOCTORS = "doctors"
    APPOINTMENTS = "appointments"
    CHAT_HISTORY = "chat_history"
    CURRENT_USER = "current_user"
