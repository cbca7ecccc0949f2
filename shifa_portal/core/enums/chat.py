"""
Chat-related enums.
"""

from enum import Enum


class MessageType(str, Enum):
    """Author of a chat message."""

    USER = "user"
    BOT = "bot"


class Intent(str, Enum):
    """Intents recognised by the dialogue responder, highest priority first."""

    EMERGENCY = "emergency"
    APPOINTMENT = "appointment"
    DOCTOR = "doctor"
    SYMPTOM = "symptom"
    HOSPITAL = "hospital"
    MEDICATION = "medication"
    GREETING = "greeting"
    FALLBACK = "fallback"
