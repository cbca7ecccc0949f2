"""
Chat-related data models.
"""

from dataclasses import dataclass
from typing import Optional

from .base import Entity
from ..enums import MessageType


class ChatMessage(Entity):
    """Individual chat message model."""

    type: MessageType
    message: str
    timestamp: str
    patient_id: Optional[str] = None


@dataclass
class ChatExchange:
    """A user message and the reply generated for it."""

    user_message: ChatMessage
    bot_message: ChatMessage
