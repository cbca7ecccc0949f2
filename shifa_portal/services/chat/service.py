"""
Chat service: persists each turn and asks the responder for a reply.
"""

import asyncio
import random
from typing import List, Optional

from .responder import DialogueResponder
from ..repositories import ChatRepository, DoctorRepository
from ..storage import ensure_written
from ...config import Settings, get_settings
from ...core.enums import MessageType
from ...core.models.chat import ChatExchange, ChatMessage
from ...core.models.session import Session
from ...utils.date import now_iso
from ...utils.ids import new_id
from ...utils.logging import get_logger

logger = get_logger("shifa.chat")

WELCOME_TEMPLATE = (
    "Hello {name}! I'm your AI medical assistant. I can help you with:\n"
    "\n"
    "• Booking appointments with doctors\n"
    "• Answering general health questions\n"
    "• Providing hospital information\n"
    "• Emergency assistance guidance\n"
    "• Medication reminders\n"
    "\n"
    "How can I help you today?"
)


class ChatService:
    """Service for the assistant conversation of the signed-in patient."""

    def __init__(
        self,
        chat: ChatRepository,
        doctors: DoctorRepository,
        responder: Optional[DialogueResponder] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.chat = chat
        self.doctors = doctors
        self.responder = responder or DialogueResponder(clinic=self.settings.clinic_config())

    def _message(self, session: Session, kind: MessageType, text: str) -> ChatMessage:
        return ChatMessage(
            id=new_id("msg"),
            type=kind,
            message=text,
            timestamp=now_iso(self.settings.timezone),
            patient_id=session.patient_id,
        )

    def _persist(self, message: ChatMessage) -> ChatMessage:
        ensure_written(self.chat.add_message(message), f"{message.type.value} message")
        return message

    def typing_delay(self) -> float:
        """Get a random delay in seconds used to simulate typing."""
        low = max(0.0, self.settings.typing_delay_min)
        high = max(low, self.settings.typing_delay_max)
        return random.uniform(low, high)

    def history(self, session: Session) -> List[ChatMessage]:
        return self.chat.get_history(session.patient_id)

    def start_conversation(self, session: Session) -> List[ChatMessage]:
        """
        Get the patient's transcript, greeting them on the first visit.

        Args:
            session: Signed-in session

        Returns:
            Existing history, or a list holding the new welcome message
        """
        history = self.history(session)
        if history:
            return history

        welcome = self._message(
            session, MessageType.BOT, WELCOME_TEMPLATE.format(name=session.patient.name)
        )
        return [self._persist(welcome)]

    async def send_message(self, session: Session, text: str) -> Optional[ChatExchange]:
        """
        Handle one chat turn.

        The user message is saved before the typing delay, so cancelling
        during the delay keeps it in the transcript.

        Args:
            session: Signed-in session
            text: Text typed by the patient

        Returns:
            The saved user and bot messages, or None for blank input
        """
        cleaned = (text or "").strip()
        if not cleaned:
            return None

        user_message = self._persist(self._message(session, MessageType.USER, cleaned))
        logger.info(f"chat: message from {session.patient_id}")

        delay = self.typing_delay()
        if delay > 0:
            await asyncio.sleep(delay)

        reply = self.responder.respond(cleaned, self.doctors.get_all())
        bot_message = self._persist(self._message(session, MessageType.BOT, reply))
        logger.info(f"chat: replied to {session.patient_id} ({self.responder.classify(cleaned).value})")

        return ChatExchange(user_message=user_message, bot_message=bot_message)

    def clear_history(self) -> None:
        ensure_written(self.chat.clear_history(), "chat history")
