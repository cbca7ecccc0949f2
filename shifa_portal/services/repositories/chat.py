"""
Chat message repository.
"""

from typing import List, Optional

from ..storage import Repository, StoreResult
from ...core.enums import Collection
from ...core.models.chat import ChatMessage


class ChatRepository(Repository[ChatMessage]):
    """Chat transcript across all patients."""

    collection = Collection.CHAT_HISTORY
    model = ChatMessage

    def get_history(self, patient_id: Optional[str] = None) -> List[ChatMessage]:
        """Get all messages, or only those of one patient."""
        messages = self.get_all()
        if patient_id:
            return [msg for msg in messages if msg.patient_id == patient_id]
        return messages

    def add_message(self, message: ChatMessage) -> StoreResult:
        return self.add(message)

    def clear_history(self) -> StoreResult:
        return self.replace_all([])
