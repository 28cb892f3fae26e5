"""Message Repository Interface

Defines the contract for conversation persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.chat_message import ChatMessage


class MessageRepository(ABC):
    """
    Repository interface for ChatMessage persistence

    Implementations may discard writes; callers treat empty reads as normal.
    """

    @abstractmethod
    async def save_message(self, message: ChatMessage) -> None:
        """
        Persist a conversation message

        Args:
            message: Message to store
        """
        pass

    @abstractmethod
    async def get_conversation(self, lead_id: str) -> List[ChatMessage]:
        """
        Retrieve a conversation, oldest message first

        Args:
            lead_id: Lead identifier

        Returns:
            List of messages (possibly empty)
        """
        pass
