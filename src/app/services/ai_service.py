"""AI Text Service Interface

Defines the contract for generating outreach and conversation text.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.chat_message import ChatMessage
from src.domain.lead import Lead


class AIServiceError(Exception):
    """Raised when the completion API fails or returns an unusable payload"""
    pass


class AIService(ABC):

    @abstractmethod
    async def generate_cold_message(self, lead: Lead, context: Optional[str] = None) -> str:
        """
        Write a personalized cold message for a lead

        Args:
            lead: Lead to address
            context: Optional extra instructions from the user

        Returns:
            Message text

        Raises:
            AIServiceError: on API failure
        """
        pass

    @abstractmethod
    async def generate_response(self, conversation: List[ChatMessage], new_message: str) -> str:
        """
        Reply to the latest message of a conversation

        Args:
            conversation: Earlier messages, oldest first
            new_message: Message to reply to

        Returns:
            Reply text

        Raises:
            AIServiceError: on API failure
        """
        pass
