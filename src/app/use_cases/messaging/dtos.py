"""Data Transfer Objects for Messaging Use Cases"""

from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.chat_message import ChatMessage
from src.domain.lead import Lead


class ColdMessageCommandDTO(BaseModel):
    """
    Command DTO for sending a cold message

    Used as input to SendColdMessage use case.
    """

    lead: Lead = Field(..., description="Lead to contact")

    context: Optional[str] = Field(
        default=None,
        description="Extra instructions for the message writer"
    )


class ConversationReplyCommandDTO(BaseModel):
    """
    Command DTO for replying within a conversation

    Used as input to ReplyToConversation use case.
    """

    lead_id: str = Field(..., min_length=1, description="Lead identifier")

    message: str = Field(..., min_length=1, description="Incoming message from the lead")


class MessageResponseDTO(BaseModel):
    success: bool = Field(..., description="Whether the message was delivered/recorded")
    message: str = Field(..., description="Generated message text")


class ConversationResponseDTO(BaseModel):
    conversation: List[ChatMessage]
    total: int
