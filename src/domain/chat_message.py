"""Chat Message Domain Entity

One message in a conversation with a lead.
"""

from datetime import datetime, timezone
from enum import Enum
from sqlmodel import Field
from src.domain.base import BaseModel


class MessageDirection(str, Enum):
    """Who wrote the message, from our side of the conversation"""
    SENT = "sent"          # Written by us (or the AI on our behalf)
    RECEIVED = "received"  # Written by the lead


class ChatMessage(BaseModel):
    """ChatMessage - a single conversation entry"""

    id: str = Field(description="Message identifier (e.g., msg_1718000000000_ai)")

    lead_id: str = Field(description="Lead the conversation belongs to")

    content: str = Field(description="Message text")

    direction: MessageDirection = Field(description="sent or received")

    platform: str = Field(default="chat", description="Channel (chat, email, ...)")

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the message was written"
    )
