"""Messaging use cases"""
from .send_cold_message import SendColdMessage
from .reply_to_conversation import ReplyToConversation
from .get_conversation import GetConversation
from .dtos import (
    ColdMessageCommandDTO,
    ConversationReplyCommandDTO,
    MessageResponseDTO,
    ConversationResponseDTO,
)

__all__ = [
    "SendColdMessage",
    "ReplyToConversation",
    "GetConversation",
    "ColdMessageCommandDTO",
    "ConversationReplyCommandDTO",
    "MessageResponseDTO",
    "ConversationResponseDTO",
]
