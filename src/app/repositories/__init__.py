from .lead_repository import LeadRepository
from .message_repository import MessageRepository

__all__ = [
    "LeadRepository",
    "MessageRepository",
]
