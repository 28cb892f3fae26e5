from .lead_repository import NullLeadRepository
from .message_repository import NullMessageRepository

__all__ = [
    "NullLeadRepository",
    "NullMessageRepository",
]
