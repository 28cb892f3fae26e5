"""Null Message Repository Implementation

Stands in for a database: writes are discarded and reads come back empty.
"""

import logging
from typing import List
from src.app.repositories.message_repository import MessageRepository
from src.domain.chat_message import ChatMessage

logger = logging.getLogger(__name__)


class NullMessageRepository(MessageRepository):
    """MessageRepository that stores nothing"""

    async def save_message(self, message: ChatMessage) -> None:
        logger.debug(
            f"Discarding message {message.id} for lead {message.lead_id} (no persistence configured)"
        )

    async def get_conversation(self, lead_id: str) -> List[ChatMessage]:
        return []
