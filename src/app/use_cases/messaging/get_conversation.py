"""GetConversation Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.message_repository import MessageRepository
from .dtos import ConversationResponseDTO

logger = logging.getLogger(__name__)


class GetConversation:

    def __init__(self, message_repo: MessageRepository):
        self.message_repo = message_repo

    async def execute(self, lead_id: str) -> Result[ConversationResponseDTO]:
        try:
            conversation = await self.message_repo.get_conversation(lead_id)
            return Return.ok(
                ConversationResponseDTO(conversation=conversation, total=len(conversation))
            )
        except Exception as e:
            logger.error(f"Fetching conversation {lead_id} failed: {e}")
            return Return.err(
                Error(
                    code="GET_CONVERSATION_FAILED",
                    message="Failed to fetch conversation",
                    reason=str(e),
                )
            )
