"""ReplyToConversation Use Case

Answers a lead's message using the conversation so far.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional
from libs.result import Result, Return, Error
from src.app.repositories.message_repository import MessageRepository
from src.app.services.ai_service import AIService, AIServiceError
from src.domain.chat_message import ChatMessage, MessageDirection
from .dtos import ConversationReplyCommandDTO, MessageResponseDTO

logger = logging.getLogger(__name__)


class ReplyToConversation:
    """
    Use Case: Generate and record a reply

    Flow:
    1. Load conversation history
    2. Generate reply
    3. Save the incoming message and the reply
    """

    def __init__(
        self,
        ai_service: AIService,
        message_repo: MessageRepository,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.ai_service = ai_service
        self.message_repo = message_repo
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    async def execute(self, command: ConversationReplyCommandDTO) -> Result[MessageResponseDTO]:
        try:
            conversation = await self.message_repo.get_conversation(command.lead_id)

            try:
                reply = await self.ai_service.generate_response(conversation, command.message)
            except AIServiceError as e:
                return Return.err(
                    Error(
                        code="AI_GENERATION_FAILED",
                        message="Failed to generate AI response",
                        reason=str(e),
                    )
                )

            now = self.clock()
            stamp = int(now.timestamp() * 1000)
            await self.message_repo.save_message(
                ChatMessage(
                    id=f"msg_{stamp}_user",
                    lead_id=command.lead_id,
                    content=command.message,
                    direction=MessageDirection.RECEIVED,
                    platform="chat",
                    timestamp=now,
                )
            )
            await self.message_repo.save_message(
                ChatMessage(
                    id=f"msg_{stamp}_ai",
                    lead_id=command.lead_id,
                    content=reply,
                    direction=MessageDirection.SENT,
                    platform="chat",
                    timestamp=now,
                )
            )

            return Return.ok(MessageResponseDTO(success=True, message=reply))

        except Exception as e:
            logger.error(f"Replying in conversation {command.lead_id} failed: {e}")
            return Return.err(
                Error(
                    code="SEND_MESSAGE_FAILED",
                    message="Failed to send message",
                    reason=str(e),
                )
            )
