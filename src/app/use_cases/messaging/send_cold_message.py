"""SendColdMessage Use Case

Writes a personalized outreach message with the AI service and emails it.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional
from libs.result import Result, Return, Error
from src.app.repositories.message_repository import MessageRepository
from src.app.services.ai_service import AIService, AIServiceError
from src.app.services.notification_service import NotificationService
from src.domain.chat_message import ChatMessage, MessageDirection
from src.domain.lead import LeadStatus
from .dtos import ColdMessageCommandDTO, MessageResponseDTO

logger = logging.getLogger(__name__)


class SendColdMessage:
    """
    Use Case: Send an AI-written cold email to a lead

    Business Rules:
    1. The message text is returned even when delivery fails
    2. Only delivered messages are saved to the conversation
    3. A delivered message marks the lead as contacted
    """

    def __init__(
        self,
        ai_service: AIService,
        notification_service: NotificationService,
        message_repo: MessageRepository,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.ai_service = ai_service
        self.notification_service = notification_service
        self.message_repo = message_repo
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    async def execute(self, command: ColdMessageCommandDTO) -> Result[MessageResponseDTO]:
        lead = command.lead
        try:
            try:
                content = await self.ai_service.generate_cold_message(lead, command.context)
            except AIServiceError as e:
                return Return.err(
                    Error(
                        code="AI_GENERATION_FAILED",
                        message="Failed to generate cold message",
                        reason=str(e),
                    )
                )

            try:
                delivered = bool(await self.notification_service.send_cold_email(lead, content))
            except Exception as e:
                logger.error(f"Cold email to lead {lead.id} failed: {e}")
                delivered = False

            if delivered:
                now = self.clock()
                await self.message_repo.save_message(
                    ChatMessage(
                        id=f"msg_{int(now.timestamp() * 1000)}",
                        lead_id=lead.id,
                        content=content,
                        direction=MessageDirection.SENT,
                        platform="email",
                        timestamp=now,
                    )
                )
                lead.status = LeadStatus.CONTACTED
                lead.last_contact = now

            return Return.ok(MessageResponseDTO(success=delivered, message=content))

        except Exception as e:
            logger.error(f"Sending cold message to lead {lead.id} failed: {e}")
            return Return.err(
                Error(
                    code="SEND_MESSAGE_FAILED",
                    message="Failed to send message",
                    reason=str(e),
                )
            )
