"""Message API Routes

FastAPI routes for cold outreach and AI conversations.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from libs.result import Error
from src.api.error import ClientError
from src.api.schemas.lead_schema import ChatMessageSchema, SendMessageRequestSchema
from src.app.use_cases.messaging.dtos import ColdMessageCommandDTO, ConversationReplyCommandDTO
from src.app.use_cases.messaging.get_conversation import GetConversation
from src.app.use_cases.messaging.reply_to_conversation import ReplyToConversation
from src.app.use_cases.messaging.send_cold_message import SendColdMessage
from src.depends import ServiceContainer, get_services

router = APIRouter(prefix="/send-message", tags=["Messages"])

COLD_MESSAGE = "cold_message"
CONVERSATION = "conversation"


@router.post("", status_code=status.HTTP_200_OK)
async def send_message(
    request: SendMessageRequestSchema,
    services: ServiceContainer = Depends(get_services),
):
    """
    Send an AI-written cold email, or reply within a conversation.

    **Request body:**
    - `type`: `cold_message` or `conversation`
    - `lead` (cold_message): lead record to contact
    - `message` (optional for cold_message): extra context
    - `leadId` and `message` (conversation): lead and incoming text

    **Returns:**
    - 200: `{success, message, type}`
    - 400: Missing lead or invalid type/parameters
    - 500: AI or delivery failure
    """
    if not request.lead_id and not request.lead:
        raise ClientError(
            Error(
                code="VALIDATION_ERROR",
                message="Lead ID or lead information is required.",
            )
        )

    if request.type == COLD_MESSAGE and request.lead:
        use_case = SendColdMessage(
            services.ai_service,
            services.notification_service,
            services.message_repo,
        )
        result = await use_case.execute(
            ColdMessageCommandDTO(lead=request.lead.to_domain(), context=request.message)
        )
    elif request.type == CONVERSATION and request.lead_id and request.message:
        use_case = ReplyToConversation(services.ai_service, services.message_repo)
        result = await use_case.execute(
            ConversationReplyCommandDTO(lead_id=request.lead_id, message=request.message)
        )
    else:
        raise ClientError(
            Error(
                code="VALIDATION_ERROR",
                message="Invalid message type or missing parameters.",
            )
        )

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return {
        "success": result.value.success,
        "message": result.value.message,
        "type": request.type,
    }


@router.get("", status_code=status.HTTP_200_OK)
async def get_conversation(
    lead_id: Optional[str] = Query(default=None, alias="leadId"),
    services: ServiceContainer = Depends(get_services),
):
    """
    Fetch the conversation with a lead.

    **Query parameters:**
    - `leadId` (required): Lead identifier

    **Returns:**
    - 200: `{success, conversation, total}`
    - 400: Missing leadId
    """
    if not lead_id:
        raise ClientError(Error(code="VALIDATION_ERROR", message="Lead ID is required."))

    result = await GetConversation(services.message_repo).execute(lead_id)

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return {
        "success": True,
        "conversation": [
            ChatMessageSchema.from_domain(message).model_dump(mode="json", by_alias=True)
            for message in result.value.conversation
        ],
        "total": result.value.total,
    }
