"""Chat Bot Webhook Routes"""

from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, Request, status

from src.api.error import ClientError
from src.app.use_cases.bot.handle_bot_update import HandleBotUpdate
from src.app.use_cases.leads.generate_leads import GenerateLeads
from src.depends import ServiceContainer, get_services

router = APIRouter(prefix="/telegram", tags=["Bot"])


@router.post("", status_code=status.HTTP_200_OK)
async def telegram_webhook(
    update: Dict[str, Any] = Body(...),
    services: ServiceContainer = Depends(get_services),
):
    """
    Receive a Telegram webhook update and answer the chat.

    **Returns:**
    - 200: `{success: true}` (also for updates that are ignored)
    - 500: Update processing failed
    """
    use_case = HandleBotUpdate(
        chat_bot=services.chat_bot,
        ai_service=services.ai_service,
        generate_leads=GenerateLeads(services.lead_source, services.lead_repo),
        lead_repo=services.lead_repo,
        app_url=services.app_url,
    )
    result = await use_case.execute(update)

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return {"success": True}


@router.get("", status_code=status.HTTP_200_OK)
async def telegram_status(
    request: Request,
    services: ServiceContainer = Depends(get_services),
):
    return {
        "message": "Telegram Bot API is running",
        "webhook_url": f"{services.app_url.rstrip('/')}{request.url.path}",
    }
