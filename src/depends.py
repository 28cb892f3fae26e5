from dataclasses import dataclass
from fastapi import Request
from src.adapter.repositories.lead_repository import NullLeadRepository
from src.adapter.repositories.message_repository import NullMessageRepository
from src.adapter.services.ai_service import OpenRouterAIService
from src.adapter.services.chat_bot_service import TelegramBotService
from src.adapter.services.lead_source_service import MockLeadSourceService
from src.adapter.services.notification_service import create_notification_service
from src.adapter.services.pdf_service import ReportLabPdfService
from src.app.repositories.lead_repository import LeadRepository
from src.app.repositories.message_repository import MessageRepository
from src.app.services.ai_service import AIService
from src.app.services.chat_bot_service import ChatBotService
from src.app.services.lead_source_service import LeadSourceService
from src.app.services.notification_service import NotificationService
from src.app.services.pdf_service import PdfService


@dataclass
class ServiceContainer:
    """Collaborators shared by all requests, built once per application"""

    pdf_service: PdfService
    notification_service: NotificationService
    ai_service: AIService
    lead_source: LeadSourceService
    chat_bot: ChatBotService
    lead_repo: LeadRepository
    message_repo: MessageRepository
    app_url: str


def build_services(config) -> ServiceContainer:
    return ServiceContainer(
        pdf_service=ReportLabPdfService(
            company_name=config.COMPANY_NAME,
            company_address=config.COMPANY_ADDRESS,
        ),
        notification_service=create_notification_service(
            api_key=config.EMAIL_API_KEY,
            sender_email=config.EMAIL_FROM_ADDRESS,
            sender_name=config.EMAIL_FROM_NAME,
            api_url=config.EMAIL_API_URL,
            timeout=config.EMAIL_TIMEOUT,
            max_attempts=config.EMAIL_MAX_ATTEMPTS,
        ),
        ai_service=OpenRouterAIService(
            api_key=config.AI_API_KEY,
            model=config.AI_MODEL,
            base_url=config.AI_BASE_URL,
            timeout=config.AI_TIMEOUT,
        ),
        lead_source=MockLeadSourceService(max_count=config.LEAD_MAX_COUNT),
        chat_bot=TelegramBotService(
            token=config.TELEGRAM_BOT_TOKEN,
            timeout=config.TELEGRAM_TIMEOUT,
        ),
        lead_repo=NullLeadRepository(),
        message_repo=NullMessageRepository(),
        app_url=config.APP_URL,
    )


def get_services(request: Request) -> ServiceContainer:
    return request.app.state.services
