from .pdf_service import ReportLabPdfService
from .notification_service import (
    LoggingNotificationService,
    BrevoNotificationService,
    create_notification_service,
)
from .ai_service import OpenRouterAIService
from .lead_source_service import MockLeadSourceService
from .chat_bot_service import TelegramBotService

__all__ = [
    "ReportLabPdfService",
    "LoggingNotificationService",
    "BrevoNotificationService",
    "create_notification_service",
    "OpenRouterAIService",
    "MockLeadSourceService",
    "TelegramBotService",
]
