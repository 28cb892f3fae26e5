from .pdf_service import PdfService, InvoiceRenderError
from .notification_service import NotificationService
from .ai_service import AIService, AIServiceError
from .lead_source_service import LeadSourceService
from .chat_bot_service import ChatBotService

__all__ = [
    "PdfService",
    "InvoiceRenderError",
    "NotificationService",
    "AIService",
    "AIServiceError",
    "LeadSourceService",
    "ChatBotService",
]
