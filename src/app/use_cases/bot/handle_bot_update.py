"""HandleBotUpdate Use Case

Routes chat-bot webhook updates to command handlers.
"""

import logging
from collections import Counter
from typing import Any, Dict, Optional
from libs.result import Result, Return, Error
from src.app.repositories.lead_repository import LeadRepository
from src.app.services.ai_service import AIService, AIServiceError
from src.app.services.chat_bot_service import ChatBotService
from src.app.use_cases.leads.dtos import GenerateLeadsCommandDTO
from src.app.use_cases.leads.generate_leads import GenerateLeads
from src.domain.lead import LeadStatus

logger = logging.getLogger(__name__)

BOT_LEAD_PLATFORM = "LinkedIn"
BOT_LEAD_KEYWORDS = ["tech", "startup", "business"]
BOT_LEAD_COUNT = 5


def welcome_text(app_url: str) -> str:
    return (
        "🚀 Welcome to Lead Generation Bot!\n\n"
        "Available commands:\n"
        "/generate_leads - Generate new leads\n"
        "/send_message - Send cold messages\n"
        "/chat - Start AI conversation\n"
        "/create_invoice - Generate invoice\n"
        "/stats - View statistics\n"
        "/help - Show all commands\n\n"
        f"💡 Use the web dashboard at {app_url} for full functionality!"
    )


def help_text(app_url: str) -> str:
    return (
        "📋 Available Commands:\n\n"
        "/start - Welcome message\n"
        "/generate_leads - Generate new leads from social media\n"
        "/send_message - Send personalized cold messages\n"
        "/chat - Start AI-powered conversation\n"
        "/create_invoice - Generate and send invoices\n"
        "/stats - View lead generation statistics\n"
        "/help - Show this help message\n\n"
        f"💡 Tip: Use the web dashboard at {app_url} for advanced features!"
    )


def chat_text() -> str:
    return (
        "💬 AI Chat Mode Activated!\n\n"
        "Send me any message and I'll respond as your AI assistant.\n\n"
        "To exit chat mode, send /help or visit the web dashboard for advanced conversations."
    )


def invoice_text(app_url: str) -> str:
    return (
        "📄 Invoice Creation\n\n"
        "For detailed invoice creation with custom items and automatic PDF generation, "
        f"please visit:\n\n🔗 {app_url}/invoices\n\n"
        "You can create professional invoices and send them directly to clients!"
    )


class HandleBotUpdate:
    """
    Use Case: Respond to an incoming chat-bot update

    Business Rules:
    1. Updates without a text message are ignored
    2. Known commands get their canned or computed reply
    3. Any other text is answered by the AI service
    4. Handler failures are reported to the chat, not raised
    """

    def __init__(
        self,
        chat_bot: ChatBotService,
        ai_service: AIService,
        generate_leads: GenerateLeads,
        lead_repo: LeadRepository,
        app_url: str,
    ):
        self.chat_bot = chat_bot
        self.ai_service = ai_service
        self.generate_leads = generate_leads
        self.lead_repo = lead_repo
        self.app_url = app_url.rstrip("/")

    async def execute(self, update: Dict[str, Any]) -> Result[bool]:
        """
        Handle one webhook update

        Args:
            update: Raw update payload

        Returns:
            Result[bool]: True if a reply was attempted, False if ignored
        """
        message = update.get("message")
        if not isinstance(message, dict):
            return Return.ok(False)

        chat = message.get("chat")
        chat_id = chat.get("id") if isinstance(chat, dict) else None
        text: Optional[str] = message.get("text")

        if chat_id is None or not isinstance(text, str):
            return Return.ok(False)

        sender_info = message.get("from")
        sender = sender_info.get("id") if isinstance(sender_info, dict) else None
        logger.info(f"Bot message from {sender}: {text}")

        try:
            command = text.strip().split()[0].split("@")[0] if text.strip() else ""

            if command == "/start":
                await self.chat_bot.send_message(chat_id, welcome_text(self.app_url))
            elif command == "/help":
                await self.chat_bot.send_message(chat_id, help_text(self.app_url))
            elif command == "/generate_leads":
                await self._handle_generate_leads(chat_id)
            elif command == "/stats":
                await self.chat_bot.send_message(chat_id, await self._stats_text())
            elif command == "/chat":
                await self.chat_bot.send_message(chat_id, chat_text())
            elif command == "/create_invoice":
                await self.chat_bot.send_message(chat_id, invoice_text(self.app_url))
            else:
                await self._handle_chat_message(chat_id, text)

            return Return.ok(True)

        except Exception as e:
            logger.error(f"Bot update handling failed: {e}")
            return Return.err(
                Error(
                    code="BOT_UPDATE_FAILED",
                    message="Webhook processing failed",
                    reason=str(e),
                )
            )

    async def _handle_generate_leads(self, chat_id: int) -> None:
        await self.chat_bot.send_message(chat_id, "🔍 Generating leads...")

        result = await self.generate_leads.execute(
            GenerateLeadsCommandDTO(
                platform=BOT_LEAD_PLATFORM,
                keywords=BOT_LEAD_KEYWORDS,
                count=BOT_LEAD_COUNT,
            )
        )
        if result.is_err():
            await self.chat_bot.send_message(
                chat_id, "❌ Error generating leads. Please try again."
            )
            return

        lines = ["📊 Generated Leads:", ""]
        for index, lead in enumerate(result.value.leads, start=1):
            lines.append(f"{index}. {lead.name}")
            lines.append(f"   Company: {lead.company}")
            lines.append(f"   Position: {lead.position}")
            lines.append(f"   Platform: {lead.platform}")
            lines.append("")
        lines.append(f"✅ Total: {len(result.value.leads)} new leads")
        await self.chat_bot.send_message(chat_id, "\n".join(lines))

    async def _stats_text(self) -> str:
        leads = await self.lead_repo.get_leads()
        by_status = Counter(lead.status for lead in leads)
        return (
            "📈 Lead Generation Statistics:\n\n"
            f"📊 Total Leads: {len(leads)}\n"
            f"🆕 New: {by_status[LeadStatus.NEW]}\n"
            f"💬 Contacted: {by_status[LeadStatus.CONTACTED]}\n"
            f"↩️ Responded: {by_status[LeadStatus.RESPONDED]}\n"
            f"🎯 Converted: {by_status[LeadStatus.CONVERTED]}\n\n"
            f"🔗 View detailed analytics at {self.app_url}"
        )

    async def _handle_chat_message(self, chat_id: int, text: str) -> None:
        try:
            reply = await self.ai_service.generate_response([], text)
        except AIServiceError as e:
            logger.error(f"Bot AI reply failed: {e}")
            await self.chat_bot.send_message(
                chat_id,
                "🤖 Sorry, I encountered an error. Please try again or visit "
                f"the web dashboard at {self.app_url}.",
            )
            return
        await self.chat_bot.send_message(chat_id, f"🤖 {reply}")
