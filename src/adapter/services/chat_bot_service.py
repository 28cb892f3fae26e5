"""Telegram Chat Bot Service Implementation

Talks to the Telegram Bot HTTP API with httpx.
"""

import logging
from typing import Any, Dict, Optional
import httpx
from src.app.services.chat_bot_service import ChatBotService

logger = logging.getLogger(__name__)

TELEGRAM_API_URL = "https://api.telegram.org"


class TelegramBotService(ChatBotService):
    """
    ChatBotService for Telegram

    Without a token the bot is disabled: every call logs a warning and
    reports False.
    """

    def __init__(
        self,
        token: Optional[str],
        timeout: float = 10.0,
        api_url: str = TELEGRAM_API_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token = token
        self.timeout = timeout
        self.api_url = api_url.rstrip("/")
        self.transport = transport
        if not token:
            logger.warning("TELEGRAM_BOT_TOKEN not configured. Telegram bot is disabled.")

    @property
    def enabled(self) -> bool:
        return bool(self.token)

    async def _call(self, method: str, data: Dict[str, Any]) -> bool:
        if not self.enabled:
            logger.warning(f"Telegram {method} skipped: bot is disabled")
            return False

        url = f"{self.api_url}/bot{self.token}/{method}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(url, json=data)
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPError as e:
            logger.error(f"Telegram {method} failed: {e}")
            return False
        except ValueError as e:
            logger.error(f"Telegram {method} returned invalid JSON: {e}")
            return False

        if not body.get("ok", False):
            logger.error(f"Telegram {method} rejected: {body.get('description')}")
            return False
        return True

    async def send_message(self, chat_id: int, text: str) -> bool:
        return await self._call("sendMessage", {"chat_id": chat_id, "text": text})

    async def set_webhook(self, url: str) -> bool:
        ok = await self._call("setWebhook", {"url": url})
        if ok:
            logger.info(f"Telegram webhook set to: {url}")
        return ok
