"""Telegram Webhook Registration

Points the Telegram bot at this service's webhook endpoint.
Run once after deploying, or whenever APP_URL changes.
"""

import asyncio
import logging
from typing import Optional

from config import ApplicationConfig
from src.adapter.services.chat_bot_service import TelegramBotService
from src.app.services.chat_bot_service import ChatBotService

logger = logging.getLogger(__name__)


def default_webhook_url() -> str:
    return f"{ApplicationConfig.APP_URL.rstrip('/')}{ApplicationConfig.API_PREFIX}/telegram"


async def register_webhook(bot: ChatBotService, url: Optional[str] = None) -> bool:
    """
    Register the webhook URL with the bot API

    Args:
        bot: Chat bot service
        url: Webhook URL (defaults to APP_URL + API_PREFIX + /telegram)

    Returns:
        True if the bot API accepted the URL
    """
    url = url or default_webhook_url()
    ok = await bot.set_webhook(url)
    if not ok:
        logger.error(f"Failed to register webhook {url}")
    return ok


async def main():
    """
    Entry point for running as a standalone script

    Usage:
        python -m src.worker.telegram_webhook
        python -m src.worker.telegram_webhook --url https://example.com/api/telegram
    """
    import sys
    import argparse

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Register the Telegram webhook")
    parser.add_argument("--url", default=None, help="Webhook URL to register")
    args = parser.parse_args()

    bot = TelegramBotService(
        token=ApplicationConfig.TELEGRAM_BOT_TOKEN,
        timeout=ApplicationConfig.TELEGRAM_TIMEOUT,
    )
    ok = await register_webhook(bot, args.url)
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    asyncio.run(main())
