"""Chat Bot Service Interface

Outbound side of the chat bot: replying to chats and registering the webhook.
"""

from abc import ABC, abstractmethod


class ChatBotService(ABC):

    @abstractmethod
    async def send_message(self, chat_id: int, text: str) -> bool:
        pass

    @abstractmethod
    async def set_webhook(self, url: str) -> bool:
        pass
