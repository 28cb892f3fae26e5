"""OpenRouter AI Service Implementation

Generates outreach and conversation text through an OpenAI-compatible
chat completions endpoint.
"""

import logging
from typing import Any, Dict, List, Optional
import httpx
from src.app.services.ai_service import AIService, AIServiceError
from src.domain.chat_message import ChatMessage, MessageDirection
from src.domain.lead import Lead

logger = logging.getLogger(__name__)

COLD_MESSAGE_SYSTEM_PROMPT = (
    "You are a professional sales assistant. Generate personalized cold messages "
    "for lead generation. Be professional, concise, and value-focused. Avoid being "
    "pushy or salesy. Focus on how you can help solve their potential problems or "
    "add value to their business."
)

CONVERSATION_SYSTEM_PROMPT = (
    "You are a professional sales representative having a conversation with a "
    "potential client. Be helpful, knowledgeable, and focus on understanding their "
    "needs. Provide value in every interaction and guide the conversation towards a "
    "potential business relationship. Keep responses concise and professional."
)


def build_cold_message_prompt(lead: Lead, context: Optional[str] = None) -> str:
    lines = [
        "Generate a personalized cold message for:",
        f"Name: {lead.name}",
        f"Company: {lead.company or 'Unknown'}",
        f"Position: {lead.position or 'Unknown'}",
        f"Platform: {lead.platform}",
    ]
    if context:
        lines.append(f"Additional context: {context}")
    lines.append("")
    lines.append("Keep it under 150 words and make it conversational.")
    return "\n".join(lines)


def build_conversation_messages(
    conversation: List[ChatMessage], new_message: str
) -> List[Dict[str, str]]:
    messages = [{"role": "system", "content": CONVERSATION_SYSTEM_PROMPT}]
    for message in conversation:
        role = "assistant" if message.direction == MessageDirection.SENT else "user"
        messages.append({"role": role, "content": message.content})
    messages.append({"role": "user", "content": new_message})
    return messages


class OpenRouterAIService(AIService):
    """
    AIService backed by an OpenAI-compatible completions API

    Each call opens its own httpx client; pass `transport` to route
    requests elsewhere (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str = "https://openrouter.ai/api/v1/chat/completions",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    async def _complete(
        self, messages: List[Dict[str, str]], max_tokens: int, temperature: float
    ) -> str:
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self.base_url, json=payload, headers=headers)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            logger.error(f"Completion request to {self.base_url} failed: {e}")
            raise AIServiceError(f"Completion request failed: {e}") from e
        except ValueError as e:
            logger.error(f"Completion response was not JSON: {e}")
            raise AIServiceError("Completion response was not JSON") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            logger.error(f"Unexpected completion payload: {data!r}")
            raise AIServiceError("Unexpected completion payload") from e

        if not isinstance(content, str) or not content.strip():
            raise AIServiceError("Completion returned no text")
        return content.strip()

    async def generate_cold_message(self, lead: Lead, context: Optional[str] = None) -> str:
        messages = [
            {"role": "system", "content": COLD_MESSAGE_SYSTEM_PROMPT},
            {"role": "user", "content": build_cold_message_prompt(lead, context)},
        ]
        return await self._complete(messages, max_tokens=300, temperature=0.7)

    async def generate_response(self, conversation: List[ChatMessage], new_message: str) -> str:
        messages = build_conversation_messages(conversation, new_message)
        return await self._complete(messages, max_tokens=400, temperature=0.8)
