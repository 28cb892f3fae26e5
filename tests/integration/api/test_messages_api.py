"""Integration tests for Message API endpoints"""

import pytest
from httpx import AsyncClient
from src.app.services.ai_service import AIServiceError

LEAD = {
    "id": "lead_1_0",
    "name": "Mike Chen",
    "email": "contact0@cloudtech.com",
    "platform": "LinkedIn",
    "company": "CloudTech",
    "position": "Founder",
    "status": "new",
}


class TestSendMessageAPI:

    @pytest.mark.asyncio
    async def test_cold_message(self, client: AsyncClient, ai_service, notification_service):
        response = await client.post(
            "/api/send-message",
            json={"type": "cold_message", "lead": LEAD, "message": "We help SaaS teams"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Hi there, quick idea.",
            "type": "cold_message",
        }
        lead, context = ai_service.generate_cold_message.call_args.args
        assert lead.email == "contact0@cloudtech.com"
        assert context == "We help SaaS teams"
        notification_service.send_cold_email.assert_called_once()

    @pytest.mark.asyncio
    async def test_cold_message_not_delivered(self, client: AsyncClient, notification_service):
        notification_service.send_cold_email.return_value = False

        response = await client.post(
            "/api/send-message", json={"type": "cold_message", "lead": LEAD}
        )

        assert response.status_code == 200
        assert response.json()["success"] is False
        assert response.json()["message"] == "Hi there, quick idea."

    @pytest.mark.asyncio
    async def test_conversation(self, client: AsyncClient):
        response = await client.post(
            "/api/send-message",
            json={"type": "conversation", "leadId": "lead_1_0", "message": "Tell me more"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Thanks for reaching out!",
            "type": "conversation",
        }

    @pytest.mark.asyncio
    async def test_missing_lead(self, client: AsyncClient):
        response = await client.post("/api/send-message", json={"type": "cold_message"})

        assert response.status_code == 400
        assert response.json() == {
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Lead ID or lead information is required.",
            }
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"type": "conversation", "leadId": "lead_1_0"},
            {"type": "cold_message", "leadId": "lead_1_0"},
            {"type": "broadcast", "lead": LEAD},
        ],
    )
    async def test_invalid_type_or_parameters(self, client: AsyncClient, payload):
        response = await client.post("/api/send-message", json=payload)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invalid message type or missing parameters."

    @pytest.mark.asyncio
    async def test_ai_failure(self, client: AsyncClient, ai_service):
        ai_service.generate_response.side_effect = AIServiceError("down")

        response = await client.post(
            "/api/send-message",
            json={"type": "conversation", "leadId": "lead_1_0", "message": "Hi"},
        )

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "AI_GENERATION_FAILED"


class TestConversationAPI:

    @pytest.mark.asyncio
    async def test_get_conversation(self, client: AsyncClient):
        response = await client.get("/api/send-message", params={"leadId": "lead_1_0"})

        assert response.status_code == 200
        assert response.json() == {"success": True, "conversation": [], "total": 0}

    @pytest.mark.asyncio
    async def test_missing_lead_id(self, client: AsyncClient):
        response = await client.get("/api/send-message")

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Lead ID is required."
