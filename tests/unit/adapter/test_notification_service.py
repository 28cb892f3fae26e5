"""Unit tests for notification services

Tests cover:
- Invoice and cold email payload composition
- Dry-run service never reports delivery
- Delivery through the email API (accepted, rejected, retried)
- Factory selection by API key

Requests go through httpx.MockTransport, so nothing leaves the process.
"""

import base64
import json
import httpx
import pytest
from datetime import datetime, timezone
from decimal import Decimal

from src.adapter.services.notification_service import (
    BrevoNotificationService,
    LoggingNotificationService,
    build_cold_email,
    build_invoice_email,
    create_notification_service,
)
from src.domain.invoice import Invoice, InvoiceLine
from src.domain.lead import Lead

PDF_BYTES = b"%PDF-1.4\nTest PDF content"
API_URL = "https://mail.example.com/v3/smtp/email"
SENDER = {"name": "Lead Desk", "email": "billing@leaddesk.example"}


@pytest.fixture
def invoice():
    return Invoice(
        id="INV-1718000000000",
        client_name="Acme Corp",
        client_email="billing@acme.example",
        items=[
            InvoiceLine(description="Consulting", quantity=2, unit_price=Decimal("600.00")),
        ],
        created_at=datetime(2024, 6, 10, tzinfo=timezone.utc),
    )


@pytest.fixture
def lead():
    return Lead(
        id="lead_1_0",
        name="Alex Rodriguez",
        email="contact0@startuphub.com",
        platform="Twitter",
        company="StartupHub",
        position="CTO",
    )


def make_service(handler, max_attempts=3):
    return BrevoNotificationService(
        api_key="test-key",
        sender_email="billing@leaddesk.example",
        api_url=API_URL,
        max_attempts=max_attempts,
        retry_wait=0,
        transport=httpx.MockTransport(handler),
    )


class TestEmailBuilders:

    def test_invoice_email(self, invoice):
        payload = build_invoice_email(invoice, PDF_BYTES, SENDER)

        assert payload["subject"] == "Invoice #INV-1718000000000"
        assert payload["to"] == [{"email": "billing@acme.example", "name": "Acme Corp"}]
        assert payload["sender"] == SENDER
        assert "Total Amount: $1,200.00" in payload["textContent"]

        [attachment] = payload["attachment"]
        assert attachment["name"] == "invoice_INV-1718000000000.pdf"
        assert base64.b64decode(attachment["content"]) == PDF_BYTES

    def test_cold_email_escapes_html(self, lead):
        payload = build_cold_email(lead, "Hi <b>there</b>\nSecond line", SENDER)

        assert payload["subject"] == "Partnership Opportunity - StartupHub"
        assert "&lt;b&gt;there&lt;/b&gt;<br>Second line" in payload["htmlContent"]
        assert "attachment" not in payload

    def test_cold_email_subject_falls_back_to_name(self, lead):
        lead.company = ""

        payload = build_cold_email(lead, "Hello", SENDER)

        assert payload["subject"] == "Partnership Opportunity - Alex Rodriguez"


@pytest.mark.asyncio
class TestLoggingNotificationService:

    async def test_invoice_is_not_delivered(self, invoice):
        assert await LoggingNotificationService().send_invoice(invoice, PDF_BYTES) is False

    async def test_cold_email_is_not_delivered(self, lead):
        assert await LoggingNotificationService().send_cold_email(lead, "Hi") is False


@pytest.mark.asyncio
class TestBrevoNotificationService:

    async def test_send_invoice(self, invoice):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(201, json={"messageId": "<abc@brevo>"})

        sent = await make_service(handler).send_invoice(invoice, PDF_BYTES)

        assert sent is True
        [request] = requests
        assert str(request.url) == API_URL
        assert request.headers["api-key"] == "test-key"
        payload = json.loads(request.content)
        assert payload["to"][0]["email"] == "billing@acme.example"
        assert payload["sender"]["email"] == "billing@leaddesk.example"
        assert payload["attachment"][0]["name"] == "invoice_INV-1718000000000.pdf"

    async def test_send_cold_email(self, lead):
        sent = await make_service(
            lambda request: httpx.Response(202, json={})
        ).send_cold_email(lead, "Hello")

        assert sent is True

    async def test_client_error_is_not_retried(self, invoice):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(400, json={"message": "invalid sender"})

        sent = await make_service(handler).send_invoice(invoice, PDF_BYTES)

        assert sent is False
        assert len(calls) == 1

    async def test_server_error_is_retried_until_accepted(self, lead):
        responses = iter([httpx.Response(503), httpx.Response(502), httpx.Response(201, json={})])

        sent = await make_service(lambda request: next(responses)).send_cold_email(lead, "Hi")

        assert sent is True

    async def test_gives_up_after_max_attempts(self, lead):
        calls = []

        def handler(request):
            calls.append(request)
            raise httpx.ConnectError("unreachable", request=request)

        sent = await make_service(handler, max_attempts=2).send_cold_email(lead, "Hi")

        assert sent is False
        assert len(calls) == 2


class TestCreateNotificationService:

    @pytest.mark.parametrize("api_key", [None, ""])
    def test_without_api_key_returns_dry_run(self, api_key):
        assert isinstance(create_notification_service(api_key=api_key), LoggingNotificationService)

    def test_with_api_key_returns_api_sender(self):
        service = create_notification_service(
            api_key="key", sender_email="from@example.com", sender_name="Sales", max_attempts=5
        )

        assert isinstance(service, BrevoNotificationService)
        assert service.sender == {"name": "Sales", "email": "from@example.com"}
        assert service.max_attempts == 5
