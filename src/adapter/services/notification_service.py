"""Notification Service Implementations

Provides concrete implementations for sending invoice and outreach email.
Mail goes out through the Brevo transactional email REST API.
"""

import base64
import html
import logging
from typing import Any, Dict, Optional
import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from src.app.services.notification_service import NotificationService
from src.domain.invoice import Invoice
from src.domain.lead import Lead

logger = logging.getLogger(__name__)

BREVO_API_URL = "https://api.brevo.com/v3/smtp/email"

ACCEPTED_STATUS_CODES = (200, 201, 202)


class RetryableEmailError(Exception):
    """Raised for 5xx or network errors that warrant another attempt"""


def build_invoice_email(invoice: Invoice, pdf_bytes: bytes, sender: Dict[str, str]) -> Dict[str, Any]:
    return {
        "sender": sender,
        "to": [{"email": invoice.client_email, "name": invoice.client_name}],
        "subject": f"Invoice #{invoice.id}",
        "textContent": (
            f"Invoice for {invoice.client_name}\n\n"
            f"Please find your invoice attached.\n"
            f"Total Amount: ${invoice.total:,.2f}\n\n"
            f"Thank you for your business!"
        ),
        "htmlContent": f"""
        <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
          <h2>Invoice for {html.escape(invoice.client_name)}</h2>
          <p>Please find your invoice attached.</p>
          <p><strong>Total Amount: ${invoice.total:,.2f}</strong></p>
          <p>Thank you for your business!</p>
        </div>
        """,
        "attachment": [
            {
                "name": invoice.filename,
                "content": base64.b64encode(pdf_bytes).decode("ascii"),
            }
        ],
    }


def build_cold_email(lead: Lead, body: str, sender: Dict[str, str]) -> Dict[str, Any]:
    return {
        "sender": sender,
        "to": [{"email": lead.email, "name": lead.name}],
        "subject": f"Partnership Opportunity - {lead.company or lead.name}",
        "textContent": f"Hello {lead.name},\n\n{body}\n\nBest regards,\nLead Generation Team",
        "htmlContent": f"""
        <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
          <h2>Hello {html.escape(lead.name)},</h2>
          <div style="line-height: 1.6; color: #333;">
            {html.escape(body).replace(chr(10), "<br>")}
          </div>
          <br>
          <p style="color: #666; font-size: 14px;">
            Best regards,<br>
            Lead Generation Team
          </p>
        </div>
        """,
    }


class LoggingNotificationService(NotificationService):
    """
    Notification service that only logs what it would send

    Used when no email API key is configured. Nothing is delivered, so every
    send reports False and invoices stay in draft.
    """

    async def send_invoice(self, invoice: Invoice, pdf_bytes: bytes) -> bool:
        logger.warning(
            f"[DRY RUN] Invoice {invoice.id} for {invoice.client_email} "
            f"({len(pdf_bytes)} bytes) not sent: email API is not configured"
        )
        return False

    async def send_cold_email(self, lead: Lead, message: str) -> bool:
        logger.warning(
            f"[DRY RUN] Cold email to {lead.email} not sent: email API is not configured"
        )
        return False


class BrevoNotificationService(NotificationService):
    """
    Notification service that delivers mail through the Brevo REST API

    Network errors and 5xx responses are retried with exponential back-off;
    4xx responses fail immediately. A send that never gets accepted reports
    False instead of raising.
    """

    def __init__(
        self,
        api_key: str,
        sender_email: str,
        sender_name: str = "Lead Desk",
        api_url: str = BREVO_API_URL,
        timeout: float = 10.0,
        max_attempts: int = 3,
        retry_wait: float = 1.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Brevo notification service

        Args:
            api_key: Brevo API key
            sender_email: From address
            sender_name: From display name
            api_url: Send endpoint
            timeout: Request timeout in seconds
            max_attempts: Attempts per message, including the first
            retry_wait: Back-off multiplier in seconds (0 disables waiting)
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.api_key = api_key
        self.sender = {"name": sender_name, "email": sender_email}
        self.api_url = api_url
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.retry_wait = retry_wait
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "accept": "application/json",
            "api-key": self.api_key,
            "content-type": "application/json",
        }

    async def _post(self, client: httpx.AsyncClient, payload: Dict[str, Any], label: str) -> bool:
        recipient = payload["to"][0]["email"]
        try:
            response = await client.post(self.api_url, headers=self._headers(), json=payload)
        except (httpx.TimeoutException, httpx.NetworkError) as e:
            logger.warning(f"Network error sending {label} to {recipient}: {e}")
            raise RetryableEmailError(str(e)) from e

        if response.status_code in ACCEPTED_STATUS_CODES:
            logger.info(f"Sent {label} to {recipient}")
            return True

        if response.status_code >= 500:
            logger.warning(f"Email API returned {response.status_code} for {label}")
            raise RetryableEmailError(f"Email API returned {response.status_code}")

        # 4xx: retrying will not help
        logger.error(
            f"Email API rejected {label} to {recipient}: "
            f"{response.status_code} {response.text[:500]}"
        )
        return False

    async def _send(self, payload: Dict[str, Any], label: str) -> bool:
        retrying = AsyncRetrying(
            retry=retry_if_exception_type(RetryableEmailError),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=self.retry_wait, max=10),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                async for attempt in retrying:
                    with attempt:
                        return await self._post(client, payload, label)
        except RetryableEmailError as e:
            logger.error(f"Giving up on {label} after {self.max_attempts} attempts: {e}")
            return False
        except Exception as e:
            logger.error(f"Unexpected error sending {label}: {e}")
            return False
        return False

    async def send_invoice(self, invoice: Invoice, pdf_bytes: bytes) -> bool:
        payload = build_invoice_email(invoice, pdf_bytes, self.sender)
        return await self._send(payload, f"invoice {invoice.id}")

    async def send_cold_email(self, lead: Lead, message: str) -> bool:
        payload = build_cold_email(lead, message, self.sender)
        return await self._send(payload, f"cold email for lead {lead.id}")


def create_notification_service(
    api_key: Optional[str] = None,
    sender_email: str = "",
    sender_name: str = "Lead Desk",
    api_url: str = BREVO_API_URL,
    timeout: float = 10.0,
    max_attempts: int = 3,
) -> NotificationService:
    """
    Factory function to create appropriate notification service

    Args:
        api_key: Email API key. If empty, a logging-only service is returned.

    Returns:
        Configured NotificationService
    """
    if not api_key:
        return LoggingNotificationService()

    return BrevoNotificationService(
        api_key=api_key,
        sender_email=sender_email,
        sender_name=sender_name,
        api_url=api_url,
        timeout=timeout,
        max_attempts=max_attempts,
    )
