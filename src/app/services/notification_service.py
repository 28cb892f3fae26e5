"""Notification Service Interface

Defines the contract for delivering invoices and outreach mail.
"""

from abc import ABC, abstractmethod
from src.domain.invoice import Invoice
from src.domain.lead import Lead


class NotificationService(ABC):
    """
    Abstract notification service for outbound email

    Implementations report delivery as a boolean and should not raise;
    callers still guard against exceptions.
    """

    @abstractmethod
    async def send_invoice(self, invoice: Invoice, pdf_bytes: bytes) -> bool:
        """
        Email an invoice PDF to the invoice's client

        Args:
            invoice: Invoice being delivered
            pdf_bytes: Rendered document to attach

        Returns:
            True if the mail was handed to the transport, False otherwise
        """
        pass

    @abstractmethod
    async def send_cold_email(self, lead: Lead, message: str) -> bool:
        """
        Email an outreach message to a lead

        Args:
            lead: Recipient lead
            message: Plain-text message body

        Returns:
            True if the mail was handed to the transport, False otherwise
        """
        pass
