"""GenerateInvoice Use Case

Builds an invoice from raw request data, renders it to PDF and optionally
emails it to the client.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional
from libs.result import Result, Return, Error
from src.app.services.notification_service import NotificationService
from src.app.services.pdf_service import PdfService, InvoiceRenderError
from src.domain.invoice import Invoice, generate_invoice_id
from .dtos import GenerateInvoiceCommandDTO, GeneratedInvoiceDTO
from .line_items import LineItemRangeError, normalize_items

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GenerateInvoice:
    """
    Use Case: Generate an invoice PDF

    Business Rules:
    1. Line items are normalized fail-open; bad numbers become defaults,
       numbers too large to bill reject the invoice
    2. Totals are always recomputed, never taken from input
    3. Invoice is created as draft with id INV-<epoch millis>
    4. Email is attempted only when requested
    5. Status becomes sent only if the email was delivered
    6. A failed email never fails the request

    Flow:
    1. Normalize items
    2. Build invoice (draft)
    3. Render PDF
    4. Dispatch email if requested
    5. Return document, id and delivery flag
    """

    def __init__(
        self,
        pdf_service: PdfService,
        notification_service: NotificationService,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.pdf_service = pdf_service
        self.notification_service = notification_service
        self.clock = clock or utc_now

    async def execute(self, command: GenerateInvoiceCommandDTO) -> Result[GeneratedInvoiceDTO]:
        """
        Execute invoice generation

        Args:
            command: GenerateInvoiceCommandDTO with client details and raw items

        Returns:
            Result[GeneratedInvoiceDTO]: Success with PDF or error
        """
        try:
            # Step 1: Normalize items
            try:
                items = normalize_items(command.items)
            except LineItemRangeError as e:
                return Return.err(
                    Error(
                        code="INVALID_LINE_ITEMS",
                        message="Line item quantity or price is out of range",
                        reason=str(e),
                    )
                )

            # Step 2: Build invoice
            created_at = self.clock()
            invoice = Invoice(
                id=generate_invoice_id(created_at),
                client_name=command.client_name,
                client_email=command.client_email,
                items=items,
                created_at=created_at,
            )

            # Step 3: Render
            try:
                pdf_bytes = self.pdf_service.render_invoice(invoice)
            except InvoiceRenderError as e:
                return Return.err(
                    Error(
                        code="INVOICE_RENDER_FAILED",
                        message="Failed to generate invoice PDF",
                        reason=str(e),
                    )
                )

            # Step 4: Dispatch
            email_sent = False
            if command.send_email:
                email_sent = await self._dispatch(invoice, pdf_bytes)
                if email_sent:
                    invoice.mark_sent()

            logger.info(
                f"Generated invoice {invoice.id} for {invoice.client_email}: "
                f"{len(items)} items, total {invoice.total}, email_sent={email_sent}"
            )

            # Step 5: Build response
            return Return.ok(
                GeneratedInvoiceDTO(
                    invoice_id=invoice.id,
                    filename=invoice.filename,
                    pdf_bytes=pdf_bytes,
                    email_sent=email_sent,
                    invoice=invoice,
                )
            )

        except Exception as e:
            logger.error(f"Invoice generation failed: {e}")
            return Return.err(
                Error(
                    code="GENERATE_INVOICE_FAILED",
                    message="Failed to generate invoice",
                    reason=str(e),
                )
            )

    async def _dispatch(self, invoice: Invoice, pdf_bytes: bytes) -> bool:
        try:
            return bool(await self.notification_service.send_invoice(invoice, pdf_bytes))
        except Exception as e:
            logger.error(f"Email dispatch for invoice {invoice.id} failed: {e}")
            return False
