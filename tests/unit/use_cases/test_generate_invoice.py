"""Unit tests for GenerateInvoice use case

Tests cover:
- Draft invoice rendered without dispatch
- Dispatch success marks invoice sent
- Dispatch failure (False or exception) keeps draft and still returns PDF
- Render failure returns INVOICE_RENDER_FAILED
- Zero quantity fallback end to end
"""

import pytest
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.services.pdf_service import InvoiceRenderError
from src.app.use_cases.invoicing.dtos import GenerateInvoiceCommandDTO
from src.app.use_cases.invoicing.generate_invoice import GenerateInvoice
from src.domain.invoice import InvoiceStatus

CREATED_AT = datetime(2024, 6, 10, 6, 13, 20, tzinfo=timezone.utc)


@pytest.fixture
def mock_pdf_service():
    """Mock PDF service"""
    service = MagicMock()
    service.render_invoice = MagicMock(return_value=b"%PDF-1.4\nTest PDF content")
    return service


@pytest.fixture
def mock_notification_service():
    """Mock notification service"""
    service = MagicMock()
    service.send_invoice = AsyncMock(return_value=True)
    return service


@pytest.fixture
def generate_invoice_use_case(mock_pdf_service, mock_notification_service):
    """GenerateInvoice use case with mocked collaborators and a fixed clock"""
    return GenerateInvoice(
        pdf_service=mock_pdf_service,
        notification_service=mock_notification_service,
        clock=lambda: CREATED_AT,
    )


def make_command(send_email=False, items=None) -> GenerateInvoiceCommandDTO:
    return GenerateInvoiceCommandDTO(
        client_name="Acme",
        client_email="a@acme.com",
        items=items if items is not None else [
            {"description": "Consulting", "quantity": 2, "price": 100}
        ],
        send_email=send_email,
    )


@pytest.mark.asyncio
class TestGenerateInvoiceWithoutEmail:
    """Test generation when email is not requested"""

    async def test_generates_draft_invoice(
        self, generate_invoice_use_case, mock_pdf_service, mock_notification_service
    ):
        """
        Given: Acme invoice with 2 x 100 Consulting, sendEmail false
        When: GenerateInvoice is executed
        Then: total is 200.00, status stays draft, no dispatch is attempted
        """
        # Act
        result = await generate_invoice_use_case.execute(make_command())

        # Assert
        assert result.is_ok()
        generated = result.value
        assert generated.invoice.total == Decimal("200.00")
        assert generated.invoice.status == InvoiceStatus.DRAFT
        assert generated.email_sent is False
        assert generated.pdf_bytes == b"%PDF-1.4\nTest PDF content"
        mock_pdf_service.render_invoice.assert_called_once()
        mock_notification_service.send_invoice.assert_not_called()

    async def test_invoice_id_and_filename_from_clock(self, generate_invoice_use_case):
        result = await generate_invoice_use_case.execute(make_command())

        assert result.value.invoice_id == "INV-1718000000000"
        assert result.value.filename == "invoice_INV-1718000000000.pdf"
        assert result.value.invoice.created_at == CREATED_AT

    async def test_pdf_service_receives_normalized_invoice(
        self, generate_invoice_use_case, mock_pdf_service
    ):
        await generate_invoice_use_case.execute(
            make_command(items=[{"description": "X", "quantity": 0, "price": 50}])
        )

        invoice = mock_pdf_service.render_invoice.call_args.args[0]
        assert invoice.items[0].quantity == 1
        assert invoice.items[0].line_total == Decimal("50.00")
        assert invoice.total == Decimal("50.00")

    async def test_empty_items_render_with_zero_total(
        self, generate_invoice_use_case, mock_pdf_service
    ):
        result = await generate_invoice_use_case.execute(make_command(items=[]))

        assert result.is_ok()
        assert result.value.invoice.total == Decimal("0")
        mock_pdf_service.render_invoice.assert_called_once()


@pytest.mark.asyncio
class TestGenerateInvoiceWithEmail:
    """Test dispatch outcomes"""

    async def test_successful_dispatch_marks_sent(
        self, generate_invoice_use_case, mock_notification_service
    ):
        result = await generate_invoice_use_case.execute(make_command(send_email=True))

        assert result.is_ok()
        assert result.value.email_sent is True
        assert result.value.invoice.status == InvoiceStatus.SENT
        invoice, pdf_bytes = mock_notification_service.send_invoice.call_args.args
        assert invoice.id == "INV-1718000000000"
        assert pdf_bytes == b"%PDF-1.4\nTest PDF content"

    async def test_failed_dispatch_keeps_draft(
        self, generate_invoice_use_case, mock_notification_service
    ):
        mock_notification_service.send_invoice = AsyncMock(return_value=False)

        result = await generate_invoice_use_case.execute(make_command(send_email=True))

        assert result.is_ok()
        assert result.value.email_sent is False
        assert result.value.invoice.status == InvoiceStatus.DRAFT
        assert result.value.pdf_bytes.startswith(b"%PDF")

    async def test_dispatch_exception_is_not_raised(
        self, generate_invoice_use_case, mock_notification_service
    ):
        mock_notification_service.send_invoice = AsyncMock(
            side_effect=ConnectionError("email API down")
        )

        result = await generate_invoice_use_case.execute(make_command(send_email=True))

        assert result.is_ok()
        assert result.value.email_sent is False
        assert result.value.invoice.status == InvoiceStatus.DRAFT


@pytest.mark.asyncio
class TestGenerateInvoiceErrorHandling:
    """Test error handling"""

    async def test_render_failure(
        self, generate_invoice_use_case, mock_pdf_service, mock_notification_service
    ):
        mock_pdf_service.render_invoice = MagicMock(
            side_effect=InvoiceRenderError("layout error")
        )

        result = await generate_invoice_use_case.execute(make_command(send_email=True))

        assert result.is_err()
        assert result.error.code == "INVOICE_RENDER_FAILED"
        assert "layout error" in result.error.reason
        mock_notification_service.send_invoice.assert_not_called()

    async def test_unexpected_failure(self, generate_invoice_use_case, mock_pdf_service):
        mock_pdf_service.render_invoice = MagicMock(side_effect=RuntimeError("boom"))

        result = await generate_invoice_use_case.execute(make_command())

        assert result.is_err()
        assert result.error.code == "GENERATE_INVOICE_FAILED"

    async def test_oversize_amount_is_rejected_before_render(
        self, generate_invoice_use_case, mock_pdf_service
    ):
        result = await generate_invoice_use_case.execute(
            make_command(items=[{"description": "x", "quantity": 1, "price": "1e150"}])
        )

        assert result.is_err()
        assert result.error.code == "INVALID_LINE_ITEMS"
        mock_pdf_service.render_invoice.assert_not_called()

    async def test_large_amounts_are_billed_exactly(
        self, generate_invoice_use_case, mock_pdf_service
    ):
        result = await generate_invoice_use_case.execute(
            make_command(items=[{"description": "bulk", "quantity": 10**27, "price": 1}])
        )

        assert result.is_ok()
        invoice = mock_pdf_service.render_invoice.call_args.args[0]
        assert invoice.total == Decimal("1000000000000000000000000000.00")
