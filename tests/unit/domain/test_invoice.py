"""Unit tests for Invoice and InvoiceLine domain entities"""

import pytest
from datetime import datetime, timezone
from decimal import Decimal
from pydantic import ValidationError
from src.domain.invoice import (
    Invoice,
    InvoiceStatus,
    InvoiceTransitionError,
    compute_total,
    generate_invoice_id,
)
from src.domain.invoice_line import InvoiceLine


CREATED_AT = datetime(2024, 6, 10, 6, 13, 20, tzinfo=timezone.utc)


def make_invoice(**overrides) -> Invoice:
    data = {
        "id": generate_invoice_id(CREATED_AT),
        "client_name": "Acme",
        "client_email": "a@acme.com",
        "items": [
            InvoiceLine(description="Consulting", quantity=2, unit_price=Decimal("100.00")),
        ],
        "created_at": CREATED_AT,
    }
    data.update(overrides)
    return Invoice(**data)


class TestInvoiceLine:
    """Test InvoiceLine derived total"""

    def test_line_total_is_quantity_times_unit_price(self):
        line = InvoiceLine(description="Hours", quantity=3, unit_price=Decimal("19.99"))

        assert line.line_total == Decimal("59.97")

    def test_zero_quantity_is_rejected(self):
        with pytest.raises(ValidationError):
            InvoiceLine(description="X", quantity=0, unit_price=Decimal("1.00"))

    def test_negative_price_is_rejected(self):
        with pytest.raises(ValidationError):
            InvoiceLine(description="X", quantity=1, unit_price=Decimal("-1.00"))


class TestInvoiceTotals:
    """Test total computation"""

    def test_total_is_sum_of_line_totals(self):
        invoice = make_invoice(
            items=[
                InvoiceLine(description="A", quantity=2, unit_price=Decimal("100.00")),
                InvoiceLine(description="B", quantity=1, unit_price=Decimal("49.50")),
            ]
        )

        assert invoice.total == Decimal("249.50")

    def test_total_has_no_float_drift(self):
        items = [
            InvoiceLine(description="a", quantity=1, unit_price=Decimal("0.10")),
            InvoiceLine(description="b", quantity=1, unit_price=Decimal("0.20")),
        ]

        assert compute_total(items) == Decimal("0.30")

    def test_empty_items_total_zero(self):
        assert compute_total([]) == Decimal("0.00")
        assert make_invoice(items=[]).total == Decimal("0")

    def test_line_total_beyond_default_precision(self):
        line = InvoiceLine(description="bulk", quantity=10**27, unit_price=Decimal("1.00"))

        assert line.line_total == Decimal("1000000000000000000000000000.00")

    def test_total_beyond_default_precision(self):
        items = [
            InvoiceLine(description="a", quantity=10**27, unit_price=Decimal("1.00")),
            InvoiceLine(description="b", quantity=1, unit_price=Decimal("0.01")),
        ]

        assert compute_total(items) == Decimal("1000000000000000000000000000.01")


class TestInvoiceIdentity:
    """Test identifier and filename"""

    def test_id_is_epoch_millis_of_creation(self):
        assert generate_invoice_id(CREATED_AT) == "INV-1718000000000"

    def test_filename_uses_id(self):
        invoice = make_invoice()

        assert invoice.filename == "invoice_INV-1718000000000.pdf"

    def test_missing_client_name_raises_validation_error(self):
        with pytest.raises(ValidationError):
            make_invoice(client_name="")


class TestInvoiceStatus:
    """Test draft -> sent transition"""

    def test_new_invoice_is_draft(self):
        assert make_invoice().status == InvoiceStatus.DRAFT

    def test_mark_sent_from_draft(self):
        invoice = make_invoice()

        invoice.mark_sent()

        assert invoice.status == InvoiceStatus.SENT

    @pytest.mark.parametrize("status", [InvoiceStatus.SENT, InvoiceStatus.PAID])
    def test_mark_sent_only_from_draft(self, status):
        invoice = make_invoice(status=status)

        with pytest.raises(InvoiceTransitionError):
            invoice.mark_sent()
