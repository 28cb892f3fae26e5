"""Invoice Domain Entity

A billing document built per request, rendered once and optionally emailed.
"""

from datetime import datetime, timezone
from decimal import Decimal, localcontext
from enum import Enum
from typing import List
from sqlmodel import Field
from src.domain.base import BaseModel
from src.domain.invoice_line import MONEY_CONTEXT, InvoiceLine, to_money


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"


def generate_invoice_id(created_at: datetime) -> str:
    """INV-<epoch millis>; invoices created in the same millisecond collide"""
    return f"INV-{int(created_at.timestamp() * 1000)}"


def compute_total(items: List[InvoiceLine]) -> Decimal:
    """Sum of line totals; an empty list totals 0.00"""
    with localcontext(MONEY_CONTEXT):
        return to_money(sum((item.line_total for item in items), Decimal("0")))


class InvoiceTransitionError(Exception):
    pass


class Invoice(BaseModel):
    """
    Invoice - client identity, itemized charges and a computed total

    Domain Rules:
    - id is derived from created_at (INV-<epoch millis>)
    - items keep insertion order
    - total is the sum of items[].line_total, never taken from input
    - Status transitions: draft -> sent (after a successful email dispatch)
    """

    id: str = Field(description="Invoice identifier (e.g., INV-1718000000000)")

    client_name: str = Field(min_length=1, description="Client name")

    client_email: str = Field(min_length=1, description="Client email address")

    items: List[InvoiceLine] = Field(
        default_factory=list,
        description="Ordered line items"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.DRAFT,
        description="Invoice status (draft, sent, paid)"
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Invoice creation timestamp"
    )

    @property
    def total(self) -> Decimal:
        return compute_total(self.items)

    @property
    def filename(self) -> str:
        return f"invoice_{self.id}.pdf"

    def mark_sent(self) -> None:
        if self.status != InvoiceStatus.DRAFT:
            raise InvoiceTransitionError(
                f"Invoice {self.id} cannot be marked sent from status {self.status.value}"
            )
        self.status = InvoiceStatus.SENT

    class Config:
        json_schema_extra = {
            "example": {
                "id": "INV-1718000000000",
                "client_name": "Acme",
                "client_email": "billing@acme.com",
                "items": [
                    {"description": "Consulting", "quantity": 2, "unit_price": "100.00"}
                ],
                "status": "draft",
                "created_at": "2024-06-10T06:13:20Z",
            }
        }
