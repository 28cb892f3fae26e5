"""Invoice Line Domain Entity

One billable entry within an invoice.
"""

from decimal import Context, Decimal, MAX_EMAX, MAX_PREC, MIN_EMIN, ROUND_HALF_UP, localcontext
from sqlmodel import Field
from src.domain.base import BaseModel

CENT = Decimal("0.01")

# Multiplication, addition and quantize never round under this context; only
# exact operations may run in it.
MONEY_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_UP)


def to_money(value: Decimal) -> Decimal:
    """Quantize an amount to whole cents (half-up), at any magnitude"""
    with localcontext(MONEY_CONTEXT):
        return value.quantize(CENT)


def line_amount(quantity: int, unit_price: Decimal) -> Decimal:
    """Exact quantity * unit_price in whole cents"""
    with localcontext(MONEY_CONTEXT):
        return to_money(unit_price * Decimal(quantity))


class InvoiceLine(BaseModel):
    """
    Invoice Line - Individual line item within an invoice

    Domain Rules:
    - quantity is a whole number >= 1
    - unit_price is non-negative, in whole cents
    - line_total = quantity * unit_price, always recomputed
    """

    description: str = Field(
        default="",
        description="Line item description (may be empty)"
    )

    quantity: int = Field(
        default=1,
        ge=1,
        description="Whole number of units"
    )

    unit_price: Decimal = Field(
        default=Decimal("0.00"),
        ge=0,
        description="Price per unit"
    )

    @property
    def line_total(self) -> Decimal:
        return line_amount(self.quantity, self.unit_price)

    class Config:
        json_schema_extra = {
            "example": {
                "description": "Consulting",
                "quantity": 2,
                "unit_price": "100.00",
            }
        }
