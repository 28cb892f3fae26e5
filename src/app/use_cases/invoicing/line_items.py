"""Line item normalization

Raw items come straight from the request body. Malformed fields fall back to
safe defaults instead of rejecting the invoice. Well-formed numbers beyond
MAX_AMOUNT_DIGITS integer digits are rejected with LineItemRangeError.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, List, Mapping
from src.domain.invoice_line import InvoiceLine, to_money

DEFAULT_QUANTITY = 1
DEFAULT_UNIT_PRICE = Decimal("0.00")

# Upper bound on integer digits of a quantity or unit price
MAX_AMOUNT_DIGITS = 100


class LineItemRangeError(Exception):
    """A quantity or price is a valid number but too large to bill"""


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise InvalidOperation(f"not a number: {value!r}")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        value = repr(value)
    return Decimal(str(value).strip())


def _check_range(value: Decimal, field: str) -> None:
    if value.adjusted() >= MAX_AMOUNT_DIGITS:
        raise LineItemRangeError(
            f"{field} exceeds {MAX_AMOUNT_DIGITS} digits: {value:.6e}"
        )


def coerce_quantity(value: Any) -> int:
    """
    Whole-number quantity, or 1

    Zero is treated like a missing value: zero-quantity lines are not
    supported, so 0, negatives, fractions below 1 and garbage all become 1.

    Raises:
        LineItemRangeError: if the quantity has more than MAX_AMOUNT_DIGITS digits
    """
    try:
        parsed = _to_decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return DEFAULT_QUANTITY
    if not parsed.is_finite() or parsed < 1:
        return DEFAULT_QUANTITY
    _check_range(parsed, "quantity")
    return int(parsed)


def coerce_unit_price(value: Any) -> Decimal:
    """
    Non-negative price in whole cents, or 0.00

    Raises:
        LineItemRangeError: if the price has more than MAX_AMOUNT_DIGITS digits
    """
    try:
        price = _to_decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return DEFAULT_UNIT_PRICE
    if not price.is_finite() or price <= 0:
        return DEFAULT_UNIT_PRICE
    _check_range(price, "price")
    return to_money(price)


def normalize_items(raw_items: Iterable[Any]) -> List[InvoiceLine]:
    """
    Turn untrusted item records into InvoiceLines

    Order is preserved. Any caller-supplied total is ignored; line totals are
    derived from quantity and unit price.

    Raises:
        LineItemRangeError: if any quantity or price is out of range
    """
    lines = []
    for raw in raw_items:
        item = raw if isinstance(raw, Mapping) else {}
        description = item.get("description")
        lines.append(
            InvoiceLine(
                description="" if description is None else str(description),
                quantity=coerce_quantity(item.get("quantity")),
                unit_price=coerce_unit_price(item.get("price")),
            )
        )
    return lines
