from .base import BaseModel, generate_uuid
from .invoice_line import MONEY_CONTEXT, InvoiceLine, line_amount, to_money
from .invoice import (
    Invoice,
    InvoiceStatus,
    InvoiceTransitionError,
    compute_total,
    generate_invoice_id,
)
from .lead import Lead, LeadStatus
from .chat_message import ChatMessage, MessageDirection

__all__ = [
    "BaseModel",
    "generate_uuid",
    "InvoiceLine",
    "MONEY_CONTEXT",
    "line_amount",
    "to_money",
    "Invoice",
    "InvoiceStatus",
    "InvoiceTransitionError",
    "compute_total",
    "generate_invoice_id",
    "Lead",
    "LeadStatus",
    "ChatMessage",
    "MessageDirection",
]
