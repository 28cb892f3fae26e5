"""Invoicing use cases"""
from .generate_invoice import GenerateInvoice
from .get_invoice_template import GetInvoiceTemplate
from .line_items import normalize_items, coerce_quantity, coerce_unit_price
from .dtos import (
    GenerateInvoiceCommandDTO,
    GeneratedInvoiceDTO,
    InvoiceTemplateDTO,
    InvoiceTemplateItemDTO,
)

__all__ = [
    "GenerateInvoice",
    "GetInvoiceTemplate",
    "normalize_items",
    "coerce_quantity",
    "coerce_unit_price",
    "GenerateInvoiceCommandDTO",
    "GeneratedInvoiceDTO",
    "InvoiceTemplateDTO",
    "InvoiceTemplateItemDTO",
]
