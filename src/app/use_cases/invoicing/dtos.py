"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs.
"""

from typing import Any, List
from pydantic import BaseModel, Field
from src.domain.invoice import Invoice


class GenerateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for generating an invoice

    Items are passed through untyped; GenerateInvoice normalizes them.
    """

    client_name: str = Field(
        ...,
        min_length=1,
        description="Client name"
    )

    client_email: str = Field(
        ...,
        min_length=1,
        description="Client email address"
    )

    items: List[Any] = Field(
        default_factory=list,
        description="Raw line items: description, quantity, price"
    )

    send_email: bool = Field(
        default=False,
        description="Email the rendered invoice to the client"
    )


class GeneratedInvoiceDTO(BaseModel):
    """
    Response DTO for a generated invoice

    Carries the rendered document plus the delivery outcome.
    """

    invoice_id: str = Field(..., description="Assigned invoice identifier")

    filename: str = Field(..., description="Suggested download filename")

    pdf_bytes: bytes = Field(..., description="Rendered PDF document")

    email_sent: bool = Field(..., description="Whether email dispatch succeeded")

    invoice: Invoice = Field(..., description="Invoice as rendered, with final status")


class InvoiceTemplateItemDTO(BaseModel):
    description: str
    quantity: int
    price: float
    total: float


class InvoiceTemplateDTO(BaseModel):
    """Default invoice shape used to pre-fill the invoice form"""

    client_name: str = Field(default="", serialization_alias="clientName")
    client_email: str = Field(default="", serialization_alias="clientEmail")
    items: List[InvoiceTemplateItemDTO]
    total: float
    date: str = Field(..., description="Today's date (YYYY-MM-DD)")
