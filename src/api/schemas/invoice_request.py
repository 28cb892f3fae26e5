"""Request schemas for Invoice API

Pydantic models for validating incoming HTTP requests.
"""

from typing import Any, List
from pydantic import BaseModel, Field


class GenerateInvoiceRequestSchema(BaseModel):
    """
    Request schema for generating an invoice

    Used for POST /generate-invoice endpoint. Client fields must be present
    and non-empty and items must be a list; item contents are not validated
    here (malformed numbers fall back to defaults downstream).
    """

    client_name: str = Field(
        ...,
        min_length=1,
        alias="clientName",
        description="Client name (required, non-empty)"
    )

    client_email: str = Field(
        ...,
        min_length=1,
        alias="clientEmail",
        description="Client email (required, non-empty)"
    )

    items: List[Any] = Field(
        ...,
        description="Line items: {description, quantity, price}"
    )

    send_email: bool = Field(
        default=False,
        alias="sendEmail",
        description="Email the invoice to the client"
    )

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "clientName": "Acme",
                "clientEmail": "a@acme.com",
                "items": [
                    {"description": "Consulting", "quantity": 2, "price": 100}
                ],
                "sendEmail": False
            }
        }
