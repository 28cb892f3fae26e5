"""Invoice API Routes

FastAPI routes for invoice generation and the invoice form template.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response

from src.api.error import ClientError
from src.api.schemas.invoice_request import GenerateInvoiceRequestSchema
from src.app.use_cases.invoicing.dtos import GenerateInvoiceCommandDTO
from src.app.use_cases.invoicing.generate_invoice import GenerateInvoice
from src.app.use_cases.invoicing.get_invoice_template import GetInvoiceTemplate
from src.depends import ServiceContainer, get_services

router = APIRouter(prefix="/generate-invoice", tags=["Invoices"])

ERROR_STATUS_CODES = {
    "INVALID_LINE_ITEMS": status.HTTP_422_UNPROCESSABLE_ENTITY,
}


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "Invoice PDF; X-Invoice-Id and X-Email-Sent headers carry the outcome"
        },
        500: {
            "description": "Invoice could not be rendered",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVOICE_RENDER_FAILED",
                            "message": "Failed to generate invoice PDF"
                        }
                    }
                }
            }
        }
    }
)
async def generate_invoice(
    request: GenerateInvoiceRequestSchema,
    services: ServiceContainer = Depends(get_services),
):
    """
    Generate an invoice PDF and optionally email it to the client.

    **Request body:**
    - `clientName` (required): Client name
    - `clientEmail` (required): Client email
    - `items` (required): List of `{description, quantity, price}`
    - `sendEmail` (optional): Email the PDF to the client

    Quantities that are missing, zero, negative or not numbers become 1;
    prices that are missing or not numbers become 0. Totals are computed
    server-side.

    **Returns:**
    - 200: PDF file (`X-Invoice-Id`, `X-Email-Sent` headers)
    - 422: Missing client fields, items is not a list, or a quantity or
      price has more than 100 integer digits
    - 500: Rendering failed
    """
    command = GenerateInvoiceCommandDTO(
        client_name=request.client_name,
        client_email=request.client_email,
        items=request.items,
        send_email=request.send_email,
    )

    use_case = GenerateInvoice(services.pdf_service, services.notification_service)
    result = await use_case.execute(command)

    if result.is_err():
        status_code = ERROR_STATUS_CODES.get(
            result.error.code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        raise ClientError(result.error, status_code=status_code)

    generated = result.value
    return Response(
        content=generated.pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{generated.filename}"',
            "X-Invoice-Id": generated.invoice_id,
            "X-Email-Sent": str(generated.email_sent).lower(),
        }
    )


@router.get("", status_code=status.HTTP_200_OK)
async def get_invoice_template():
    """
    Default invoice shape for pre-filling the invoice form.

    **Example response:**
    ```json
    {
      "success": true,
      "template": {
        "clientName": "",
        "clientEmail": "",
        "items": [{"description": "Lead Generation Service", "quantity": 1, "price": 500, "total": 500}],
        "total": 500,
        "date": "2024-06-10"
      }
    }
    ```
    """
    template = GetInvoiceTemplate().execute()
    return {
        "success": True,
        "template": template.model_dump(mode="json", by_alias=True),
    }
