"""GetInvoiceTemplate Use Case

Returns the default invoice shape used to pre-fill the invoice form.
"""

from datetime import datetime, timezone
from typing import Callable, Optional
from .dtos import InvoiceTemplateDTO, InvoiceTemplateItemDTO

TEMPLATE_DESCRIPTION = "Lead Generation Service"
TEMPLATE_PRICE = 500.0


class GetInvoiceTemplate:

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def execute(self) -> InvoiceTemplateDTO:
        item = InvoiceTemplateItemDTO(
            description=TEMPLATE_DESCRIPTION,
            quantity=1,
            price=TEMPLATE_PRICE,
            total=TEMPLATE_PRICE,
        )
        return InvoiceTemplateDTO(
            items=[item],
            total=item.total,
            date=self.clock().date().isoformat(),
        )
