"""PDF Generation Service Interface

Defines the contract for rendering invoices as printable documents.
"""

from abc import ABC, abstractmethod
from src.domain.invoice import Invoice


class InvoiceRenderError(Exception):
    """Raised when the document engine cannot produce an invoice PDF"""
    pass


class PdfService(ABC):
    """
    Service interface for PDF generation

    Rendering must be a pure function of the Invoice: the same invoice value
    always yields the same bytes.
    """

    @abstractmethod
    def render_invoice(self, invoice: Invoice) -> bytes:
        """
        Render an invoice PDF

        Args:
            invoice: Invoice with normalized line items

        Returns:
            PDF document as bytes

        Raises:
            InvoiceRenderError: if the document could not be built
        """
        pass
