"""ReportLab PDF Generation Service Implementation

Implements invoice rendering using ReportLab platypus.
"""

import logging
from decimal import Decimal
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.pdf_service import PdfService, InvoiceRenderError
from src.domain.invoice import Invoice

logger = logging.getLogger(__name__)

MARGIN = 20 * mm

# Description, Qty, Unit Price, Total (A4 minus margins = 170mm)
COLUMN_WIDTHS = [90 * mm, 20 * mm, 30 * mm, 30 * mm]
ITEM_HEADERS = ["Description", "Qty", "Unit Price", "Total"]

RULE_COLOR = colors.HexColor("#333333")
MUTED_COLOR = colors.HexColor("#666666")

ITEMS_TABLE_STYLE = TableStyle(
    [
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 10),
        ("LINEBELOW", (0, 0), (-1, 0), 0.75, RULE_COLOR),
        ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("LEFTPADDING", (0, 0), (0, -1), 0),
        ("RIGHTPADDING", (-1, 0), (-1, -1), 0),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
    ]
)

TOTAL_TABLE_STYLE = TableStyle(
    [
        ("FONTNAME", (0, 0), (-1, -1), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 14),
        ("ALIGN", (0, 0), (-1, -1), "RIGHT"),
        ("LINEABOVE", (0, 0), (-1, 0), 0.75, RULE_COLOR),
        ("RIGHTPADDING", (-1, 0), (-1, -1), 0),
        ("TOPPADDING", (0, 0), (-1, -1), 6),
    ]
)


def format_money(amount: Decimal) -> str:
    return f"${amount:,.2f}"


def build_styles() -> dict:
    base = getSampleStyleSheet()["Normal"]
    return {
        "title": ParagraphStyle("InvoiceTitle", parent=base, fontName="Helvetica-Bold",
                                fontSize=20, leading=24, spaceAfter=4),
        "company": ParagraphStyle("InvoiceCompany", parent=base, fontSize=9,
                                  textColor=MUTED_COLOR),
        "body": ParagraphStyle("InvoiceBody", parent=base, fontSize=12, leading=16),
        "label": ParagraphStyle("InvoiceLabel", parent=base, fontName="Helvetica-Bold",
                                fontSize=12, leading=16),
        "cell": ParagraphStyle("InvoiceCell", parent=base, fontSize=10, leading=12),
        "footer": ParagraphStyle("InvoiceFooter", parent=base, fontSize=9,
                                 textColor=MUTED_COLOR),
    }


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Output is byte-for-byte reproducible: the document is built with
    ReportLab's invariant mode, and the only date printed is the invoice's
    own creation date. Long item tables continue on following pages with
    the header row repeated.
    """

    def __init__(self, company_name: str = "Lead Desk", company_address: str = ""):
        self.company_name = company_name
        self.company_address = company_address

    def render_invoice(self, invoice: Invoice) -> bytes:
        """
        Render an invoice PDF

        Args:
            invoice: Invoice with normalized line items

        Returns:
            PDF document as bytes

        Raises:
            InvoiceRenderError: if ReportLab fails to lay out the document
        """
        buffer = BytesIO()
        try:
            doc = SimpleDocTemplate(
                buffer,
                pagesize=A4,
                leftMargin=MARGIN,
                rightMargin=MARGIN,
                topMargin=MARGIN,
                bottomMargin=MARGIN,
                title=f"Invoice {invoice.id}",
                author=self.company_name,
                invariant=1,
            )
            doc.build(self._build_elements(invoice))
            return buffer.getvalue()
        except Exception as e:
            logger.error(f"Failed to render invoice {invoice.id}: {e}")
            raise InvoiceRenderError(f"Failed to render invoice {invoice.id}: {e}") from e
        finally:
            buffer.close()

    def _build_elements(self, invoice: Invoice) -> list:
        styles = build_styles()
        return [
            *self._header(styles),
            *self._details(invoice, styles),
            *self._bill_to(invoice, styles),
            self._items_table(invoice, styles),
            self._total_table(invoice),
            Spacer(1, 12 * mm),
            Paragraph("Thank you for your business!", styles["footer"]),
        ]

    def _header(self, styles: dict) -> list:
        elements = [
            Paragraph("INVOICE", styles["title"]),
            Paragraph(escape(self.company_name), styles["company"]),
        ]
        if self.company_address:
            elements.append(Paragraph(escape(self.company_address), styles["company"]))
        elements.append(Spacer(1, 6 * mm))
        return elements

    @staticmethod
    def _details(invoice: Invoice, styles: dict) -> list:
        return [
            Paragraph(f"Invoice #: {escape(invoice.id)}", styles["body"]),
            Paragraph(f"Date: {invoice.created_at.strftime('%Y-%m-%d')}", styles["body"]),
            Paragraph(f"Status: {invoice.status.value.upper()}", styles["body"]),
            Spacer(1, 6 * mm),
        ]

    @staticmethod
    def _bill_to(invoice: Invoice, styles: dict) -> list:
        return [
            Paragraph("Bill To:", styles["label"]),
            Paragraph(escape(invoice.client_name), styles["body"]),
            Paragraph(escape(invoice.client_email), styles["body"]),
            Spacer(1, 8 * mm),
        ]

    @staticmethod
    def _items_table(invoice: Invoice, styles: dict) -> Table:
        rows = [ITEM_HEADERS]
        rows.extend(
            [
                Paragraph(escape(item.description), styles["cell"]),
                str(item.quantity),
                format_money(item.unit_price),
                format_money(item.line_total),
            ]
            for item in invoice.items
        )
        table = Table(rows, colWidths=COLUMN_WIDTHS, repeatRows=1)
        table.setStyle(ITEMS_TABLE_STYLE)
        return table

    @staticmethod
    def _total_table(invoice: Invoice) -> Table:
        table = Table(
            [[f"Total: {format_money(invoice.total)}"]],
            colWidths=[sum(COLUMN_WIDTHS[2:])],
            hAlign="RIGHT",
        )
        table.setStyle(TOTAL_TABLE_STYLE)
        return table
