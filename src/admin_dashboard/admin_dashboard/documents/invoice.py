from __future__ import annotations

import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from ..common.datetime_utils import format_iso_date
from ..common.logger import get_logger
from ..core.constants import DEFAULT_COMPANY_NAME
from ..orders.model import SalesOrder

logger = get_logger(__name__)

PAGE_SIZE = (600, 400)
FONT = "Helvetica"

TABLE_Y = 260
ROW_HEIGHT = 20
TABLE_LEFT = 45
TABLE_RIGHT = 550
COLUMN_X = (50, 100, 250, 450)
HEADERS = ("No.", "Product Name", "Category", "Quantity")
BORDER_X = (45, 95, 240, 440, 550)
LOGO_BOX = (450, 290, 100, 80)


@dataclass(frozen=True)
class TextOp:
    x: float
    y: float
    text: str
    size: float


@dataclass(frozen=True)
class LineOp:
    x1: float
    y1: float
    x2: float
    y2: float
    thickness: float = 1


@dataclass(frozen=True)
class ImageOp:
    path: str
    x: float
    y: float
    width: float
    height: float


@dataclass
class PageLayout:
    width: float
    height: float
    ops: list[Union[TextOp, LineOp, ImageOp]] = field(default_factory=list)

    def texts(self) -> list[TextOp]:
        return [op for op in self.ops if isinstance(op, TextOp)]

    def lines(self) -> list[LineOp]:
        return [op for op in self.ops if isinstance(op, LineOp)]

    def text(self, x: float, y: float, text: str, size: float) -> None:
        self.ops.append(TextOp(x, y, text, size))

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.ops.append(LineOp(x1, y1, x2, y2))


def layout_invoice(order: SalesOrder, *, company_name: str = DEFAULT_COMPANY_NAME, logo: Optional[str] = None) -> PageLayout:
    """Place the invoice of one order on a single 600x400 page.

    Pure coordinate arithmetic (PDF origin bottom-left). Rows are 20pt apart
    starting 20pt under the header row; there is no page overflow handling, so
    long product lists run below the footer.
    """

    page = PageLayout(*PAGE_SIZE)

    if logo:
        page.ops.append(ImageOp(logo, *LOGO_BOX))

    page.text(50, 350, f"Invoice for Order: {order.order_code}", 20)
    page.text(50, 320, f"Supplier Category: {order.supplier.category.value}", 15)
    page.text(50, 290, f"Order Date: {format_iso_date(order.order_date)}", 12)
    page.text(250, 290, f"Valid Until: {format_iso_date(order.order_valid_until)}", 12)

    page.line(TABLE_LEFT, TABLE_Y + 10, TABLE_RIGHT, TABLE_Y + 10)
    for header, x in zip(HEADERS, COLUMN_X):
        page.text(x, TABLE_Y, header, 12)

    y = TABLE_Y - ROW_HEIGHT
    for i, product in enumerate(order.products, start=1):
        cells = (str(i), product.name, product.category.value, str(product.quantity))
        for cell, x in zip(cells, COLUMN_X):
            page.text(x, y, cell, 12)
        page.line(TABLE_LEFT, y + 10, TABLE_RIGHT, y + 10)
        page.line(TABLE_LEFT, y - 10, TABLE_RIGHT, y - 10)
        y -= ROW_HEIGHT

    for x in BORDER_X:
        page.line(x, TABLE_Y + 10, x, y + 10)
    page.line(TABLE_LEFT, y + 10, TABLE_RIGHT, y + 10)

    page.text(50, 30, f"Note: This is electronically generated by {company_name}", 10)
    return page


def render_pdf(layout: PageLayout) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=(layout.width, layout.height))

    for op in layout.ops:
        if isinstance(op, TextOp):
            c.setFont(FONT, op.size)
            c.drawString(op.x, op.y, op.text)
        elif isinstance(op, LineOp):
            c.setLineWidth(op.thickness)
            c.line(op.x1, op.y1, op.x2, op.y2)
        elif isinstance(op, ImageOp):
            c.drawImage(ImageReader(op.path), op.x, op.y, width=op.width, height=op.height, mask="auto")

    c.showPage()
    c.save()
    return buf.getvalue()


class InvoiceRenderer:
    """Builds invoice PDFs in memory for the order pages."""

    def __init__(self, *, company_name: str = DEFAULT_COMPANY_NAME, logo_path: Optional[str] = None):
        self._company_name = company_name
        self._logo_path = None
        if logo_path:
            if Path(logo_path).is_file():
                self._logo_path = str(logo_path)
            else:
                logger.warning("invoice logo %s not found, rendering without it", logo_path)

    def layout(self, order: SalesOrder) -> PageLayout:
        return layout_invoice(order, company_name=self._company_name, logo=self._logo_path)

    def render(self, order: SalesOrder) -> bytes:
        pdf = render_pdf(self.layout(order))
        logger.info("rendered invoice for order %s (%d bytes)", order.order_code, len(pdf))
        return pdf
