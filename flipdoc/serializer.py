"""Serialize laid-out documents to PDF bytes with ReportLab."""
from __future__ import annotations

import logging
from io import BytesIO

from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from .exceptions import ConversionError
from .layout.metrics import missing_glyphs
from .layout.model import Document, ImagePlacement, Page, TextPlacement

LOGGER = logging.getLogger(__name__)

PRODUCER = "flipdoc"


def _draw_page(pdf: canvas.Canvas, page: Page) -> None:
    pdf.setPageSize((page.width, page.height))
    for item in page.items:
        if isinstance(item, TextPlacement):
            if item.is_blank or not item.text:
                continue
            missing = missing_glyphs(item.text, item.font_name)
            if missing:
                raise ValueError(f"{item.font_name} has no glyph for {missing!r}")
            pdf.setFont(item.font_name, item.font_size)
            pdf.setFillColorRGB(0, 0, 0)
            pdf.drawString(item.x, item.y, item.text)
        elif isinstance(item, ImagePlacement):
            pdf.drawImage(
                ImageReader(BytesIO(item.data)),
                item.x,
                item.y,
                width=item.width,
                height=item.height,
            )
    pdf.showPage()


def serialize(document: Document, *, title: str | None = None) -> bytes:
    """Render every page of ``document`` and return the PDF bytes.

    The canvas runs in invariant mode, so the same document always produces
    the same bytes.
    """

    buffer = BytesIO()
    pdf = canvas.Canvas(buffer, invariant=1)
    pdf.setCreator(PRODUCER)
    if title:
        pdf.setTitle(title)

    try:
        for page in document.pages:
            _draw_page(pdf, page)
        pdf.save()
    except Exception as exc:
        raise ConversionError(f"Failed to serialize PDF: {exc}", rule="serialize") from exc

    content = buffer.getvalue()
    LOGGER.debug("Serialized %d pages into %d bytes", document.page_count, len(content))
    return content


__all__ = ["PRODUCER", "serialize"]
