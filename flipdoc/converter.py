"""End-to-end conversions: input → layout → PDF bytes."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .docx_text import extract_text
from .images import probe_image
from .layout import DEFAULT_GEOMETRY, Document, FontMetrics, PageGeometry
from .layout.engine import layout_image, layout_text, layout_word_document
from .serializer import serialize
from .utils import time_block
from .validators import (
    resolve_image_format,
    validate_document_filename,
    validate_pdf_bytes,
    validate_text,
)

LOGGER = logging.getLogger(__name__)

TEXT_OUTPUT_NAME = "documento.pdf"
IMAGE_OUTPUT_NAME = "imagem.pdf"


@dataclass(frozen=True)
class ConversionResult:
    """PDF produced by a conversion together with layout statistics."""

    content: bytes = field(repr=False)
    filename: str
    page_count: int
    line_count: int


def _finish(document: Document, filename: str, kind: str) -> ConversionResult:
    with time_block(LOGGER, f"{kind} PDF serialization"):
        content = serialize(document)
    validate_pdf_bytes(content, expected_pages=document.page_count)
    LOGGER.info(
        "Conversion completed: %s -> %s (%d pages, %d lines)",
        kind,
        filename,
        document.page_count,
        document.line_count,
    )
    return ConversionResult(
        content=content,
        filename=filename,
        page_count=document.page_count,
        line_count=document.line_count,
    )


def convert_text(
    text: object,
    geometry: PageGeometry | None = None,
    metrics: FontMetrics | None = None,
) -> ConversionResult:
    """Convert plain text into a paginated PDF."""
    validate_text(text)
    LOGGER.info("Starting conversion: text (%d characters)", len(text))
    document = layout_text(text, geometry or DEFAULT_GEOMETRY, metrics)
    return _finish(document, TEXT_OUTPUT_NAME, "text")


def convert_image(data: bytes, mime_type: str | None = None) -> ConversionResult:
    """Convert a JPEG or PNG image into a single-page PDF.

    When ``mime_type`` is given it must declare a supported image type; the
    encoding used for layout is always the one found in the content itself.
    """
    if mime_type is not None:
        resolve_image_format(mime_type)
    info = probe_image(data)
    LOGGER.info("Starting conversion: %s image %dx%d", info.image_format, info.width, info.height)
    document = layout_image(info.width, info.height, image_format=info.image_format, data=data)
    return _finish(document, IMAGE_OUTPUT_NAME, "image")


def convert_word(
    data: bytes,
    filename: str | None,
    geometry: PageGeometry | None = None,
    metrics: FontMetrics | None = None,
) -> ConversionResult:
    """Convert a Word document into a paginated PDF of its text."""
    name = validate_document_filename(filename)
    LOGGER.info("Starting conversion: document %s (%d bytes)", name, len(data))
    text = extract_text(data)
    document = layout_word_document(text, geometry or DEFAULT_GEOMETRY, metrics)
    return _finish(document, TEXT_OUTPUT_NAME, "document")


__all__ = ["ConversionResult", "convert_image", "convert_text", "convert_word"]
