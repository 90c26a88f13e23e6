"""Plain-text extraction from word-processor documents."""
from __future__ import annotations

import logging
from io import BytesIO
from typing import Iterator

from docx import Document
from docx.table import Table
from docx.text.paragraph import Paragraph

from .exceptions import ConversionError, InvalidInputError

LOGGER = logging.getLogger(__name__)

PARAGRAPH_SEPARATOR = "\n\n"


def _iter_block_text(blocks) -> Iterator[str]:
    for block in blocks:
        if isinstance(block, Paragraph):
            yield block.text
        elif isinstance(block, Table):
            for row in block.rows:
                # a merged cell is repeated once per grid column it spans
                seen = set()
                for cell in row.cells:
                    if cell._tc in seen:
                        continue
                    seen.add(cell._tc)
                    yield from _iter_block_text(cell.iter_inner_content())


def extract_text(data: bytes) -> str:
    """Return the raw text of a DOCX document.

    Body paragraphs and table cells are visited in document order and each
    block is followed by a blank line, so paragraphs stay visually separated
    once laid out.
    """

    if not data:
        raise InvalidInputError("Document content is empty", rule="empty-upload")

    try:
        document = Document(BytesIO(data))
    except Exception as exc:
        raise ConversionError(
            "Unable to open the document; only Word documents in DOCX format can be read",
            rule="document-extract",
        ) from exc

    blocks = list(_iter_block_text(document.iter_inner_content()))
    LOGGER.debug("Extracted %d text blocks from document", len(blocks))
    return "".join(f"{text}{PARAGRAPH_SEPARATOR}" for text in blocks)


__all__ = ["PARAGRAPH_SEPARATOR", "extract_text"]
