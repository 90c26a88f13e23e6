"""Validation routines for flipdoc inputs and outputs."""
from __future__ import annotations

import logging
from io import BytesIO
from pathlib import PurePath

from pypdf import PdfReader

from .exceptions import ConversionError, InvalidInputError, UnsupportedFormatError

LOGGER = logging.getLogger(__name__)

IMAGE_MIME_TYPES = {
    "image/jpeg": "JPEG",
    "image/jpg": "JPEG",
    "image/png": "PNG",
}
DOCUMENT_EXTENSIONS = (".doc", ".docx")


def validate_text(text: object) -> str:
    """Ensure ``text`` is a string with visible content."""
    if not isinstance(text, str):
        raise InvalidInputError('Field "text" is required and must be a string', rule="text-type")
    if not text.strip():
        raise InvalidInputError('Field "text" must not be empty', rule="empty-text")
    return text


def resolve_image_format(mime_type: str | None) -> str:
    """Map an upload MIME type onto the image encoding it declares."""
    normalized = (mime_type or "").split(";", 1)[0].strip().lower()
    try:
        return IMAGE_MIME_TYPES[normalized]
    except KeyError as exc:
        raise UnsupportedFormatError(
            f"Unsupported image type {mime_type!r}. Use JPG or PNG.", rule="image-format"
        ) from exc


def validate_document_filename(filename: str | None) -> str:
    """Ensure ``filename`` carries a word-processor extension."""
    name = PurePath(filename or "").name
    if not name.lower().endswith(DOCUMENT_EXTENSIONS):
        raise UnsupportedFormatError(
            f"Unsupported document {name!r}. Use .doc or .docx files.", rule="document-extension"
        )
    return name


def validate_pdf_bytes(content: bytes, expected_pages: int | None = None) -> int:
    """Check that ``content`` parses as a PDF and return its page count."""
    LOGGER.debug("Validating %d bytes of PDF output", len(content))
    try:
        reader = PdfReader(BytesIO(content))
        page_count = len(reader.pages)
    except Exception as exc:  # pragma: no cover - dependency exceptions vary
        raise ConversionError("Generated PDF could not be read back", rule="output-validation") from exc

    if expected_pages is not None and page_count != expected_pages:
        raise ConversionError(
            f"Generated PDF has {page_count} pages, expected {expected_pages}",
            rule="output-validation",
        )
    return page_count


__all__ = [
    "DOCUMENT_EXTENSIONS",
    "IMAGE_MIME_TYPES",
    "resolve_image_format",
    "validate_document_filename",
    "validate_pdf_bytes",
    "validate_text",
]
