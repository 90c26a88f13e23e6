"""Shared layout engine used by every conversion entry point."""

from __future__ import annotations

import logging

from ..exceptions import InvalidInputError
from .image_fitter import layout_image
from .line_breaker import break_lines
from .metrics import FontMetrics
from .model import DEFAULT_GEOMETRY, Document, PageGeometry
from .normalizer import normalize_text
from .paginator import paginate

LOGGER = logging.getLogger(__name__)


def layout_text(
    text: str,
    geometry: PageGeometry = DEFAULT_GEOMETRY,
    metrics: FontMetrics | None = None,
) -> Document:
    """Lay out ``text`` on pages of ``geometry``."""

    paragraphs = normalize_text(text)
    document = paginate(break_lines(paragraphs, geometry, metrics), geometry)
    LOGGER.debug(
        "Laid out %d paragraphs as %d lines on %d pages",
        len(paragraphs),
        document.line_count,
        document.page_count,
    )
    return document


def layout_word_document(
    text: str,
    geometry: PageGeometry = DEFAULT_GEOMETRY,
    metrics: FontMetrics | None = None,
) -> Document:
    """Lay out text extracted from a word-processor document."""

    if not isinstance(text, str) or not text.strip():
        raise InvalidInputError(
            "The document is empty or its text could not be extracted",
            rule="empty-document",
        )
    return layout_text(text, geometry, metrics)


__all__ = ["layout_image", "layout_text", "layout_word_document"]
