"""Layout and pagination engine for :mod:`flipdoc`."""

from __future__ import annotations

from .engine import layout_image, layout_text, layout_word_document
from .image_fitter import SUPPORTED_IMAGE_FORMATS, fit_image
from .line_breaker import break_lines, wrap_paragraph
from .metrics import DEFAULT_METRICS, FontMetrics, StandardFontMetrics
from .model import (
    A4_HEIGHT,
    A4_WIDTH,
    DEFAULT_GEOMETRY,
    Document,
    ImagePlacement,
    Line,
    Page,
    PageGeometry,
    Paragraph,
    ScaledImage,
    TextPlacement,
)
from .normalizer import normalize_text
from .paginator import PageBuilder, paginate

__all__ = [
    "A4_HEIGHT",
    "A4_WIDTH",
    "DEFAULT_GEOMETRY",
    "DEFAULT_METRICS",
    "Document",
    "FontMetrics",
    "ImagePlacement",
    "Line",
    "Page",
    "PageBuilder",
    "PageGeometry",
    "Paragraph",
    "SUPPORTED_IMAGE_FORMATS",
    "ScaledImage",
    "StandardFontMetrics",
    "TextPlacement",
    "break_lines",
    "fit_image",
    "layout_image",
    "layout_text",
    "layout_word_document",
    "normalize_text",
    "paginate",
    "wrap_paragraph",
]
