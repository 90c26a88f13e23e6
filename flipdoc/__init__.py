"""Top-level package for flipdoc.

Converts plain text, JPEG/PNG images and Word documents into paginated PDF
files through one shared layout engine.
"""
from .converter import ConversionResult, convert_image, convert_text, convert_word
from .exceptions import (
    ConversionError,
    FlipDocError,
    InvalidInputError,
    MeasurementError,
    UnsupportedFormatError,
)
from .layout import (
    DEFAULT_GEOMETRY,
    Document,
    FontMetrics,
    Page,
    PageGeometry,
    layout_image,
    layout_text,
    layout_word_document,
)
from .serializer import serialize

__all__ = [
    "ConversionError",
    "ConversionResult",
    "DEFAULT_GEOMETRY",
    "Document",
    "FlipDocError",
    "FontMetrics",
    "InvalidInputError",
    "MeasurementError",
    "Page",
    "PageGeometry",
    "UnsupportedFormatError",
    "convert_image",
    "convert_text",
    "convert_word",
    "layout_image",
    "layout_text",
    "layout_word_document",
    "serialize",
]

__version__ = "0.1.0"
