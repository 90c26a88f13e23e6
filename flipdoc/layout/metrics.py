"""Font metrics providers used by the line breaker."""

from __future__ import annotations

import math
from typing import Protocol, runtime_checkable

from reportlab.pdfbase import pdfmetrics

from ..exceptions import MeasurementError


@runtime_checkable
class FontMetrics(Protocol):
    """Anything able to report the rendered width of a string."""

    def measure(self, text: str, font_name: str, font_size: float) -> float:
        ...


def _font_encodings(font_name: str) -> tuple[str, ...]:
    """Encodings of ``font_name`` and the fonts ReportLab substitutes for it.

    Only single-byte Type-1 fonts carry an ``encName``; embedded TrueType and
    CID fonts map Unicode directly and yield no encodings.
    """

    font = pdfmetrics.getFont(font_name)
    fonts = [font, *(getattr(font, "substitutionFonts", None) or ())]
    encodings = []
    for candidate in fonts:
        encoding = getattr(candidate, "encName", None)
        if encoding:
            encodings.append("UTF16" if "UCS-2" in encoding else encoding)
    return tuple(encodings)


def _can_encode(char: str, encodings: tuple[str, ...]) -> bool:
    for encoding in encodings:
        try:
            char.encode(encoding)
        except UnicodeEncodeError:
            continue
        return True
    return False


def missing_glyphs(text: str, font_name: str) -> str:
    """Return the characters of ``text`` that ``font_name`` cannot draw."""

    encodings = _font_encodings(font_name)
    if not encodings:
        return ""
    try:
        text.encode(encodings[0])
        return ""
    except UnicodeEncodeError:
        pass
    return "".join(dict.fromkeys(char for char in text if not _can_encode(char, encodings)))


class StandardFontMetrics:
    """Width lookup backed by ReportLab's standard Type-1 font metrics.

    ReportLab keeps the registered fonts in module-level read-only tables, so
    one instance can be shared across threads. ReportLab would measure and
    draw a character outside the font encoding as a placeholder box, so such
    text is refused instead.
    """

    def measure(self, text: str, font_name: str, font_size: float) -> float:
        missing = missing_glyphs(text, font_name)
        if missing:
            raise ValueError(f"{font_name} has no glyph for {missing!r}")
        return float(pdfmetrics.stringWidth(text, font_name, font_size))


def measure_width(metrics: FontMetrics, text: str, font_name: str, font_size: float) -> float:
    """Measure ``text`` and turn any provider failure into :class:`MeasurementError`."""

    try:
        width = metrics.measure(text, font_name, font_size)
    except MeasurementError:
        raise
    except Exception as exc:
        raise MeasurementError(text, font_name, font_size, str(exc) or type(exc).__name__) from exc

    if not isinstance(width, (int, float)) or not math.isfinite(width) or width < 0:
        raise MeasurementError(text, font_name, font_size, f"provider returned {width!r}")
    return float(width)


DEFAULT_METRICS = StandardFontMetrics()

__all__ = ["DEFAULT_METRICS", "FontMetrics", "StandardFontMetrics", "measure_width", "missing_glyphs"]
