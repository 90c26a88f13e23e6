"""Greedy word wrapping against a maximum line width."""

from __future__ import annotations

from typing import Iterable, Iterator

from ..exceptions import ConversionError
from ..utils import is_positive_finite
from .metrics import DEFAULT_METRICS, FontMetrics, measure_width
from .model import Line, PageGeometry, Paragraph


def wrap_paragraph(
    paragraph: Paragraph,
    max_width: float,
    metrics: FontMetrics,
    font_name: str,
    font_size: float,
) -> Iterator[Line]:
    """Yield the lines of ``paragraph`` wrapped to ``max_width``.

    Words are packed onto the current line until the next one would push the
    measured width past ``max_width``. A word wider than ``max_width`` on its
    own still gets a line to itself; words are never split.
    """

    if not is_positive_finite(max_width):
        raise ConversionError(
            f"Maximum line width must be a positive finite number, got {max_width!r}",
            rule="geometry",
        )

    if paragraph.is_blank:
        yield Line(text="", paragraph_index=paragraph.index, is_blank=True)
        return

    current = ""
    for word in paragraph.words:
        candidate = f"{current} {word}" if current else word
        if measure_width(metrics, candidate, font_name, font_size) <= max_width:
            current = candidate
            continue
        if current:
            yield Line(text=current, paragraph_index=paragraph.index)
        current = word
    if current:
        yield Line(text=current, paragraph_index=paragraph.index)


def break_lines(
    paragraphs: Iterable[Paragraph],
    geometry: PageGeometry,
    metrics: FontMetrics | None = None,
) -> Iterator[Line]:
    """Chain the wrapped lines of every paragraph in order."""

    metrics = metrics or DEFAULT_METRICS
    for paragraph in paragraphs:
        yield from wrap_paragraph(
            paragraph,
            geometry.max_line_width,
            metrics,
            geometry.font_name,
            geometry.font_size,
        )


__all__ = ["break_lines", "wrap_paragraph"]
