"""Immutable page model shared by the layout engine and the serializer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union

from ..exceptions import ConversionError
from ..utils import is_positive_finite

A4_WIDTH = 595.28
A4_HEIGHT = 841.89
DEFAULT_MARGIN = 50.0
DEFAULT_FONT_NAME = "Helvetica"
DEFAULT_FONT_SIZE = 12.0
DEFAULT_LINE_HEIGHT_FACTOR = 1.5


@dataclass(frozen=True, slots=True)
class Paragraph:
    """Words found between two line breaks; no words marks a blank line."""

    index: int
    words: tuple[str, ...] = ()

    @property
    def is_blank(self) -> bool:
        return not self.words


@dataclass(frozen=True, slots=True)
class Line:
    text: str
    paragraph_index: int
    is_blank: bool = False


@dataclass(frozen=True, slots=True)
class PageGeometry:
    """Page size, margin and font settings shared by every page of a job."""

    width: float = A4_WIDTH
    height: float = A4_HEIGHT
    margin: float = DEFAULT_MARGIN
    font_name: str = DEFAULT_FONT_NAME
    font_size: float = DEFAULT_FONT_SIZE
    line_height_factor: float = DEFAULT_LINE_HEIGHT_FACTOR

    def __post_init__(self) -> None:
        for name in ("width", "height", "margin", "font_size", "line_height_factor"):
            value = getattr(self, name)
            if not is_positive_finite(value):
                raise ConversionError(
                    f"Page geometry '{name}' must be a positive finite number, got {value!r}",
                    rule="geometry",
                )
        if self.max_line_width <= 0:
            raise ConversionError(
                f"Margin {self.margin} leaves no horizontal room on a page {self.width} wide",
                rule="geometry",
            )
        if self.height - 2 * self.margin < self.line_height:
            raise ConversionError(
                f"Page height {self.height} with margin {self.margin} cannot hold "
                f"a single {self.line_height}pt line",
                rule="geometry",
            )

    @property
    def line_height(self) -> float:
        return self.font_size * self.line_height_factor

    @property
    def max_line_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def top(self) -> float:
        """Baseline of the first line on a fresh page."""
        return self.height - self.margin

    @property
    def lines_per_page(self) -> int:
        usable = self.height - 2 * self.margin - self.line_height
        return math.floor(usable / self.line_height) + 1


DEFAULT_GEOMETRY = PageGeometry()


@dataclass(frozen=True, slots=True)
class TextPlacement:
    text: str
    x: float
    y: float
    font_name: str
    font_size: float
    paragraph_index: int
    is_blank: bool = False


@dataclass(frozen=True, slots=True)
class ImagePlacement:
    x: float
    y: float
    width: float
    height: float
    image_format: str
    data: bytes = field(default=b"", repr=False)


Placement = Union[TextPlacement, ImagePlacement]


@dataclass(frozen=True, slots=True)
class Page:
    width: float
    height: float
    items: tuple[Placement, ...] = ()

    @property
    def lines(self) -> tuple[TextPlacement, ...]:
        return tuple(item for item in self.items if isinstance(item, TextPlacement))


@dataclass(frozen=True, slots=True)
class Document:
    """Laid-out pages ready for serialization.

    ``geometry`` is ``None`` for image documents, whose single page is sized
    after the scaled image rather than a fixed page geometry.
    """

    pages: tuple[Page, ...]
    geometry: PageGeometry | None = None

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def line_count(self) -> int:
        return sum(len(page.lines) for page in self.pages)


@dataclass(frozen=True, slots=True)
class ScaledImage:
    pixel_width: float
    pixel_height: float
    scale: float

    @property
    def width(self) -> float:
        return self.pixel_width * self.scale

    @property
    def height(self) -> float:
        return self.pixel_height * self.scale


__all__ = [
    "A4_WIDTH",
    "A4_HEIGHT",
    "DEFAULT_GEOMETRY",
    "Document",
    "ImagePlacement",
    "Line",
    "Page",
    "PageGeometry",
    "Paragraph",
    "Placement",
    "ScaledImage",
    "TextPlacement",
]
