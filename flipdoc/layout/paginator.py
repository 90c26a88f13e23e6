"""Flow wrapped lines onto fixed-size pages."""

from __future__ import annotations

import logging
from typing import Iterable

from .model import Document, Line, Page, PageGeometry, Placement, TextPlacement

LOGGER = logging.getLogger(__name__)


class PageBuilder:
    """Append-only arena of pages, each an append-only list of placements."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self._pages: list[list[Placement]] = []

    def open_page(self) -> None:
        self._pages.append([])

    def place(self, item: Placement) -> None:
        if not self._pages:
            self.open_page()
        self._pages[-1].append(item)

    def __len__(self) -> int:
        return len(self._pages)

    def build(self, geometry: PageGeometry | None = None) -> Document:
        pages = tuple(
            Page(width=self.width, height=self.height, items=tuple(items))
            for items in self._pages
        )
        return Document(pages=pages, geometry=geometry)


def paginate(lines: Iterable[Line], geometry: PageGeometry) -> Document:
    """Place ``lines`` top to bottom, opening a new page when one is full.

    The check happens before each line: once the cursor drops below
    ``margin + line_height`` there is no room left, so the line goes to the
    top of a fresh page. A job without lines still yields one empty page.
    """

    builder = PageBuilder(geometry.width, geometry.height)
    builder.open_page()
    floor = geometry.margin + geometry.line_height
    cursor_y = geometry.top

    for line in lines:
        if cursor_y < floor:
            builder.open_page()
            cursor_y = geometry.top
        builder.place(
            TextPlacement(
                text=line.text,
                x=geometry.margin,
                y=cursor_y,
                font_name=geometry.font_name,
                font_size=geometry.font_size,
                paragraph_index=line.paragraph_index,
                is_blank=line.is_blank,
            )
        )
        cursor_y -= geometry.line_height

    document = builder.build(geometry)
    LOGGER.debug("Paginated %d lines onto %d pages", document.line_count, document.page_count)
    return document


__all__ = ["PageBuilder", "paginate"]
