from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Callable
import sys

import pytest
from docx import Document as DocxDocument
from PIL import Image

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


class FixedWidthMetrics:
    """Every character advances ``advance * font_size`` points."""

    def __init__(self, advance: float = 0.5) -> None:
        self.advance = advance
        self.calls: list[str] = []

    def measure(self, text: str, font_name: str, font_size: float) -> float:
        self.calls.append(text)
        return len(text) * self.advance * font_size


@pytest.fixture()
def fixed_metrics() -> FixedWidthMetrics:
    # 6pt per character at the default 12pt font size
    return FixedWidthMetrics()


@pytest.fixture()
def image_factory() -> Callable[..., bytes]:
    def _create(width: int = 40, height: int = 20, fmt: str = "PNG") -> bytes:
        buffer = BytesIO()
        Image.new("RGB", (width, height), color=(200, 30, 30)).save(buffer, format=fmt)
        return buffer.getvalue()

    return _create


@pytest.fixture()
def docx_factory() -> Callable[..., bytes]:
    def _create(*paragraphs: str, table: list[list[str]] | None = None) -> bytes:
        document = DocxDocument()
        for text in paragraphs:
            document.add_paragraph(text)
        if table:
            grid = document.add_table(rows=len(table), cols=len(table[0]))
            for row_index, row in enumerate(table):
                for col_index, value in enumerate(row):
                    grid.cell(row_index, col_index).text = value
        buffer = BytesIO()
        document.save(buffer)
        return buffer.getvalue()

    return _create
