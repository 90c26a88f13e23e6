from __future__ import annotations

from io import BytesIO

import pytest
from docx import Document as DocxDocument

from flipdoc.docx_text import PARAGRAPH_SEPARATOR, extract_text
from flipdoc.exceptions import ConversionError, InvalidInputError


def test_paragraphs_are_followed_by_blank_line(docx_factory) -> None:
    text = extract_text(docx_factory("First paragraph", "Second paragraph"))
    assert "First paragraph\n\nSecond paragraph\n\n" in text
    assert text.endswith(PARAGRAPH_SEPARATOR)


def test_table_cells_are_extracted_in_order(docx_factory) -> None:
    text = extract_text(docx_factory("Intro", table=[["a1", "b1"], ["a2", "b2"]]))
    positions = [text.index(value) for value in ("Intro", "a1", "b1", "a2", "b2")]
    assert positions == sorted(positions)


def test_document_without_text_extracts_blank(docx_factory) -> None:
    assert extract_text(docx_factory()).strip() == ""


def test_empty_upload_is_rejected() -> None:
    with pytest.raises(InvalidInputError) as excinfo:
        extract_text(b"")
    assert excinfo.value.rule == "empty-upload"


def test_non_docx_bytes_fail_extraction() -> None:
    # legacy binary .doc files start with the OLE2 signature
    with pytest.raises(ConversionError) as excinfo:
        extract_text(b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 64)
    assert excinfo.value.rule == "document-extract"


def test_merged_cell_is_extracted_once() -> None:
    document = DocxDocument()
    table = document.add_table(rows=1, cols=3)
    table.cell(0, 0).merge(table.cell(0, 2)).text = "MERGED"
    buffer = BytesIO()
    document.save(buffer)

    assert extract_text(buffer.getvalue()).count("MERGED") == 1
