from __future__ import annotations

import logging
from io import BytesIO

import pytest
from pypdf import PdfReader

from flipdoc import convert_image, convert_text, convert_word
from flipdoc import converter
from flipdoc.exceptions import ConversionError, InvalidInputError, MeasurementError, UnsupportedFormatError
from flipdoc.layout import PageGeometry


def _page_count(content: bytes) -> int:
    return len(PdfReader(BytesIO(content)).pages)


def test_convert_text_produces_named_pdf() -> None:
    result = convert_text("Hello world")

    assert result.filename == "documento.pdf"
    assert result.content.startswith(b"%PDF")
    assert result.page_count == _page_count(result.content) == 1
    assert result.line_count == 1


def test_convert_text_honours_custom_geometry() -> None:
    text = "\n".join(f"row {i}" for i in range(25))
    geometry = PageGeometry(width=300, height=200, margin=20, font_size=10)

    result = convert_text(text, geometry)

    assert result.page_count == 3
    assert result.line_count == 25


def test_convert_text_rejects_blank_input() -> None:
    with pytest.raises(InvalidInputError):
        convert_text("   ")


def test_convert_text_logs_progress(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="flipdoc"):
        convert_text("logged")
    assert "Conversion completed: text -> documento.pdf" in caplog.text


@pytest.mark.parametrize("fmt, mime_type", [("PNG", "image/png"), ("JPEG", "image/jpeg"), ("PNG", None)])
def test_convert_image_produces_single_page(image_factory, fmt: str, mime_type: str | None) -> None:
    result = convert_image(image_factory(3000, 1000, fmt), mime_type)

    assert result.filename == "imagem.pdf"
    assert result.page_count == 1
    assert result.line_count == 0
    page = PdfReader(BytesIO(result.content)).pages[0]
    assert float(page.mediabox.width) == pytest.approx(595.28, abs=0.01)


def test_convert_image_rejects_declared_gif(image_factory) -> None:
    with pytest.raises(UnsupportedFormatError):
        convert_image(image_factory(fmt="PNG"), "image/gif")


def test_convert_word_lays_out_extracted_text(docx_factory) -> None:
    result = convert_word(docx_factory("Alpha", "Beta"), "notes.docx")

    assert result.filename == "documento.pdf"
    assert result.page_count == 1
    text = PdfReader(BytesIO(result.content)).pages[0].extract_text()
    assert "Alpha" in text
    assert "Beta" in text


def test_convert_word_rejects_extension_before_reading(docx_factory) -> None:
    with pytest.raises(UnsupportedFormatError) as excinfo:
        convert_word(docx_factory("Alpha"), "notes.pdf")
    assert excinfo.value.rule == "document-extension"


def test_convert_word_rejects_document_without_text(docx_factory) -> None:
    with pytest.raises(InvalidInputError) as excinfo:
        convert_word(docx_factory(), "empty.docx")
    assert excinfo.value.rule == "empty-document"


def test_serialized_output_is_validated(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(converter, "serialize", lambda document: b"%PDF-broken")
    with pytest.raises(ConversionError) as excinfo:
        convert_text("Hello")
    assert excinfo.value.rule == "output-validation"


def test_convert_text_refuses_undrawable_characters() -> None:
    with pytest.raises(MeasurementError) as excinfo:
        convert_text("你好 世界")
    assert excinfo.value.rule == "measurement"
