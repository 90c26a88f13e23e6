from __future__ import annotations

import inspect
import math
import random

import pytest

from flipdoc.exceptions import ConversionError, MeasurementError
from flipdoc.layout import Paragraph, StandardFontMetrics, layout_text, wrap_paragraph
from flipdoc.layout.metrics import missing_glyphs

FONT = "Helvetica"
SIZE = 12.0


def _wrap(words: str, max_width: float, metrics) -> list[str]:
    paragraph = Paragraph(index=0, words=tuple(words.split()))
    return [line.text for line in wrap_paragraph(paragraph, max_width, metrics, FONT, SIZE)]


def test_words_are_packed_greedily(fixed_metrics) -> None:
    assert _wrap("aaa bbb ccc ddd", 60, fixed_metrics) == ["aaa bbb", "ccc ddd"]


def test_candidate_equal_to_max_width_fits(fixed_metrics) -> None:
    # "aaaa bbbbb" is 10 characters, exactly 60pt
    assert _wrap("aaaa bbbbb", 60, fixed_metrics) == ["aaaa bbbbb"]


def test_each_candidate_is_measured(fixed_metrics) -> None:
    _wrap("aaa bbb ccc ddd", 60, fixed_metrics)
    assert fixed_metrics.calls == ["aaa", "aaa bbb", "aaa bbb ccc", "ccc ddd"]


def test_overflowing_word_gets_its_own_line(fixed_metrics) -> None:
    lines = _wrap("a verylongwordthatoverflows b", 60, fixed_metrics)
    assert lines == ["a", "verylongwordthatoverflows", "b"]


def test_leading_overflow_word_emits_no_empty_line(fixed_metrics) -> None:
    assert _wrap("verylongwordthatoverflows a", 60, fixed_metrics) == ["verylongwordthatoverflows", "a"]


def test_blank_paragraph_yields_one_empty_line(fixed_metrics) -> None:
    lines = list(wrap_paragraph(Paragraph(index=3), 60, fixed_metrics, FONT, SIZE))
    assert len(lines) == 1
    assert lines[0].text == ""
    assert lines[0].is_blank
    assert lines[0].paragraph_index == 3
    assert fixed_metrics.calls == []


def test_wrap_is_lazy(fixed_metrics) -> None:
    result = wrap_paragraph(Paragraph(index=0, words=("a",)), 60, fixed_metrics, FONT, SIZE)
    assert inspect.isgenerator(result)
    assert fixed_metrics.calls == []


def test_width_bound_and_word_order_hold(fixed_metrics) -> None:
    rng = random.Random(7)
    max_width = 90.0
    for _ in range(50):
        words = tuple("x" * rng.randint(1, 20) for _ in range(rng.randint(1, 40)))
        lines = list(wrap_paragraph(Paragraph(index=0, words=words), max_width, fixed_metrics, FONT, SIZE))

        for line in lines:
            width = fixed_metrics.measure(line.text, FONT, SIZE)
            assert width <= max_width or len(line.text.split(" ")) == 1
        rebuilt = tuple(word for line in lines for word in line.text.split(" "))
        assert rebuilt == words


def test_wrapping_is_deterministic() -> None:
    metrics = StandardFontMetrics()
    paragraph = Paragraph(index=0, words=tuple("The quick brown fox jumps over the lazy dog".split() * 20))
    first = list(wrap_paragraph(paragraph, 200, metrics, FONT, SIZE))
    second = list(wrap_paragraph(paragraph, 200, metrics, FONT, SIZE))
    assert first == second
    assert all(metrics.measure(line.text, FONT, SIZE) <= 200 for line in first)


def test_standard_metrics_use_helvetica_widths() -> None:
    # H=722, e=556, l=222, l=222, o=556 thousandths of an em
    assert StandardFontMetrics().measure("Hello", FONT, SIZE) == pytest.approx(27.336)


def test_provider_errors_become_measurement_errors() -> None:
    class Broken:
        def measure(self, text, font_name, font_size):
            raise KeyError(font_name)

    with pytest.raises(MeasurementError) as excinfo:
        _wrap("a b", 60, Broken())
    assert excinfo.value.rule == "measurement"
    assert excinfo.value.text == "a"


def test_non_finite_width_is_a_measurement_error() -> None:
    class NotANumber:
        def measure(self, text, font_name, font_size):
            return math.nan

    with pytest.raises(MeasurementError):
        _wrap("a", 60, NotANumber())


def test_unknown_font_fails_to_measure() -> None:
    paragraph = Paragraph(index=0, words=("a",))
    with pytest.raises(MeasurementError):
        list(wrap_paragraph(paragraph, 60, StandardFontMetrics(), "NoSuchFont", SIZE))


@pytest.mark.parametrize("max_width", [0, -5, math.inf, math.nan])
def test_invalid_max_width_is_rejected(fixed_metrics, max_width: float) -> None:
    with pytest.raises(ConversionError):
        _wrap("a", max_width, fixed_metrics)


@pytest.mark.parametrize("text", ["你好", "naïve 你好", "ăşţ"])
def test_characters_outside_the_font_encoding_fail_to_measure(text: str) -> None:
    with pytest.raises(MeasurementError) as excinfo:
        layout_text(text)
    assert excinfo.value.rule == "measurement"


def test_latin1_and_symbol_characters_are_measured() -> None:
    metrics = StandardFontMetrics()
    assert metrics.measure("café – €5", FONT, SIZE) > 0
    assert missing_glyphs("café → ok", FONT) == ""
    assert missing_glyphs("a你b你", FONT) == "你"
