"""Split raw text into paragraphs, keeping blank lines as markers."""

from __future__ import annotations

import logging
import re

from ..exceptions import InvalidInputError
from .model import Paragraph

LOGGER = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_words(line: str) -> tuple[str, ...]:
    """Split ``line`` on spaces; runs of spaces count as one separator."""
    return tuple(word for word in line.split(" ") if word)


def normalize_text(text: object) -> tuple[Paragraph, ...]:
    """Return the paragraphs of ``text`` in input order.

    A line made only of whitespace becomes a blank-line marker instead of
    being dropped. Text that is empty after trimming is rejected.
    """

    if not isinstance(text, str):
        raise InvalidInputError(
            f"Text must be a string, got {type(text).__name__}", rule="text-type"
        )
    if not text.strip():
        raise InvalidInputError("Text must not be empty or whitespace only", rule="empty-text")

    paragraphs = tuple(
        Paragraph(index=index, words=() if not line.strip() else split_words(line))
        for index, line in enumerate(_LINE_BREAK.split(text))
    )
    LOGGER.debug(
        "Normalized %d characters into %d paragraphs (%d blank)",
        len(text),
        len(paragraphs),
        sum(1 for paragraph in paragraphs if paragraph.is_blank),
    )
    return paragraphs


__all__ = ["normalize_text", "split_words"]
