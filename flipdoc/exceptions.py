"""Custom exceptions raised by :mod:`flipdoc`."""

from __future__ import annotations


class FlipDocError(RuntimeError):
    """Base class for all flipdoc exceptions.

    ``rule`` names the validation rule that rejected the request so callers
    can report exactly why a conversion was aborted.
    """

    default_rule = "conversion"

    def __init__(self, message: str, *, rule: str | None = None) -> None:
        self.rule = rule or self.default_rule
        super().__init__(message)


class InvalidInputError(FlipDocError):
    """Raised when text or uploaded content is missing or empty."""

    default_rule = "empty-text"


class UnsupportedFormatError(FlipDocError):
    """Raised when an image encoding or document extension is not supported."""

    default_rule = "image-format"


class MeasurementError(FlipDocError):
    """Raised when the font metrics provider cannot measure a string."""

    default_rule = "measurement"

    def __init__(self, text: str, font_name: str, font_size: float, reason: str) -> None:
        self.text = text
        self.font_name = font_name
        self.font_size = font_size
        message = f"Unable to measure {text!r} with {font_name} at {font_size}pt: {reason}"
        super().__init__(message)


class ConversionError(FlipDocError):
    """Raised when layout, extraction or serialization fails."""
