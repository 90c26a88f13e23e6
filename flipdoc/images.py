"""Raster image inspection backed by Pillow."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from io import BytesIO

from PIL import Image, UnidentifiedImageError

from .exceptions import ConversionError, InvalidInputError, UnsupportedFormatError
from .layout.image_fitter import SUPPORTED_IMAGE_FORMATS

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageInfo:
    """Encoding and native pixel size of an uploaded image."""

    image_format: str
    width: int
    height: int


def probe_image(data: bytes) -> ImageInfo:
    """Identify the encoding and pixel dimensions of ``data``."""
    if not data:
        raise InvalidInputError("Image content is empty", rule="empty-upload")

    try:
        with Image.open(BytesIO(data)) as image:
            image_format = (image.format or "").upper()
            width, height = image.size
    except UnidentifiedImageError as exc:
        raise ConversionError("Image content could not be decoded", rule="image-decode") from exc
    except Exception as exc:  # pragma: no cover - Pillow raises a wide range of errors
        raise ConversionError(f"Failed to read image: {exc}", rule="image-decode") from exc

    if image_format not in SUPPORTED_IMAGE_FORMATS:
        raise UnsupportedFormatError(
            f"Unsupported image encoding {image_format or 'unknown'}; use JPG or PNG",
            rule="image-format",
        )

    LOGGER.debug("Probed %s image of %dx%d pixels", image_format, width, height)
    return ImageInfo(image_format=image_format, width=width, height=height)


__all__ = ["ImageInfo", "probe_image"]
