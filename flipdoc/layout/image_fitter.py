"""Scale an image to fit within page bounds without upscaling."""

from __future__ import annotations

from ..exceptions import ConversionError, UnsupportedFormatError
from ..utils import is_positive_finite
from .model import A4_HEIGHT, A4_WIDTH, Document, ImagePlacement, Page, ScaledImage

SUPPORTED_IMAGE_FORMATS = frozenset({"JPEG", "PNG"})


def fit_image(
    pixel_width: float,
    pixel_height: float,
    max_width: float = A4_WIDTH,
    max_height: float = A4_HEIGHT,
) -> ScaledImage:
    """Return the uniform scale that fits the image inside the bounds.

    The scale never exceeds ``1.0``; images smaller than the bounds keep
    their native size.
    """

    for name, value in (
        ("pixel_width", pixel_width),
        ("pixel_height", pixel_height),
        ("max_width", max_width),
        ("max_height", max_height),
    ):
        if not is_positive_finite(value):
            raise ConversionError(
                f"Image dimension '{name}' must be a positive finite number, got {value!r}",
                rule="image-dimensions",
            )

    scale = min(max_width / pixel_width, max_height / pixel_height, 1.0)
    return ScaledImage(pixel_width=pixel_width, pixel_height=pixel_height, scale=scale)


def layout_image(
    pixel_width: float,
    pixel_height: float,
    max_page_width: float = A4_WIDTH,
    max_page_height: float = A4_HEIGHT,
    *,
    image_format: str,
    data: bytes = b"",
) -> Document:
    """Build a single-page document holding the scaled image at the origin."""

    normalized_format = (image_format or "").upper()
    if normalized_format not in SUPPORTED_IMAGE_FORMATS:
        raise UnsupportedFormatError(
            f"Unsupported image format {image_format!r}; use JPEG or PNG",
            rule="image-format",
        )

    scaled = fit_image(pixel_width, pixel_height, max_page_width, max_page_height)
    placement = ImagePlacement(
        x=0.0,
        y=0.0,
        width=scaled.width,
        height=scaled.height,
        image_format=normalized_format,
        data=data,
    )
    page = Page(width=scaled.width, height=scaled.height, items=(placement,))
    return Document(pages=(page,))


__all__ = ["SUPPORTED_IMAGE_FORMATS", "fit_image", "layout_image"]
