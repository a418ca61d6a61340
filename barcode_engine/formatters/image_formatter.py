"""
Raster rendering with Pillow (PNG, GIF, WEBP).
"""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Optional, Sequence

from PIL import Image, ImageDraw

from .options import RenderOptions, bar_runs, check_bits
from ..errors import ConversionError

logger = logging.getLogger(__name__)

IMAGE_FORMATS = ("PNG", "GIF", "WEBP")

# WEBP cannot store larger images
WEBP_MAX_DIMENSION = 16383


def generate_image(
    bits: Sequence[int],
    options: Optional[RenderOptions] = None,
    fmt: str = "PNG"
) -> Image.Image:
    """
    Render bits as a Pillow image.

    Args:
        bits: Encoded modules
        options: Height and xdim in pixels, colors
        fmt: Target format, used to check size limits

    Returns:
        RGBA image, one pixel row per unit of height

    Raises:
        ConversionError: On invalid modules, dimensions or format
    """
    options = options or RenderOptions()
    options.validate()
    fmt = fmt.upper()
    if fmt not in IMAGE_FORMATS:
        raise ConversionError(f"Unsupported image format: {fmt}")

    bits = check_bits(bits)
    width = options.width_for(bits)
    if width == 0:
        raise ConversionError("Cannot render an empty barcode")
    if fmt == "WEBP" and max(width, options.height) > WEBP_MAX_DIMENSION:
        raise ConversionError(f"WEBP images are limited to {WEBP_MAX_DIMENSION} pixels")

    img = Image.new("RGBA", (width, options.height), options.background.rgba)
    draw = ImageDraw.Draw(img)
    for start, length in bar_runs(bits):
        x0 = start * options.xdim
        x1 = (start + length) * options.xdim - 1
        draw.rectangle([x0, 0, x1, options.height - 1], fill=options.foreground.rgba)

    logger.debug("Rendered %dx%d %s image", width, options.height, fmt)
    return img


def image_bytes(
    bits: Sequence[int],
    options: Optional[RenderOptions] = None,
    fmt: str = "PNG"
) -> bytes:
    """Render bits and serialize the image in ``fmt``."""
    options = options or RenderOptions()
    img = generate_image(bits, options, fmt)
    if fmt.upper() == "GIF":
        img = img.convert("RGB").convert("P", palette=Image.Palette.ADAPTIVE)

    buffer = BytesIO()
    img.save(buffer, format=fmt.upper(), dpi=(options.dpi, options.dpi))
    return buffer.getvalue()
