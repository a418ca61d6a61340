"""
PDF rendering with reportlab.

The page is sized to the barcode: one point per unit of height and
``xdim`` points per module.
"""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Optional, Sequence

from reportlab.pdfgen import canvas

from .options import Color, RenderOptions, bar_runs, check_bits
from ..errors import ConversionError

logger = logging.getLogger(__name__)


def _set_fill(c: canvas.Canvas, color: Color) -> None:
    c.setFillColorRGB(color.r / 255, color.g / 255, color.b / 255)
    c.setFillAlpha(color.a / 255)


def generate_pdf(
    bits: Sequence[int],
    options: Optional[RenderOptions] = None,
    title: Optional[str] = None
) -> bytes:
    """
    Render bits as a single-page PDF.

    Args:
        bits: Encoded modules
        options: Height and xdim in points, colors
        title: Optional document title

    Returns:
        PDF document bytes
    """
    options = options or RenderOptions()
    options.validate()
    bits = check_bits(bits)
    width = options.width_for(bits)
    if width == 0:
        raise ConversionError("Cannot render an empty barcode")

    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=(width, options.height))
    if title:
        c.setTitle(title)

    _set_fill(c, options.background)
    c.rect(0, 0, width, options.height, fill=1, stroke=0)

    _set_fill(c, options.foreground)
    for start, length in bar_runs(bits):
        c.rect(start * options.xdim, 0, length * options.xdim, options.height, fill=1, stroke=0)

    c.showPage()
    c.save()
    pdf = buffer.getvalue()
    logger.debug("Rendered PDF of %d bytes", len(pdf))
    return pdf
