"""
SVG rendering.

The document is a background rectangle covering the whole barcode
followed by one rectangle per bar module.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .options import Color, RenderOptions, check_bits

logger = logging.getLogger(__name__)


def _rect(options: RenderOptions, fill: Color, offset: int, width: int) -> str:
    opacity = fill.opacity()
    opacity_attr = '' if opacity == "1.00" else f' fill-opacity="{opacity}" '
    return (
        f'<rect x="{offset}" y="0" width="{width}" height="{options.height}" '
        f'fill="#{fill.to_hex()}"{opacity_attr}/>'
    )


def generate_svg(bits: Sequence[int], options: Optional[RenderOptions] = None) -> str:
    """
    Render bits as an SVG document.

    Args:
        bits: Encoded modules
        options: Height, xdim, colors and optional xmlns

    Returns:
        SVG markup as a single line

    Raises:
        ConversionError: On invalid modules or dimensions
    """
    options = options or RenderOptions()
    options.validate()
    bits = check_bits(bits)
    width = options.width_for(bits)

    bars = ''.join(
        _rect(options, options.foreground, i * options.xdim, options.xdim)
        for i, bit in enumerate(bits)
        if bit == 1
    )
    xmlns = f'xmlns="{options.xmlns}" ' if options.xmlns else ''

    svg = (
        f'<svg version="1.1" {xmlns}viewBox="0 0 {width} {options.height}">'
        f'{_rect(options, options.background, 0, width)}{bars}</svg>'
    )
    logger.debug("Rendered SVG of %d characters", len(svg))
    return svg
