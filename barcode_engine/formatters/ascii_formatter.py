"""
Plain-text rendering: '#' for bars, ' ' for spaces.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .options import RenderOptions, check_bits

logger = logging.getLogger(__name__)

CHARS = (' ', '#')


def generate_ascii(bits: Sequence[int], options: Optional[RenderOptions] = None) -> str:
    """
    Render bits as ``options.height`` identical text rows.

    Each module is repeated ``options.xdim`` times. Rows are joined by a
    newline with no trailing newline.
    """
    options = options or RenderOptions()
    options.validate()
    bits = check_bits(bits)

    row = ''.join(CHARS[bit] * options.xdim for bit in bits)
    output = '\n'.join([row] * options.height)
    logger.debug("Rendered %d ASCII rows of width %d", options.height, len(row))
    return output
