"""
JSON Formatter for encoded barcodes

Provides compact JSON output with:
- Render height and module width
- The raw module sequence as a list of 0/1
- Optional symbology metadata for downstream printing services
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional, Sequence

from .options import RenderOptions, check_bits
from ..core.base import Symbology


def format_bits_dict(
    bits: Sequence[int],
    options: Optional[RenderOptions] = None
) -> Dict[str, Any]:
    """
    Build the JSON-ready dictionary for a bit sequence.

    Returns:
        ``{"height": ..., "xdim": ..., "encoding": [...]}``
    """
    options = options or RenderOptions()
    options.validate()
    return {
        "height": options.height,
        "xdim": options.xdim,
        "encoding": [int(bit) for bit in check_bits(bits)],
    }


def generate_json(bits: Sequence[int], options: Optional[RenderOptions] = None) -> str:
    """
    Format a bit sequence as compact JSON.

    Example:
        >>> generate_json([1, 0, 1])
        '{"height":10,"xdim":1,"encoding":[1,0,1]}'
    """
    return json.dumps(format_bits_dict(bits, options), separators=(",", ":"))


def format_barcode_json(
    barcode: Symbology,
    options: Optional[RenderOptions] = None,
    include_data: bool = False
) -> str:
    """
    Encode a barcode and format the result as JSON.

    Args:
        barcode: Constructed symbology
        options: Render options (default: RenderOptions())
        include_data: Add ``symbology`` and ``data`` keys (default: False)

    Returns:
        JSON string
    """
    output = format_bits_dict(barcode.encode(), options)
    if include_data:
        output["symbology"] = barcode.name
        output["data"] = barcode.data
    return json.dumps(output, ensure_ascii=False, separators=(",", ":"))
