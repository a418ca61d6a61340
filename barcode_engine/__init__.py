"""
Barcode Symbol Encoding Engine

Turns text into the bar/space module sequence of a 1D barcode symbology
(Codabar, Code11, Code39, Code93, Code128, EAN-13, EAN-8, UPC-A, EAN-2/5
supplementals, Standard and Interleaved 2 of 5), and renders the result as
ASCII, JSON, SVG, raster images or PDF.
"""

from .core.base import Symbology, bits_to_string
from .core.codabar import Codabar
from .core.code11 import Code11, USD8
from .core.code39 import Code39
from .core.code93 import Code93
from .core.code128 import Code128, CharacterSet
from .core.ean import EAN13, EAN8, UPCA, Bookland, JAN
from .core.ean_supp import EANSupplemental
from .core.two_of_five import TwoOfFive
from .core.registry import encoder_for
from .errors import (
    ErrorCode,
    BarcodeError,
    LengthError,
    CharacterError,
    ChecksumError,
    GenerateError,
    ConversionError,
)
from .formatters import (
    RenderOptions,
    Color,
    generate_ascii,
    generate_json,
    generate_svg,
    generate_image,
    image_bytes,
    generate_pdf,
)

__version__ = "1.0.0"
__all__ = [
    "Symbology",
    "bits_to_string",
    "Codabar",
    "Code11",
    "USD8",
    "Code39",
    "Code93",
    "Code128",
    "CharacterSet",
    "EAN13",
    "EAN8",
    "UPCA",
    "Bookland",
    "JAN",
    "EANSupplemental",
    "TwoOfFive",
    "encoder_for",
    "ErrorCode",
    "BarcodeError",
    "LengthError",
    "CharacterError",
    "ChecksumError",
    "GenerateError",
    "ConversionError",
    "RenderOptions",
    "Color",
    "generate_ascii",
    "generate_json",
    "generate_svg",
    "generate_image",
    "image_bytes",
    "generate_pdf",
]
