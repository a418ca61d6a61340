"""
Symbology encoders for the barcode engine.
"""

from .base import Symbology, Bits, to_bits, bits_to_string
from .codabar import Codabar
from .code11 import Code11, USD8
from .code39 import Code39
from .code93 import Code93
from .code128 import Code128, CharacterSet, tokenize
from .ean import EAN13, EAN8, UPCA, Bookland, JAN
from .ean_supp import EANSupplemental
from .two_of_five import TwoOfFive
from .registry import encoder_for, available_symbologies

__all__ = [
    "Symbology",
    "Bits",
    "to_bits",
    "bits_to_string",
    "Codabar",
    "Code11",
    "USD8",
    "Code39",
    "Code93",
    "Code128",
    "CharacterSet",
    "tokenize",
    "EAN13",
    "EAN8",
    "UPCA",
    "Bookland",
    "JAN",
    "EANSupplemental",
    "TwoOfFive",
    "encoder_for",
    "available_symbologies",
]
