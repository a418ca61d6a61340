"""
Validation and checksum modules for the barcode encoding engine.
"""

from .validators import (
    validate_text,
    validate_length,
    validate_charset,
    validate_digits,
    MAX_VARIABLE_LENGTH,
)
from .checksums import (
    modulo_10,
    ean5_checksum,
    weighted_checksum,
    modulo_43,
    modulo_103,
)

__all__ = [
    "validate_text",
    "validate_length",
    "validate_charset",
    "validate_digits",
    "MAX_VARIABLE_LENGTH",
    "modulo_10",
    "ean5_checksum",
    "weighted_checksum",
    "modulo_43",
    "modulo_103",
]
