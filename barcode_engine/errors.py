"""
Error taxonomy for the barcode encoding engine.

Every failure carries an ErrorCode so callers can branch on the kind of
problem without matching on message text:

- LENGTH: input length outside the symbology's accepted range
- CHARACTER: character outside the alphabet, or a malformed Code128 sequence
- CHECKSUM: caller-supplied check digit does not match the computed one
- GENERATE: internal table lookup failed (a defect, never bad input)
- CONVERSION: a bit sequence cannot be turned into a rendered artifact
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Error codes."""
    LENGTH = "LENGTH"
    CHARACTER = "CHARACTER"
    CHECKSUM = "CHECKSUM"
    GENERATE = "GENERATE"
    CONVERSION = "CONVERSION"


_DEFAULT_MESSAGES = {
    ErrorCode.LENGTH: "Barcode data length is invalid",
    ErrorCode.CHARACTER: "Barcode data is invalid",
    ErrorCode.CHECKSUM: "Invalid checksum",
    ErrorCode.GENERATE: "Could not generate barcode data",
    ErrorCode.CONVERSION: "Invalid data conversion",
}


class BarcodeError(ValueError):
    """Base class for all encoding errors."""

    code: ErrorCode = ErrorCode.GENERATE

    def __init__(self, message: Optional[str] = None, data: Optional[str] = None):
        super().__init__(message or _DEFAULT_MESSAGES[self.code])
        self.data = data

    def to_dict(self) -> dict:
        return {
            "error": str(self),
            "code": self.code.value,
            "input": self.data,
        }


class LengthError(BarcodeError):
    code = ErrorCode.LENGTH


class CharacterError(BarcodeError):
    code = ErrorCode.CHARACTER


class ChecksumError(BarcodeError):
    code = ErrorCode.CHECKSUM


class GenerateError(BarcodeError):
    code = ErrorCode.GENERATE


class ConversionError(BarcodeError):
    code = ErrorCode.CONVERSION
