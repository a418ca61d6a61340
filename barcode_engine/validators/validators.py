"""
Input validation shared by every symbology.

Validation runs before any encoding is attempted and checks, in order:
1. Length within the symbology's inclusive range
2. Every character belongs to the symbology's alphabet

A string that is both too long and contains bad characters reports the
length problem, so callers always see the same error for the same input.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Optional

from ..errors import CharacterError, LengthError
from ..tables import DIGITS

logger = logging.getLogger(__name__)

# Variable-length symbologies accept up to this many characters.
MAX_VARIABLE_LENGTH = 255


def validate_length(
    text: str,
    name: str,
    min_length: int,
    max_length: Optional[int] = None
) -> str:
    """
    Check that ``text`` is between ``min_length`` and ``max_length`` characters.

    Args:
        text: Raw input
        name: Symbology name for error messages
        min_length: Minimum accepted length (inclusive)
        max_length: Maximum accepted length (inclusive), None for unbounded

    Returns:
        The unchanged input

    Raises:
        LengthError: If the length is out of range
    """
    length = len(text)
    if length < min_length or (max_length is not None and length > max_length):
        if max_length is None:
            expected = f"at least {min_length}"
        elif min_length == max_length:
            expected = f"exactly {min_length}"
        else:
            expected = f"{min_length}-{max_length}"
        raise LengthError(
            f"{name} data must be {expected} characters long, got {length}",
            data=text,
        )
    return text


def validate_charset(text: str, name: str, charset: AbstractSet[str]) -> str:
    """
    Check that every character of ``text`` is a member of ``charset``.

    Raises:
        CharacterError: Listing the offending characters in input order
    """
    invalid = [c for c in text if c not in charset]
    if invalid:
        # Keep first-seen order, drop repeats
        unique = list(dict.fromkeys(invalid))
        raise CharacterError(
            f"Invalid characters for {name}: {''.join(unique)!r}",
            data=text,
        )
    return text


def validate_text(
    text: str,
    name: str,
    min_length: int,
    max_length: Optional[int],
    charset: AbstractSet[str]
) -> str:
    """
    Validate raw input against a symbology's length range and alphabet.

    Length is checked first, then the character set.

    Returns:
        The validated text
    """
    if not isinstance(text, str):
        raise CharacterError(
            f"{name} data must be a string, got {type(text).__name__}"
        )
    validate_length(text, name, min_length, max_length)
    validate_charset(text, name, charset)
    logger.debug("Validated %d characters for %s", len(text), name)
    return text


def validate_digits(text: str, name: str, min_length: int, max_length: int) -> str:
    """Shortcut for numeric-only symbologies."""
    return validate_text(text, name, min_length, max_length, DIGITS)
