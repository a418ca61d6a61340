"""
Shared contract for all symbologies.

Each symbology is a frozen dataclass built through a validating
constructor. Validation rules are declared as class attributes and applied
by ``Symbology.validate``; encoding is split into ``_patterns`` (the ordered
pattern strings: framing, units, checksums, stop) and ``encode`` which
flattens them into a list of 0/1 ints.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, ClassVar, Iterable, List, Optional

from ..errors import GenerateError
from ..validators.validators import MAX_VARIABLE_LENGTH, validate_text

logger = logging.getLogger(__name__)

Bits = List[int]


def to_bits(patterns: Iterable[str]) -> Bits:
    """Flatten pattern strings such as ``"1011"`` into a list of ints."""
    bits: Bits = []
    for pattern in patterns:
        for module in pattern:
            if module == '1':
                bits.append(1)
            elif module == '0':
                bits.append(0)
            else:
                raise GenerateError(f"Invalid module {module!r} in pattern {pattern!r}")
    return bits


def bits_to_string(bits: Iterable[int]) -> str:
    """Collapse a bit sequence into a string, e.g. ``[1, 0, 1]`` -> ``"101"``."""
    return ''.join('1' if bit else '0' for bit in bits)


class Symbology:
    """
    Base class for symbology encoders.

    Class attributes:
        name: Human-readable symbology name
        min_length: Minimum input length (inclusive)
        max_length: Maximum input length (inclusive), None for unbounded
        charset: Accepted input characters
    """

    name: ClassVar[str] = "Barcode"
    min_length: ClassVar[int] = 1
    max_length: ClassVar[Optional[int]] = MAX_VARIABLE_LENGTH
    charset: ClassVar[AbstractSet[str]] = frozenset()

    @classmethod
    def validate(cls, text: str) -> str:
        """Apply the symbology's length and character rules to raw input."""
        return validate_text(text, cls.name, cls.min_length, cls.max_length, cls.charset)

    def _set(self, attribute: str, value) -> None:
        # Derived fields on frozen dataclasses are assigned once, in __post_init__
        object.__setattr__(self, attribute, value)

    def _patterns(self) -> List[str]:
        raise NotImplementedError

    def encode(self) -> Bits:
        """
        Encode the barcode.

        Returns:
            List of binary digits, 1 for a bar module and 0 for a space module
        """
        bits = to_bits(self._patterns())
        logger.debug("Encoded %s into %d modules", self.name, len(bits))
        return bits

    def encode_string(self) -> str:
        """Encode the barcode and collapse the result into a "1011..." string."""
        return bits_to_string(self.encode())
