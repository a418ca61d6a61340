"""
Code11 (USD-8) encoder.

Code11 encodes the decimal digits and the dash and is mainly used in
telecommunications. It is a discrete symbology. A "C" check character is
always appended; data longer than 10 characters also gets a "K" check
character computed over the data plus C.

Published references disagree on whether K should be reduced modulo 9.
Most generators reduce both checks modulo 11, and so does this encoder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, FrozenSet, List, Optional, Tuple

from .base import Symbology
from ..errors import GenerateError
from ..tables import CODE11_CHARS, CODE11_GUARD, CODE11_SEPARATOR
from ..validators.checksums import weighted_checksum

ALPHABET: Tuple[str, ...] = tuple(c for c, _ in CODE11_CHARS)
PATTERNS: Dict[str, str] = dict(CODE11_CHARS)

C_WEIGHT_THRESHOLD = 10
K_WEIGHT_THRESHOLD = 9
# K is only appended beyond this many data characters
K_CHECKSUM_MIN_LENGTH = 10


def c_checksum(data: str) -> str:
    """Calculate the C check character."""
    return weighted_checksum(data, ALPHABET, C_WEIGHT_THRESHOLD)


def k_checksum(data: str, c_check: str) -> str:
    """Calculate the K check character over the data extended with C."""
    return weighted_checksum(data + c_check, ALPHABET, K_WEIGHT_THRESHOLD)


@dataclass(frozen=True)
class Code11(Symbology):
    """The Code11 barcode type."""
    data: str

    name: ClassVar[str] = "Code11"
    charset: ClassVar[FrozenSet[str]] = frozenset(ALPHABET)

    def __post_init__(self) -> None:
        self.validate(self.data)

    @property
    def c_checksum(self) -> str:
        return c_checksum(self.data)

    @property
    def k_checksum(self) -> Optional[str]:
        if len(self.data) <= K_CHECKSUM_MIN_LENGTH:
            return None
        return k_checksum(self.data, self.c_checksum)

    @staticmethod
    def _char_encoding(c: str) -> str:
        try:
            return PATTERNS[c]
        except KeyError:
            raise GenerateError(f"Unknown Code11 character: {c!r}") from None

    def _payload(self) -> List[str]:
        chars = list(self.data)
        chars.append(self.c_checksum)
        k_check = self.k_checksum
        if k_check is not None:
            chars.append(k_check)

        patterns: List[str] = []
        for c in chars:
            patterns.append(self._char_encoding(c))
            patterns.append(CODE11_SEPARATOR)
        return patterns

    def _patterns(self) -> List[str]:
        return [CODE11_GUARD, CODE11_SEPARATOR, *self._payload(), CODE11_GUARD]


USD8 = Code11
