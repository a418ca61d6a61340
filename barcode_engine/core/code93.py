"""
Code93 encoder.

Code93 is a continuous, variable-length symbology that is denser than
Code39. Two check characters are always appended: C (weights wrap at 20)
and K (computed over data plus C, weights wrap at 15). Only the basic
character set is supported; the full-ASCII shift characters are available
as the placeholders ( ) [ ].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, FrozenSet, List, Tuple

from .base import Symbology
from ..errors import GenerateError
from ..tables import CODE93_CHARS, CODE93_GUARD, CODE93_TERMINATOR
from ..validators.checksums import weighted_checksum

ALPHABET: Tuple[str, ...] = tuple(c for c, _ in CODE93_CHARS)
PATTERNS: Dict[str, str] = dict(CODE93_CHARS)

C_WEIGHT_THRESHOLD = 20
K_WEIGHT_THRESHOLD = 15


def c_checksum(data: str) -> str:
    return weighted_checksum(data, ALPHABET, C_WEIGHT_THRESHOLD)


def k_checksum(data: str, c_check: str) -> str:
    return weighted_checksum(data + c_check, ALPHABET, K_WEIGHT_THRESHOLD)


@dataclass(frozen=True)
class Code93(Symbology):
    """The Code93 barcode type."""
    data: str

    name: ClassVar[str] = "Code93"
    charset: ClassVar[FrozenSet[str]] = frozenset(ALPHABET)

    def __post_init__(self) -> None:
        self.validate(self.data)

    @property
    def checksums(self) -> Tuple[str, str]:
        """The (C, K) check characters."""
        c_check = c_checksum(self.data)
        return c_check, k_checksum(self.data, c_check)

    @staticmethod
    def _char_encoding(c: str) -> str:
        try:
            return PATTERNS[c]
        except KeyError:
            raise GenerateError(f"Unknown Code93 character: {c!r}") from None

    def _patterns(self) -> List[str]:
        chars = list(self.data) + list(self.checksums)
        return [
            CODE93_GUARD,
            *(self._char_encoding(c) for c in chars),
            CODE93_GUARD,
            CODE93_TERMINATOR,
        ]
