"""
Code39 encoder.

Code39 ("3 of 9") is a discrete, variable-length symbology used by the
US Department of Defense and widely outside retail. The modulo-43 check
character is optional and only added when the caller asks for it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, FrozenSet, List, Tuple

from .base import Symbology
from ..errors import GenerateError
from ..tables import CODE39_CHARS, CODE39_GUARD, CODE39_SEPARATOR
from ..validators.checksums import modulo_43

ALPHABET: Tuple[str, ...] = tuple(c for c, _ in CODE39_CHARS)
PATTERNS: Dict[str, str] = dict(CODE39_CHARS)


@dataclass(frozen=True)
class Code39(Symbology):
    """
    The Code39 barcode type.

    Attributes:
        data: Validated input
        checksum: Append a modulo-43 check character
    """
    data: str
    checksum: bool = False

    name: ClassVar[str] = "Code39"
    charset: ClassVar[FrozenSet[str]] = frozenset(ALPHABET)

    def __post_init__(self) -> None:
        self.validate(self.data)

    @classmethod
    def with_checksum(cls, data: str) -> "Code39":
        """Create a barcode with an appended modulo-43 check character."""
        return cls(data, checksum=True)

    @property
    def checksum_char(self) -> str:
        return modulo_43(self.data, ALPHABET)

    @staticmethod
    def _char_encoding(c: str) -> str:
        try:
            return PATTERNS[c]
        except KeyError:
            raise GenerateError(f"Unknown Code39 character: {c!r}") from None

    def _patterns(self) -> List[str]:
        chars = list(self.data)
        if self.checksum:
            chars.append(self.checksum_char)

        # Characters are separated by a single narrow space
        patterns = [CODE39_GUARD, CODE39_SEPARATOR]
        for c in chars:
            patterns.append(self._char_encoding(c))
            patterns.append(CODE39_SEPARATOR)
        patterns.append(CODE39_GUARD)
        return patterns
