"""
Codabar encoder.

Codabar is a simple, self-checking discrete symbology with no standard
check digit. It is used by parcel carriers, libraries, blood banks and
photo labs. Data normally starts and ends with one of A, B, C or D, but
the encoder does not enforce it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, FrozenSet, List, Tuple

from .base import Symbology
from ..errors import GenerateError
from ..tables import CODABAR_CHARS

# Narrow space between characters
GAP = '0'


@dataclass(frozen=True)
class Codabar(Symbology):
    """
    The Codabar barcode type.

    Attributes:
        data: Validated input
        units: Pattern of every character, in input order
    """
    data: str
    units: Tuple[str, ...] = field(init=False, repr=False)

    name: ClassVar[str] = "Codabar"
    charset: ClassVar[FrozenSet[str]] = frozenset(CODABAR_CHARS)

    def __post_init__(self) -> None:
        text = self.validate(self.data)
        try:
            units = tuple(CODABAR_CHARS[c] for c in text)
        except KeyError as e:
            raise GenerateError(f"Unknown Codabar character: {e}") from e
        self._set("units", units)

    def _patterns(self) -> List[str]:
        patterns: List[str] = []
        for i, unit in enumerate(self.units):
            if i:
                patterns.append(GAP)
            patterns.append(unit)
        return patterns
