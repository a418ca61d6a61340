"""
Two-of-five encoders.

Every digit is five elements, two of them wide. Standard 2 of 5 (STF)
draws all five elements as bars separated by narrow spaces. Interleaved
2 of 5 (ITF) draws digits in pairs: the first digit's elements become
bars and the second's the spaces between them. ITF needs an even number
of digits, so a modulo-10 check digit is appended to odd-length data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, FrozenSet, List, Tuple

from .base import Symbology
from ..tables import (
    DIGITS, ITF_START, ITF_STOP, STF_START, STF_STOP, TF_WIDTHS,
)
from ..validators.checksums import modulo_10

WIDE = 'W'

ITF = "ITF"
STF = "STF"


def stf_digit(digit: int) -> str:
    return ''.join('1110' if w == WIDE else '10' for w in TF_WIDTHS[digit])


def itf_pair(bar_digit: int, space_digit: int) -> str:
    modules = []
    for bar, space in zip(TF_WIDTHS[bar_digit], TF_WIDTHS[space_digit]):
        modules.append('111' if bar == WIDE else '1')
        modules.append('000' if space == WIDE else '0')
    return ''.join(modules)


@dataclass(frozen=True)
class TwoOfFive(Symbology):
    """
    The two-of-five barcode type.

    Attributes:
        data: Validated input
        variant: ``ITF`` (interleaved) or ``STF`` (standard)
        digits: Digits to encode, ITF check digit included
    """
    data: str
    variant: str = ITF
    digits: Tuple[int, ...] = field(init=False, repr=False)

    name: ClassVar[str] = "2 of 5"
    charset: ClassVar[FrozenSet[str]] = DIGITS

    def __post_init__(self) -> None:
        if self.variant not in (ITF, STF):
            raise ValueError(f"Unknown two-of-five variant: {self.variant!r}")
        digits = tuple(int(c) for c in self.validate(self.data))
        if self.is_interleaved and len(digits) % 2:
            digits += (modulo_10(digits, False),)
        self._set("digits", digits)

    @classmethod
    def interleaved(cls, data: str) -> "TwoOfFive":
        """Create an Interleaved 2 of 5 (ITF) barcode."""
        return cls(data, variant=ITF)

    @classmethod
    def standard(cls, data: str) -> "TwoOfFive":
        """Create a Standard 2 of 5 (STF) barcode."""
        return cls(data, variant=STF)

    @property
    def is_interleaved(self) -> bool:
        return self.variant == ITF

    def _patterns(self) -> List[str]:
        if self.is_interleaved:
            pairs = zip(self.digits[0::2], self.digits[1::2])
            return [ITF_START, *(itf_pair(a, b) for a, b in pairs), ITF_STOP]
        return [STF_START, *(stf_digit(d) for d in self.digits), STF_STOP]
