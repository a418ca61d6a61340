"""
EAN-2 and EAN-5 supplemental add-ons.

Supplementals are printed to the right of an EAN-13 or UPC-A symbol and
carry issue numbers (EAN-2) or suggested prices (EAN-5). Neither prints a
check digit; parity of the digits carries it instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, FrozenSet, List, Tuple

from .base import Symbology
from ..errors import LengthError
from ..tables import (
    DIGITS, EAN2_PARITY, EAN5_PARITY, EAN_ENCODINGS,
    EAN_SUPP_LEFT_GUARD, EAN_SUPP_SEPARATOR,
)
from ..validators.checksums import ean5_checksum

EAN2 = "EAN2"
EAN5 = "EAN5"


@dataclass(frozen=True)
class EANSupplemental(Symbology):
    """
    The EAN-2 / EAN-5 supplemental barcode type.

    Attributes:
        data: Validated input of 2 or 5 digits
        digits: Input as ints
    """
    data: str
    digits: Tuple[int, ...] = field(init=False, repr=False)

    name: ClassVar[str] = "EAN supplemental"
    min_length: ClassVar[int] = 2
    max_length: ClassVar[int] = 5
    charset: ClassVar[FrozenSet[str]] = DIGITS

    def __post_init__(self) -> None:
        text = self.validate(self.data)
        if len(text) not in (2, 5):
            raise LengthError(
                f"{self.name} data must be 2 or 5 digits long, got {len(text)}",
                data=self.data,
            )
        self._set("digits", tuple(int(c) for c in text))

    @property
    def kind(self) -> str:
        """Either ``EAN2`` or ``EAN5``."""
        return EAN2 if len(self.digits) == 2 else EAN5

    @property
    def checksum_digit(self) -> int:
        return ean5_checksum(self.digits)

    @property
    def parity(self) -> Tuple[int, ...]:
        if self.kind == EAN2:
            d0, d1 = self.digits
            return EAN2_PARITY[(d0 * 10 + d1) % 4]
        return EAN5_PARITY[self.checksum_digit]

    def _patterns(self) -> List[str]:
        patterns = [EAN_SUPP_LEFT_GUARD]
        for i, (digit, side) in enumerate(zip(self.digits, self.parity)):
            if i:
                patterns.append(EAN_SUPP_SEPARATOR)
            patterns.append(EAN_ENCODINGS[side][digit])
        return patterns
