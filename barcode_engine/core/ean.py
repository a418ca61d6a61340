"""
EAN-13, EAN-8 and UPC-A encoders.

Retail symbologies built from the same three digit tables (left odd
parity, left even parity, right side) and the same guards. The check digit
is always computed; callers may also pass it as the last digit, in which
case it must match.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar, FrozenSet, List, Tuple

from .base import Symbology
from ..errors import ChecksumError
from ..tables import (
    DIGITS, EAN13_PARITY, EAN_ENCODINGS, EAN_LEFT_GUARD, EAN_LEFT_ODD,
    EAN_MIDDLE_GUARD, EAN_RIGHT, EAN_RIGHT_GUARD,
)
from ..validators.checksums import modulo_10

logger = logging.getLogger(__name__)


def char_encoding(side: int, digit: int) -> str:
    return EAN_ENCODINGS[side][digit]


@dataclass(frozen=True)
class _RetailCode(Symbology):
    """
    Shared construction for fixed-length retail codes.

    Attributes:
        data: Validated input, with or without check digit
        digits: Data digits, without check digit
        check_digit: Computed modulo-10 check digit
    """
    data: str
    digits: Tuple[int, ...] = field(init=False, repr=False)
    check_digit: int = field(init=False)

    charset: ClassVar[FrozenSet[str]] = DIGITS
    # Number of digits before the check digit
    data_length: ClassVar[int] = 12
    even_start: ClassVar[bool] = True

    def __post_init__(self) -> None:
        text = self._normalize(self.validate(self.data))
        digits = tuple(int(c) for c in text)
        payload = digits[:self.data_length]
        check = modulo_10(payload, self.even_start)

        if len(digits) > self.data_length and digits[-1] != check:
            raise ChecksumError(
                f"{self.name} check digit should be {check}, got {digits[-1]}",
                data=self.data,
            )

        logger.debug("%s check digit for %s is %d", self.name, self.data, check)
        self._set("digits", payload)
        self._set("check_digit", check)

    def _normalize(self, text: str) -> str:
        return text

    @property
    def full_digits(self) -> Tuple[int, ...]:
        """Data digits followed by the check digit."""
        return (*self.digits, self.check_digit)

    def __str__(self) -> str:
        return ''.join(str(d) for d in self.full_digits)


@dataclass(frozen=True)
class EAN13(_RetailCode):
    """
    The EAN-13 barcode type.

    The first digit (number system) is not encoded as bars; it selects the
    parity of the next five digits.
    """

    name: ClassVar[str] = "EAN-13"
    min_length: ClassVar[int] = 12
    max_length: ClassVar[int] = 13

    @property
    def number_system_digit(self) -> int:
        return self.digits[0]

    @property
    def parity(self) -> Tuple[int, ...]:
        return EAN13_PARITY[self.number_system_digit]

    def _left_payload(self) -> List[str]:
        patterns = [char_encoding(EAN_LEFT_ODD, self.digits[1])]
        for side, digit in zip(self.parity, self.digits[2:7]):
            patterns.append(char_encoding(side, digit))
        return patterns

    def _right_payload(self) -> List[str]:
        return [char_encoding(EAN_RIGHT, d) for d in self.digits[7:]]

    def _patterns(self) -> List[str]:
        return [
            EAN_LEFT_GUARD,
            *self._left_payload(),
            EAN_MIDDLE_GUARD,
            *self._right_payload(),
            char_encoding(EAN_RIGHT, self.check_digit),
            EAN_RIGHT_GUARD,
        ]


Bookland = EAN13
JAN = EAN13


@dataclass(frozen=True)
class UPCA(EAN13):
    """
    The UPC-A barcode type.

    Encoded as the EAN-13 of the data with a leading zero.
    """

    name: ClassVar[str] = "UPC-A"
    min_length: ClassVar[int] = 11
    max_length: ClassVar[int] = 12

    def _normalize(self, text: str) -> str:
        return '0' + text


@dataclass(frozen=True)
class EAN8(_RetailCode):
    """The EAN-8 barcode type."""

    name: ClassVar[str] = "EAN-8"
    min_length: ClassVar[int] = 7
    max_length: ClassVar[int] = 8
    data_length: ClassVar[int] = 7
    even_start: ClassVar[bool] = False

    def _patterns(self) -> List[str]:
        return [
            EAN_LEFT_GUARD,
            *(char_encoding(EAN_LEFT_ODD, d) for d in self.digits[:4]),
            EAN_MIDDLE_GUARD,
            *(char_encoding(EAN_RIGHT, d) for d in self.digits[4:]),
            char_encoding(EAN_RIGHT, self.check_digit),
            EAN_RIGHT_GUARD,
        ]
