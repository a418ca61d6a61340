"""
Code128 encoder.

Code128 is a continuous, high-density symbology with three alphabets:

- A: upper-case letters, digits, punctuation and ASCII control codes
- B: upper- and lower-case letters, digits and punctuation
- C: digit pairs 00-99, packed two digits per symbol

The encoder does not pick alphabets for you. The caller chooses the start
alphabet and may switch mid-stream with the control characters below.

Control characters:
    À (U+00C0)  switch to / start with alphabet A
    Ɓ (U+0181)  switch to / start with alphabet B
    Ć (U+0106)  switch to / start with alphabet C

Function characters:
    Ź (U+0179) FNC1, ź (U+017A) FNC2, Ż (U+017B) FNC3,
    ż (U+017C) FNC4, Ž (U+017D) SHIFT

Example:
    >>> Code128("HELLO", CharacterSet.A).encode_string()[:11]
    '11010000100'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Sequence, Tuple

from .base import Symbology
from ..errors import CharacterError
from ..tables import (
    CODE128_CHARS, CODE128_SET_A, CODE128_SET_B, CODE128_SET_C,
    CODE128_START_A, CODE128_START_B, CODE128_START_C,
    CODE128_STOP, CODE128_TERMINATION, DIGITS,
)
from ..validators.checksums import modulo_103
from ..validators.validators import validate_length

logger = logging.getLogger(__name__)


class CharacterSet(str, Enum):
    """Start alphabet for Code128 data."""
    A = "A"
    B = "B"
    C = "C"
    NONE = "NONE"

    @property
    def control_char(self) -> Optional[str]:
        return _CONTROL_CHARS.get(self)

    @classmethod
    def from_control_char(cls, c: str) -> "CharacterSet":
        for char_set, control in _CONTROL_CHARS.items():
            if control == c:
                return char_set
        raise CharacterError(f"Not a Code128 character set control: {c!r}")


_CONTROL_CHARS: Dict[CharacterSet, str] = {
    CharacterSet.A: CODE128_SET_A,
    CharacterSet.B: CODE128_SET_B,
    CharacterSet.C: CODE128_SET_C,
}

_START_VALUES: Dict[CharacterSet, int] = {
    CharacterSet.A: CODE128_START_A,
    CharacterSet.B: CODE128_START_B,
    CharacterSet.C: CODE128_START_C,
}

_COLUMNS: Dict[CharacterSet, int] = {
    CharacterSet.A: 0,
    CharacterSet.B: 1,
    CharacterSet.C: 2,
}

# Per-alphabet reverse lookup: member -> symbol value
_LOOKUP: Dict[CharacterSet, Dict[str, int]] = {
    char_set: {row[column]: value for value, row in enumerate(CODE128_CHARS)}
    for char_set, column in _COLUMNS.items()
}


def lookup(char_set: CharacterSet, member: str) -> int:
    """
    Find the symbol value of ``member`` in the given alphabet.

    Raises:
        CharacterError: If the alphabet is unset or has no such member
    """
    if char_set is CharacterSet.NONE:
        raise CharacterError("Code128 data must start with a character set")
    try:
        return _LOOKUP[char_set][member]
    except KeyError:
        raise CharacterError(
            f"Character {member!r} is not in Code128 alphabet {char_set.value}"
        ) from None


def tokenize(text: str) -> List[int]:
    """
    Turn Code128 input into symbol values, start symbol included.

    The first character must be one of the alphabet control characters; it
    selects the start symbol. Later control characters emit the switch
    symbol of the alphabet active at that point, then change alphabet.
    In alphabet C digits are consumed in pairs. A function character
    between the two digits of a pair is emitted first and the pair is
    kept.

    Args:
        text: Input with a leading control character

    Returns:
        Symbol values without checksum and stop

    Raises:
        CharacterError: On a missing start, an unmapped character, or a
            digit left unpaired in alphabet C
    """
    values: List[int] = []
    char_set = CharacterSet.NONE
    carry: Optional[str] = None

    for c in text:
        if c in (CODE128_SET_A, CODE128_SET_B, CODE128_SET_C):
            if not values:
                char_set = CharacterSet.from_control_char(c)
                values.append(_START_VALUES[char_set])
                continue
            if carry is not None:
                raise CharacterError(
                    "Unpaired digit before Code128 character set switch",
                    data=text,
                )
            values.append(lookup(char_set, c))
            char_set = CharacterSet.from_control_char(c)
        elif char_set is CharacterSet.C and c in DIGITS:
            if carry is None:
                carry = c
            else:
                values.append(lookup(char_set, carry + c))
                carry = None
        else:
            values.append(lookup(char_set, c))

    if carry is not None:
        raise CharacterError("Unpaired trailing digit in Code128 alphabet C", data=text)
    return values


@dataclass(frozen=True)
class Code128(Symbology):
    """
    The Code128 barcode type.

    Attributes:
        data: Raw input, may contain control and function characters
        character_set: Start alphabet, must be given. With
            ``CharacterSet.NONE`` the data itself must begin with a control
            character ("ÀHELLO").
        values: Symbol values from start symbol to last data symbol
    """
    data: str
    character_set: Optional[CharacterSet] = None
    values: Tuple[int, ...] = field(init=False, repr=False)

    name: ClassVar[str] = "Code128"
    min_length: ClassVar[int] = 2
    max_length: ClassVar[Optional[int]] = None

    def __post_init__(self) -> None:
        if not isinstance(self.data, str):
            raise CharacterError(
                f"{self.name} data must be a string, got {type(self.data).__name__}"
            )
        validate_length(self.data, self.name, self.min_length, self.max_length)

        if self.character_set is None:
            raise CharacterError(
                "Code128 needs a start character set (A, B, C or NONE)",
                data=self.data,
            )
        char_set = CharacterSet(self.character_set)
        text = self.data
        if char_set is not CharacterSet.NONE:
            text = char_set.control_char + text
        elif text[0] not in _CONTROL_CHARS.values():
            raise CharacterError(
                "Code128 data without a character set must start with À, Ɓ or Ć",
                data=self.data,
            )

        values = tuple(tokenize(text))
        logger.debug("Tokenized %d Code128 symbols", len(values))
        self._set("character_set", char_set)
        self._set("values", values)

    @property
    def checksum_value(self) -> int:
        return modulo_103(self.values)

    @staticmethod
    def _value_encoding(value: int) -> str:
        return CODE128_CHARS[value][3]

    def _patterns(self) -> List[str]:
        symbols: Sequence[int] = (*self.values, self.checksum_value)
        return [
            *(self._value_encoding(v) for v in symbols),
            CODE128_STOP,
            CODE128_TERMINATION,
        ]
