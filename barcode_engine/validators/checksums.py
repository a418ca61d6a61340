"""
Checksum calculators.

All functions are pure and operate on already-validated units. Passing a
unit that is not part of the given alphabet is a programming error and
raises GenerateError rather than an input error.

Algorithms:
- modulo_10: retail mod-10 used by EAN-13, EAN-8, UPC-A and ITF
- ean5_checksum: odd/even weighted digit used to pick EAN-5 parity
- weighted_checksum: position-weighted sum used by Code11 (C/K) and Code93 (C/K)
- modulo_43: plain index sum used by Code39
- modulo_103: position-weighted sum used by Code128
"""

from __future__ import annotations

from typing import Sequence, Tuple

from ..errors import GenerateError


def modulo_10(digits: Sequence[int], even_start: bool) -> int:
    """
    Calculate a retail modulo-10 check digit.

    Digits at even and odd (0-based) indexes are summed separately. One of
    the two sums is tripled: the odd-index sum when ``even_start`` is True
    (EAN-13 weighting), the even-index sum otherwise (EAN-8, ITF).

    Args:
        digits: Data digits without check digit
        even_start: Weighting direction, see above

    Returns:
        Check digit (0-9)
    """
    evens = sum(digits[0::2])
    odds = sum(digits[1::2])

    if even_start:
        odds *= 3
    else:
        evens *= 3

    return (10 - (odds + evens) % 10) % 10


def ean5_checksum(digits: Sequence[int]) -> int:
    """
    Calculate the EAN-5 supplemental checksum.

    The result is never printed; it only selects the parity pattern of
    the five digits.
    """
    odds = sum(digits[0::2])
    evens = sum(digits[1::2])
    return (odds * 3 + evens * 9) % 10


def _alphabet_index(unit: str, alphabet: Tuple[str, ...]) -> int:
    try:
        return alphabet.index(unit)
    except ValueError:
        raise GenerateError(f"Character not found in table: {unit!r}") from None


def weighted_checksum(
    units: Sequence[str],
    alphabet: Tuple[str, ...],
    weight_threshold: int
) -> str:
    """
    Calculate a position-weighted checksum character.

    Weights count up from 1 starting at the *last* unit and wrap back to 1
    after reaching ``weight_threshold``. Each weight multiplies the unit's
    index in ``alphabet``; the sum modulo the alphabet size indexes the
    checksum character.

    Used with thresholds 10/9 over an 11-character alphabet for Code11 and
    20/15 over the 47-character alphabet for Code93.

    Args:
        units: Validated data characters (optionally extended with a
            previously computed checksum character)
        alphabet: Ordered table characters
        weight_threshold: Largest weight before wrapping

    Returns:
        Checksum character from ``alphabet``
    """
    total = 0
    for position, unit in enumerate(reversed(units), start=1):
        weight = position % weight_threshold or weight_threshold
        total += weight * _alphabet_index(unit, alphabet)

    return alphabet[total % len(alphabet)]


def modulo_43(units: Sequence[str], alphabet: Tuple[str, ...]) -> str:
    """Sum the table indexes of ``units`` modulo 43 and return the character."""
    total = sum(_alphabet_index(unit, alphabet) for unit in units)
    return alphabet[total % len(alphabet)]


def modulo_103(values: Sequence[int]) -> int:
    """
    Calculate the Code128 check value.

    Values include the start symbol. The start symbol and the first data
    symbol both carry weight 1; every following symbol is weighted by its
    position.
    """
    total = sum(value * max(1, position) for position, value in enumerate(values))
    return total % 103
