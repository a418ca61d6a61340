"""
Lookup of encoders by symbology name.

Used by the CLI and by callers that pick a symbology at runtime.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

from .base import Symbology
from .codabar import Codabar
from .code11 import Code11
from .code39 import Code39
from .code93 import Code93
from .code128 import CharacterSet, Code128
from .ean import EAN13, EAN8, UPCA
from .ean_supp import EANSupplemental
from .two_of_five import TwoOfFive

SYMBOLOGIES: Dict[str, Callable[..., Symbology]] = {
    "codabar": Codabar,
    "code11": Code11,
    "usd8": Code11,
    "code39": Code39,
    "code93": Code93,
    "code128": Code128,
    "ean13": EAN13,
    "bookland": EAN13,
    "jan": EAN13,
    "ean8": EAN8,
    "upca": UPCA,
    "ean2": EANSupplemental,
    "ean5": EANSupplemental,
    "ean_supp": EANSupplemental,
    "itf": TwoOfFive.interleaved,
    "stf": TwoOfFive.standard,
}

# Options each symbology understands; anything else is rejected
_OPTIONS: Dict[Callable[..., Symbology], frozenset] = {
    Code39: frozenset({"checksum"}),
    Code128: frozenset({"character_set"}),
}


def available_symbologies() -> List[str]:
    return sorted(SYMBOLOGIES)


def encoder_for(symbology: str, text: str, **options: Any) -> Symbology:
    """
    Build the encoder registered under ``symbology``.

    Args:
        symbology: Case-insensitive name, e.g. ``"ean13"`` or ``"code128"``
        text: Raw input data
        **options: ``checksum`` for Code39, ``character_set`` for Code128
            (required there).
            Options set to None are ignored.

    Returns:
        A constructed, validated encoder

    Raises:
        ValueError: Unknown symbology name or unsupported option
        BarcodeError: If the data is rejected by the symbology

    Example:
        >>> encoder_for("code128", "HELLO", character_set="A").encode()[:3]
        [1, 1, 0]
    """
    key = symbology.strip().lower().replace("-", "")
    try:
        factory = SYMBOLOGIES[key]
    except KeyError:
        raise ValueError(
            f"Unknown symbology {symbology!r}, expected one of: "
            f"{', '.join(available_symbologies())}"
        ) from None

    options = {k: v for k, v in options.items() if v is not None}
    unsupported = set(options) - _OPTIONS.get(factory, frozenset())
    if unsupported:
        raise ValueError(
            f"Unsupported options for {symbology}: {', '.join(sorted(unsupported))}"
        )

    character_set = options.get("character_set")
    if isinstance(character_set, str) and not isinstance(character_set, CharacterSet):
        options["character_set"] = CharacterSet(character_set.upper())

    return factory(text, **options)
