"""
Rendering configuration shared by all output formatters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

from ..errors import ConversionError

# Largest raster or page dimension, in pixels or points
MAX_DIMENSION = 65535


@dataclass(frozen=True)
class Color:
    """An RGBA color with 8-bit channels."""
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ConversionError(f"Color channel out of range: {channel}")

    @classmethod
    def black(cls) -> "Color":
        return cls(0, 0, 0)

    @classmethod
    def white(cls) -> "Color":
        return cls(255, 255, 255)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse ``"#rrggbb"`` or ``"#rrggbbaa"``."""
        digits = value.lstrip('#')
        if len(digits) not in (6, 8):
            raise ConversionError(f"Invalid hex color: {value!r}")
        try:
            channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError:
            raise ConversionError(f"Invalid hex color: {value!r}") from None
        return cls(*channels)

    @property
    def rgba(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def to_hex(self) -> str:
        """RGB channels as lower-case hex, alpha dropped: ``"ff8800"``."""
        return f"{self.r:02x}{self.g:02x}{self.b:02x}"

    def opacity(self) -> str:
        """Alpha as a two-decimal fraction: ``"1.00"``."""
        return f"{self.a / 255:.2f}"


@dataclass
class RenderOptions:
    """
    Configuration options for rendering.

    Attributes:
        height: Barcode height in rows, pixels or points
        xdim: Width of a single module
        foreground: Bar color
        background: Space color
        xmlns: Optional SVG namespace URI
        dpi: Resolution stored in raster images
    """
    height: int = 10
    xdim: int = 1
    foreground: Color = field(default_factory=Color.black)
    background: Color = field(default_factory=Color.white)
    xmlns: Optional[str] = None
    dpi: int = 300

    def validate(self) -> None:
        if self.height <= 0 or self.xdim <= 0:
            raise ConversionError(
                f"Height and xdim must be positive, got {self.height} and {self.xdim}"
            )
        if self.height > MAX_DIMENSION:
            raise ConversionError(f"Height {self.height} exceeds {MAX_DIMENSION}")

    def width_for(self, bits: Sequence[int]) -> int:
        width = len(bits) * self.xdim
        if width > MAX_DIMENSION:
            raise ConversionError(f"Rendered width {width} exceeds {MAX_DIMENSION}")
        return width


def check_bits(bits: Sequence[int]) -> List[int]:
    """
    Make sure ``bits`` only holds 0 and 1.

    Raises:
        ConversionError: On any other value
    """
    checked = list(bits)
    for i, bit in enumerate(checked):
        if bit not in (0, 1):
            raise ConversionError(f"Invalid module value {bit!r} at index {i}")
    return checked


def bar_runs(bits: Sequence[int]) -> Iterator[Tuple[int, int]]:
    """Yield ``(start, length)`` for every run of consecutive bar modules."""
    start = None
    for i, bit in enumerate(bits):
        if bit and start is None:
            start = i
        elif not bit and start is not None:
            yield start, i - start
            start = None
    if start is not None:
        yield start, len(bits) - start
