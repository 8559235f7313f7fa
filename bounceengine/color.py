"""RGBA colours packed in a 32-bit integer."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _check_byte(value: int) -> int:
    if not 0 <= value <= 255:
        raise ValueError(f"colour channel {value} outside 0..255")
    return int(value)


def _float_to_byte(value: float) -> int:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"colour channel {value} outside 0..1")
    return math.floor(value * 255 + 0.5)


@dataclass(frozen=True)
class Color:
    """A colour stored as 0xRRGGBBAA."""

    hex_value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "hex_value", self.hex_value & 0xFFFFFFFF)

    @staticmethod
    def from_rgba(r: int, g: int, b: int, a: int = 255) -> Color:
        """Build a colour from 0..255 channels."""
        r, g, b, a = (_check_byte(channel) for channel in (r, g, b, a))
        return Color(r << 24 | g << 16 | b << 8 | a)

    @staticmethod
    def from_floats(r: float, g: float, b: float, a: float = 1.0) -> Color:
        """Build a colour from normalized 0..1 channels."""
        return Color.from_rgba(*(_float_to_byte(channel) for channel in (r, g, b, a)))

    def r(self) -> int:
        return (self.hex_value >> 24) & 0xFF

    def g(self) -> int:
        return (self.hex_value >> 16) & 0xFF

    def b(self) -> int:
        return (self.hex_value >> 8) & 0xFF

    def a(self) -> int:
        return self.hex_value & 0xFF

    def nr(self) -> float:
        return self.r() / 255

    def ng(self) -> float:
        return self.g() / 255

    def nb(self) -> float:
        return self.b() / 255

    def na(self) -> float:
        return self.a() / 255

    def luminosity(self) -> int:
        """Mean of the red, green and blue channels, truncated."""
        return int((self.r() + self.g() + self.b()) / 3)

    def saturation(self) -> float:
        """(max - min) / max of the colour channels; 0 for black."""
        channels = (self.r(), self.g(), self.b())
        cmax, cmin = max(channels), min(channels)
        return (cmax - cmin) / cmax if cmax else 0.0