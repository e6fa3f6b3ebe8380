"""RGBA colors and their ``#RRGGBBAA`` hex converter."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Tuple

from .converting import Converting
from .symmetric import SymmetricConverting

_HEX_DIGITS = frozenset(string.hexdigits)
_MASK = 0xFF


def _clamp_unit(component: float) -> float:
    return min(1.0, max(0.0, float(component)))


def _to_byte(component: float) -> int:
    return int(round(_clamp_unit(component) * 255))


@dataclass(frozen=True)
class Color:
    """An sRGB color with alpha; every component is in 0.0-1.0."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_rgba255(cls, red: int, green: int, blue: int, alpha: int = 255) -> "Color":
        return cls(red / 255.0, green / 255.0, blue / 255.0, alpha / 255.0)

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        return hex_color.decoding.convert(text)

    def rgba255(self) -> Tuple[int, int, int, int]:
        return (
            _to_byte(self.red),
            _to_byte(self.green),
            _to_byte(self.blue),
            _to_byte(self.alpha),
        )

    @property
    def hex(self) -> str:
        return hex_color.encoding.convert(self)

    def is_close(self, other: "Color", tolerance: float = 1 / 255) -> bool:
        pairs = zip(
            (self.red, self.green, self.blue, self.alpha),
            (other.red, other.green, other.blue, other.alpha),
        )
        return all(abs(a - b) <= tolerance + 1e-9 for a, b in pairs)


BLACK_TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)


def _encode_hex(color: Color) -> str:
    return "#" + "".join(f"{byte:02X}" for byte in color.rgba255())


def _decode_hex(text: str) -> Color:
    # Permissive: anything short of eight leading hex digits is black-transparent.
    text = text.strip()
    if text.startswith("#"):
        text = text[1:]
    digits = ""
    for char in text[:8]:
        if char not in _HEX_DIGITS:
            break
        digits += char
    if len(digits) < 8:
        return BLACK_TRANSPARENT
    value = int(digits, 16)
    return Color.from_rgba255(
        (value >> 24) & _MASK,
        (value >> 16) & _MASK,
        (value >> 8) & _MASK,
        value & _MASK,
    )


hex_color: SymmetricConverting[Color, str] = SymmetricConverting(
    Converting(_encode_hex), Converting(_decode_hex)
)
