"""Composable converters between typed values and their string form."""

from .converting import (
    COULD_NOT_CONVERT,
    ConversionError,
    Converting,
    TweaksError,
    describe,
)
from .symmetric import (
    SymmetricConverting,
    array,
    description,
    identity,
    optional,
    raw_value,
)
from .color import BLACK_TRANSPARENT, Color, hex_color

__all__ = [
    "BLACK_TRANSPARENT",
    "COULD_NOT_CONVERT",
    "Color",
    "ConversionError",
    "Converting",
    "SymmetricConverting",
    "TweaksError",
    "array",
    "describe",
    "description",
    "hex_color",
    "identity",
    "optional",
    "raw_value",
]
