"""
The "tweakable" capability: which value types can back a tweak.

A tweakable type has equality and a default SymmetricConverting to and from
str. Built-ins cover bool, int, float, str, uuid.UUID, Color and every Enum
subclass; applications add their own with ``register_tweakable``.
"""

from __future__ import annotations

import uuid
from enum import Enum
from typing import Any, Dict

from tweaks.core.converters import (
    Color,
    SymmetricConverting,
    description,
    hex_color,
    raw_value,
)

_converters: Dict[type, SymmetricConverting[Any, str]] = {
    bool: description(bool),
    int: description(int),
    float: description(float),
    str: description(str),
    uuid.UUID: description(uuid.UUID),
    Color: hex_color,
}


def register_tweakable(value_type: type, converter: SymmetricConverting[Any, str]) -> None:
    """Make ``value_type`` usable as a tweak value (replaces any earlier converter)."""
    _converters[value_type] = converter


def is_tweakable(value_type: type) -> bool:
    try:
        converter_for(value_type)
    except TypeError:
        return False
    return True


def converter_for(value_type: type) -> SymmetricConverting[Any, str]:
    """Default string converter for ``value_type``; TypeError when there is none."""
    converter = _converters.get(value_type)
    if converter is not None:
        return converter
    if isinstance(value_type, type) and issubclass(value_type, Enum):
        return raw_value(value_type)
    for registered, registered_converter in _converters.items():
        # bool is an int subclass; exact matches above take precedence
        if isinstance(value_type, type) and issubclass(value_type, registered):
            return registered_converter
    raise TypeError(f"{getattr(value_type, '__name__', value_type)!s} is not tweakable")
