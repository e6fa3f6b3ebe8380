"""
Paired encode/decode converters and the built-in converter library.

A SymmetricConverting bundles ``encoding: Decoded -> Encoded`` with
``decoding: Encoded -> Decoded``. Nothing enforces that the two invert each
other; the library converters below document where they do not.

String formats:
- description: ``true``/``false``, decimal integers, ``str(float)``, canonical UUIDs
- raw_value: the enum member's raw value in its description form
- array: encoded elements joined by ``,`` (no escaping; decode is lossy)
- optional: ``nil`` for None, ``?`` + wrapped encoding otherwise
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from .converting import ConversionError, Converting, describe

D = TypeVar("D")
E = TypeVar("E")
T = TypeVar("T")

NIL = "nil"
OPTIONAL_MARKER = "?"
ARRAY_SEPARATOR = ","

_INT_RE = re.compile(r"[+-]?\d+")
_FAILED: Any = object()


@dataclass(frozen=True)
class SymmetricConverting(Generic[D, E]):
    """Encoding and decoding converters between a typed value and its encoded form."""

    encoding: Converting[D, E]
    decoding: Converting[E, D]

    @classmethod
    def from_functions(
        cls, encoding: Callable[[D], E], decoding: Callable[[E], D]
    ) -> "SymmetricConverting[D, E]":
        return cls(Converting(encoding), Converting(decoding))

    def encode(self, value: D) -> E:
        return self.encoding.convert(value)

    def decode(self, encoded: E) -> D:
        return self.decoding.convert(encoded)


def identity() -> SymmetricConverting[Any, Any]:
    return SymmetricConverting(Converting.identity(), Converting.identity())


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ConversionError(f"not a boolean: {text!r}", text)


def _parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ConversionError(f"not an integer: {text!r}", text)
    return int(text)


def _parse_float(text: str) -> float:
    if text != text.strip() or not text:
        raise ConversionError(f"not a number: {text!r}", text)
    return float(text)


_PARSERS: Dict[type, Callable[[str], Any]] = {
    bool: _parse_bool,
    int: _parse_int,
    float: _parse_float,
    str: str,
    uuid.UUID: uuid.UUID,
}


def description(
    value_type: Type[T], parse: Optional[Callable[[str], T]] = None
) -> SymmetricConverting[T, str]:
    """
    Text form of a value and a parser that inverts it.

    Built-in parsers exist for bool, int, float, str and uuid.UUID. Any other
    type is parsed by calling the type on the text unless ``parse`` is given.
    Encoding raises ConversionError for values that are not instances of
    ``value_type`` (bools are not numbers here; ints are accepted as floats),
    and decoding raises it when the parser rejects the text.
    """
    parser = parse or _PARSERS.get(value_type) or value_type

    def _encode(value: T) -> str:
        if not _is_instance(value, value_type):
            raise ConversionError(
                f"expected {value_type.__name__}, got {type(value).__name__}: {value!r}", value
            )
        if value_type is float:
            return describe(float(value))
        return describe(value)

    return SymmetricConverting(Converting(_encode), Converting(parser))


def _is_instance(value: Any, value_type: type) -> bool:
    if value_type is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if value_type is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, value_type)


def raw_value(enum_type: Type[Enum]) -> SymmetricConverting[Enum, str]:
    """Closed-set converter keyed by each member's raw value."""

    def _raw(member: Enum) -> Converting[Any, str]:
        return description(type(member.value)).encoding

    def _encode(member: Enum) -> str:
        if not isinstance(member, enum_type):
            raise ConversionError(f"not a {enum_type.__name__} member: {member!r}", member)
        return _raw(member).convert(member.value)

    def _decode(text: str) -> Enum:
        for member in enum_type:
            if _raw(member).convert(member.value, _FAILED) == text:
                return member
        raise ConversionError(f"no {enum_type.__name__} member with raw value {text!r}", text)

    return SymmetricConverting(Converting(_encode), Converting(_decode))


def array(element: SymmetricConverting[T, str]) -> SymmetricConverting[List[T], str]:
    """
    Comma-joined list converter.

    Elements that fail to encode are left out. Decoding skips empty pieces and
    silently drops pieces that fail to decode, so an element whose encoding
    contains a comma does not round-trip.
    """

    def _encode(values: List[T]) -> str:
        encoded = (element.encoding.convert(value, _FAILED) for value in values)
        return ARRAY_SEPARATOR.join(piece for piece in encoded if piece is not _FAILED)

    def _decode(text: str) -> List[T]:
        decoded = (
            element.decoding.convert(piece, _FAILED)
            for piece in text.split(ARRAY_SEPARATOR)
            if piece
        )
        return [value for value in decoded if value is not _FAILED]

    return SymmetricConverting(Converting(_encode), Converting(_decode))


def optional(wrapped: SymmetricConverting[T, str]) -> SymmetricConverting[Optional[T], str]:
    """
    Optional converter with a presence marker.

    None encodes as ``nil``; a present value as ``?`` followed by the wrapped
    encoding, so a present string "nil" stays distinguishable from absence.
    """

    def _encode(value: Optional[T]) -> str:
        if value is None:
            return NIL
        return OPTIONAL_MARKER + wrapped.encoding.convert(value)

    def _decode(text: str) -> Optional[T]:
        if text == NIL:
            return None
        if text.startswith(OPTIONAL_MARKER):
            return wrapped.decoding.convert(text[len(OPTIONAL_MARKER):])
        raise ConversionError(f"missing optional marker: {text!r}", text)

    return SymmetricConverting(Converting(_encode), Converting(_decode))
