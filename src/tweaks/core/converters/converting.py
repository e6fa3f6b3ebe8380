"""Single-direction, fallible, composable value converters."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

COULD_NOT_CONVERT = "could_not_convert"

# Exceptions a wrapped callable may raise that mean "this input cannot be
# represented"; they are normalized into ConversionError.
_CONVERSION_FAILURES = (ValueError, TypeError, KeyError, AttributeError, UnicodeError)

_NO_FALLBACK: Any = object()


class TweaksError(Exception):
    """Base class for errors raised by the tweaks package."""


class ConversionError(TweaksError):
    """Raised by a converter that cannot represent its input."""

    def __init__(self, message: str = "could not convert", value: Any = None):
        super().__init__(message)
        self.message = message
        self.kind = COULD_NOT_CONVERT
        self.value = value


class Converting(Generic[A, B]):
    """
    Wraps a function ``A -> B`` that may fail.

    ``convert(value)`` raises ConversionError on failure; ``convert(value,
    fallback)`` returns the fallback instead.
    """

    __slots__ = ("_convert",)

    def __init__(self, convert: Callable[[A], B]):
        self._convert = convert

    def __repr__(self) -> str:
        name = getattr(self._convert, "__qualname__", type(self._convert).__name__)
        return f"Converting({name})"

    def convert(self, value: A, fallback: B = _NO_FALLBACK) -> B:
        try:
            return self._convert(value)
        except ConversionError:
            if fallback is _NO_FALLBACK:
                raise
            return fallback
        except _CONVERSION_FAILURES as e:
            if fallback is _NO_FALLBACK:
                raise ConversionError(f"could not convert {value!r}: {e}", value) from e
            return fallback

    def __call__(self, value: A) -> B:
        return self.convert(value)

    def pullback(self, transform: Callable[[C], A]) -> "Converting[C, B]":
        """Precompose with ``transform``."""
        return Converting(lambda other: self.convert(transform(other)))

    def chain(self, other: "Converting[B, C]") -> "Converting[A, C]":
        """Postcompose with another converter; either stage may fail."""
        return Converting(lambda value: other.convert(self.convert(value)))

    def map(self, block: Callable[[B], C]) -> "Converting[A, C]":
        """Postcompose with a total function."""
        return Converting(lambda value: block(self.convert(value)))

    @classmethod
    def identity(cls) -> "Converting[A, A]":
        return cls(lambda value: value)

    @classmethod
    def default_value(cls, default: B) -> "Converting[Optional[B], B]":
        """Replace None by ``default``."""
        return cls(lambda value: default if value is None else value)

    @classmethod
    def string(cls, encoding: str = "utf-8") -> "Converting[bytes, Optional[str]]":
        """Decode bytes with a text codec; undecodable input gives None."""

        def _decode(data: bytes) -> Optional[str]:
            try:
                return data.decode(encoding)
            except UnicodeDecodeError:
                return None

        return cls(_decode)

    @classmethod
    def data(cls, encoding: str = "utf-8") -> "Converting[str, Optional[bytes]]":
        """Encode text with a codec; unencodable input gives None."""

        def _encode(text: str) -> Optional[bytes]:
            try:
                return text.encode(encoding)
            except UnicodeEncodeError:
                return None

        return cls(_encode)

    @classmethod
    def description(cls) -> "Converting[Any, str]":
        """Canonical text form; booleans are lowercase."""
        return cls(describe)

    @classmethod
    def stringify(cls) -> "Converting[int, str]":
        return cls(lambda value: str(int(value)))

    @classmethod
    def raw_value(cls) -> "Converting[Enum, Any]":
        return cls(lambda member: member.value)


def describe(value: Any) -> str:
    """Text form used for persistence: ``true``/``false`` for booleans, str() otherwise."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
