"""Key-value store abstraction shared by every tweak definition."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

V = TypeVar("V")


class _Unset:
    """Marker for "no value stored"; None is a real value for optional tweaks."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Unset, ())


UNSET: Any = _Unset()


class ValueStore(ABC, Generic[V]):
    """
    Minimal string-keyed store of optional values.

    ``get`` returns ``default`` only when nothing is stored under the key;
    ``set(key, UNSET)`` is the same as ``delete(key)``. ``set`` reports whether
    it changed the store so callers can skip notifications for dropped writes.
    """

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value or ``default``."""

    @abstractmethod
    def set(self, key: str, value: Any) -> bool:
        """Store ``value`` (UNSET removes the key); False when nothing was written."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""

    def contains(self, key: str) -> bool:
        return self.get(key, UNSET) is not UNSET

    def __contains__(self, key: str) -> bool:
        return self.contains(key)
