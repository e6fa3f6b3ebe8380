"""Process-local value store."""

from __future__ import annotations

from typing import Any, Dict

from .base import UNSET, V, ValueStore


class InMemoryStore(ValueStore[V]):
    """Values live in a dict and vanish with the store object."""

    def __init__(self) -> None:
        self._values: Dict[str, V] = {}

    def __repr__(self) -> str:
        return f"InMemoryStore(keys={sorted(self._values)})"

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> bool:
        if value is UNSET:
            self.delete(key)
            return True
        self._values[key] = value
        return True

    def delete(self, key: str) -> None:
        self._values.pop(key, None)
