"""Test doubles and sample types shared across the suite."""

from enum import Enum
from typing import Dict, List, Optional, Tuple

from tweaks.core.stores.backends import StringBackend


class Flavor(Enum):
    VANILLA = "vanilla"
    CHOCOLATE = "chocolate"
    MINT = "mint"


class Level(Enum):
    LOW = 1
    MEDIUM = 2
    HIGH = 3


class RecordingBackend(StringBackend):
    """Fake backend that records every key it is asked for."""

    def __init__(self) -> None:
        self.values: Dict[str, str] = {}
        self.calls: List[Tuple[str, str]] = []

    def read_string(self, key: str) -> Optional[str]:
        self.calls.append(("read", key))
        return self.values.get(key)

    def write_string(self, key: str, value: str) -> None:
        self.calls.append(("write", key))
        self.values[key] = value

    def delete_key(self, key: str) -> None:
        self.calls.append(("delete", key))
        self.values.pop(key, None)

    def keys(self) -> List[str]:
        return sorted(self.values)

    @property
    def writes(self) -> List[str]:
        return [key for op, key in self.calls if op in ("write", "delete")]
