"""String-keyed string backends behind PersistentStore."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, List, Optional
import json
import os
import time

from tweaks.core.utils.logger import log_debug, log_warning

BACKEND_SCHEMA_VERSION = 1


class StringBackend(ABC):
    """The persistence boundary: a flat map of string keys to string values."""

    @abstractmethod
    def read_string(self, key: str) -> Optional[str]:
        """Return the stored string, or None when the key is absent."""

    @abstractmethod
    def write_string(self, key: str, value: str) -> None:
        """Store ``value`` under ``key`` (last writer wins)."""

    @abstractmethod
    def delete_key(self, key: str) -> None:
        """Remove ``key``; absent keys are ignored."""

    @abstractmethod
    def keys(self) -> List[str]:
        """All stored keys, sorted."""


class MemoryBackend(StringBackend):
    """Dict-backed backend, used for tests and throwaway sessions."""

    def __init__(self, values: Optional[Dict[str, str]] = None) -> None:
        self.values: Dict[str, str] = dict(values or {})

    def read_string(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def write_string(self, key: str, value: str) -> None:
        self.values[key] = value

    def delete_key(self, key: str) -> None:
        self.values.pop(key, None)

    def keys(self) -> List[str]:
        return sorted(self.values)


@contextmanager
def store_write_lock(path: Path):
    """Lock abstraction (no-op; single-process use only)."""
    yield


def _wrap_values(values: Dict[str, str]) -> Dict[str, Any]:
    return {"schema_version": BACKEND_SCHEMA_VERSION, "values": values}


def _unwrap_values(payload: Any) -> Dict[str, str]:
    if not isinstance(payload, dict):
        raise ValueError("overrides file root is not an object")
    values = payload.get("values", {})
    if not isinstance(values, dict):
        raise ValueError("overrides file 'values' is not an object")
    return {str(key): value for key, value in values.items() if isinstance(value, str)}


class JsonFileBackend(StringBackend):
    """
    Keeps every key in one JSON document.

    Each call re-reads the file, and each write replaces it atomically
    (temp file + rename). A corrupt file is moved aside to
    ``<name>.bak.<timestamp>`` and read as empty.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"JsonFileBackend({str(self.path)!r})"

    def _backup_corrupt(self) -> None:
        ts = time.strftime("%Y%m%d_%H%M%S")
        backup = self.path.with_name(f"{self.path.name}.bak.{ts}")
        try:
            os.replace(self.path, backup)
        except OSError as e:
            log_warning("STORE", f"Could not move corrupt overrides file aside: {e}", str(self.path))
            return
        log_warning("STORE", f"Corrupt overrides file moved to {backup.name}", str(self.path))

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
            return _unwrap_values(payload)
        except (json.JSONDecodeError, UnicodeDecodeError, ValueError):
            self._backup_corrupt()
            return {}

    def _save(self, values: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        payload = _wrap_values(values)
        with store_write_lock(self.path):
            temp_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
            os.replace(temp_path, self.path)

    def read_string(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def write_string(self, key: str, value: str) -> None:
        values = self._load()
        values[key] = value
        self._save(values)
        log_debug("STORE", f"Wrote {key}", str(self.path))

    def delete_key(self, key: str) -> None:
        values = self._load()
        if key not in values:
            return
        del values[key]
        self._save(values)
        log_debug("STORE", f"Deleted {key}", str(self.path))

    def keys(self) -> List[str]:
        return sorted(self._load())


_default_backend: Optional[StringBackend] = None


def get_default_backend() -> StringBackend:
    """Backend used by id-keyed tweak factories; a JSON file from config."""
    global _default_backend
    if _default_backend is None:
        from tweaks.core.utils.config import get_config

        _default_backend = JsonFileBackend(get_config().storage.path)
    return _default_backend


def set_default_backend(backend: Optional[StringBackend]) -> None:
    """Replace (or clear, with None) the default backend."""
    global _default_backend
    _default_backend = backend
