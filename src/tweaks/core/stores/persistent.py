"""Value store persisted through a string backend."""

from __future__ import annotations

from typing import Any, Optional

from tweaks.core.converters import ConversionError, SymmetricConverting
from tweaks.core.utils.logger import log_debug, log_warning

from .backends import StringBackend, get_default_backend
from .base import UNSET, V, ValueStore

DEFAULT_NAMESPACE = "default"


class PersistentStore(ValueStore[V]):
    """
    Bridges typed values to a string backend with a symmetric converter.

    Storage keys are ``"<namespace>.<key>"``. Nothing is cached: every call
    goes to the backend. Conversion failures never escape: an undecodable
    string reads as absent, an unencodable value is not written.
    """

    def __init__(
        self,
        converter: SymmetricConverting[V, str],
        backend: Optional[StringBackend] = None,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        self.converter = converter
        self._backend = backend
        self.namespace = namespace

    def __repr__(self) -> str:
        return f"PersistentStore(namespace={self.namespace!r}, backend={self.backend!r})"

    @property
    def backend(self) -> StringBackend:
        # Resolved lazily so definitions can be declared before config is loaded.
        if self._backend is None:
            self._backend = get_default_backend()
        return self._backend

    def storage_key(self, key: str) -> str:
        return f"{self.namespace}.{key}"

    def get(self, key: str, default: Any = None) -> Any:
        storage_key = self.storage_key(key)
        raw = self.backend.read_string(storage_key)
        if raw is None:
            return default
        try:
            return self.converter.decoding.convert(raw)
        except ConversionError as e:
            log_debug("STORE", f"Ignoring undecodable value for {storage_key}: {e}")
            return default

    def set(self, key: str, value: Any) -> bool:
        if value is UNSET:
            self.delete(key)
            return True
        storage_key = self.storage_key(key)
        try:
            encoded = self.converter.encoding.convert(value)
        except ConversionError as e:
            log_warning("STORE", f"Skipped write of unencodable value for {storage_key}: {e}")
            return False
        self.backend.write_string(storage_key, encoded)
        return True

    def delete(self, key: str) -> None:
        self.backend.delete_key(self.storage_key(key))
