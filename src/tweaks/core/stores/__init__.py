"""Pluggable storage for tweak overrides."""

from .base import UNSET, ValueStore
from .memory import InMemoryStore
from .backends import (
    BACKEND_SCHEMA_VERSION,
    JsonFileBackend,
    MemoryBackend,
    StringBackend,
    get_default_backend,
    set_default_backend,
)
from .persistent import DEFAULT_NAMESPACE, PersistentStore

__all__ = [
    "BACKEND_SCHEMA_VERSION",
    "DEFAULT_NAMESPACE",
    "InMemoryStore",
    "JsonFileBackend",
    "MemoryBackend",
    "PersistentStore",
    "StringBackend",
    "UNSET",
    "ValueStore",
    "get_default_backend",
    "set_default_backend",
]
