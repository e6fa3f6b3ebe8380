"""Configuration section classes."""

from __future__ import annotations

from dataclasses import dataclass

from tweaks.core.utils.logger import LOG_LEVELS
from tweaks.core.utils.paths import DEFAULT_STORE_PATH


@dataclass
class StorageConfig:
    """Where persistent overrides live."""

    namespace: str = "default"
    path: str = DEFAULT_STORE_PATH

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Normalize storage settings (warn + default on invalid)."""
        from tweaks.core.utils.logger import log_warning

        namespace = str(self.namespace or "").strip()
        if not namespace:
            log_warning("CONFIG", "Empty storage.namespace, using 'default'")
            namespace = "default"
        self.namespace = namespace

        path = str(self.path or "").strip()
        if not path:
            log_warning("CONFIG", f"Empty storage.path, using '{DEFAULT_STORE_PATH}'")
            path = DEFAULT_STORE_PATH
        self.path = path


@dataclass
class LoggingConfig:
    """Logging settings for the tweaks logger."""

    level: str = "WARNING"
    file: str = ""
    log_overrides: bool = True

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        from tweaks.core.utils.logger import log_warning

        level = str(self.level).strip().upper()
        if level not in LOG_LEVELS:
            log_warning("CONFIG", f"Invalid logging.level '{self.level}', using 'WARNING'")
            level = "WARNING"
        self.level = level
