"""Top-level Tweaks configuration."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Any
import json
import os

from dotenv import load_dotenv

from tweaks.core.utils.paths import PROJECT_ROOT

from .sections import LoggingConfig, StorageConfig


def _coerce_bool(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off"}:
            return False
    return value


class TweaksConfig:
    """
    Main configuration class for Tweaks.

    Combines configuration from multiple sources:
    - Default values
    - Configuration file (JSON)
    - Environment variables

    Sections:
    - storage: namespace and file location of persistent overrides
    - logging: level and optional log file
    """

    def __init__(self, config_file: str | None = None):
        """
        Initialize configuration with default values and optional file loading.

        Args:
            config_file: Path to configuration file (JSON format).

        Note:
            Configuration loading order (highest to lowest priority):
            1. Environment variables
            2. Configuration file (if provided)
            3. Default values
        """
        self.storage = StorageConfig()
        self.logging = LoggingConfig()

        if config_file:
            self._load_from_file(config_file)

        self._load_from_env()

    def _load_from_env(self):
        """
        Load configuration from environment variables.

        Supported environment variables:
        - TWEAKS_NAMESPACE: Storage key namespace
        - TWEAKS_STORE_PATH: JSON file holding persistent overrides
        - TWEAKS_LOG_LEVEL: Logging level
        - TWEAKS_LOG_FILE: Log file path
        - TWEAKS_LOG_OVERRIDES: Log override changes (1/true/yes/on or 0/false/no/off)
        """
        namespace = os.getenv("TWEAKS_NAMESPACE")
        if namespace:
            self.storage.namespace = namespace
        store_path = os.getenv("TWEAKS_STORE_PATH")
        if store_path:
            self.storage.path = store_path
        self.storage.validate()

        level = os.getenv("TWEAKS_LOG_LEVEL")
        if level:
            self.logging.level = level
        log_file = os.getenv("TWEAKS_LOG_FILE")
        if log_file:
            self.logging.file = log_file
        log_overrides = os.getenv("TWEAKS_LOG_OVERRIDES")
        if log_overrides:
            coerced = _coerce_bool(log_overrides)
            if isinstance(coerced, bool):
                self.logging.log_overrides = coerced
        self.logging.validate()

    def _load_from_file(self, config_file: str):
        """
        Load configuration from a JSON file.

        The file should have sections matching the configuration classes:
            {
                "storage": {"namespace": "...", "path": "..."},
                "logging": {"level": "INFO", "file": ""}
            }

        Raises:
            ValueError: If the file cannot be read or parsed
        """
        if not os.path.exists(config_file):
            return
        try:
            with open(config_file, encoding="utf-8") as f:
                config_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Could not load config file {config_file}: {e}") from e
        if not isinstance(config_data, dict):
            raise ValueError(f"Config file {config_file} root is not an object")

        for section_name, section in (("storage", self.storage), ("logging", self.logging)):
            values = config_data.get(section_name)
            if not isinstance(values, dict):
                continue
            for key, value in values.items():
                if hasattr(section, key):
                    if key == "log_overrides":
                        value = _coerce_bool(value)
                    setattr(section, key, value)
            section.validate()

    def to_dict(self) -> dict[str, Any]:
        return {
            "storage": asdict(self.storage),
            "logging": asdict(self.logging),
        }

    def save_to_file(self, config_file: str):
        """Save current configuration to a JSON file."""
        Path(config_file).parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)


# Global configuration instance
_config: TweaksConfig | None = None
_env_loaded = False


def _load_repo_dotenv() -> None:
    global _env_loaded
    if _env_loaded:
        return
    _env_loaded = True
    env_path = PROJECT_ROOT / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)


def get_config() -> TweaksConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _load_repo_dotenv()
        _config = TweaksConfig()
    return _config


def set_config(config: TweaksConfig | None):
    """Set (or clear, with None) the global configuration instance."""
    global _config
    _config = config


def load_config(config_file: str) -> TweaksConfig:
    """Load configuration from file and set as global config."""
    _load_repo_dotenv()
    config = TweaksConfig(config_file)
    set_config(config)
    return config
