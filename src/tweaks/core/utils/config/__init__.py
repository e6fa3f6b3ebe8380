from .sections import LoggingConfig, StorageConfig
from .main import TweaksConfig, get_config, load_config, set_config

__all__ = [
    "LoggingConfig",
    "StorageConfig",
    "TweaksConfig",
    "get_config",
    "load_config",
    "set_config",
]
