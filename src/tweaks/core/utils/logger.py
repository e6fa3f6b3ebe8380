# tweaks/core/utils/logger.py

"""
Logging configuration and utilities for Tweaks.

This module provides centralized logging configuration and utility functions
for consistent error reporting and debugging across all Tweaks modules.

The logging system is designed to provide:
- Consistent log formatting across all modules
- Multiple output destinations (console and file)
- Module-tagged messages ("[STORE] ...", "[REGISTRY] ...")
- Override change tracking

Key Features:
- Global logger instance with lazy initialization
- Standardized log message formats
- Exception tracking and stack traces
"""

import logging
import sys
from typing import Any

# Global logger instance for singleton pattern
_logger: logging.Logger | None = None

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOGGER_NAME = "tweaks"


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL,
    log_file: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Set up logging configuration for Tweaks.

    Initializes the package logger with a console handler and an optional
    file handler. Calling it again replaces the previous handlers.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (optional). If provided, logs will be
                 written to both console and file.
        format_string: Custom log format string (optional).

    Returns:
        Configured logger instance
    """
    global _logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.disabled = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))

    formatter = logging.Formatter(format_string or DEFAULT_LOG_FORMAT)

    # Tweak reads happen inside UI loops; keep the console on stderr so
    # command output on stdout stays clean.
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, level.upper()))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(getattr(logging, level.upper()))
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """
    Get the global logger instance.

    If the logger hasn't been initialized yet, it will be set up
    with default configuration.
    """
    if _logger is None:
        return setup_logging()
    return _logger


def _format(module: str, message: str, context: str = "") -> str:
    formatted = f"[{module.upper()}] {message}"
    if context:
        formatted += f" | Context: {context}"
    return formatted


def log_error(
    module: str, error: str, context: str = "", exception: Exception | None = None
) -> None:
    """
    Log a standardized error message.

    Args:
        module: Name of the module where the error occurred
        error: Error message describing what went wrong
        context: Additional context information (optional)
        exception: Exception object to include stack trace (optional)
    """
    logger = get_logger()
    message = _format(module, error, context)
    if exception:
        logger.error(message, exc_info=exception)
    else:
        logger.error(message)
    for handler in logger.handlers:
        try:
            handler.flush()
        except Exception:
            continue


def log_warning(module: str, warning: str, context: str = "") -> None:
    """
    Log a standardized warning message.

    Warnings indicate potential issues that don't prevent
    execution but should be noted.
    """
    get_logger().warning(_format(module, warning, context))


def log_info(module: str, message: str, context: str = "") -> None:
    """Log a standardized info message."""
    get_logger().info(_format(module, message, context))


def log_debug(module: str, message: str, context: str = "") -> None:
    """Log a standardized debug message."""
    get_logger().debug(_format(module, message, context))


def log_override_change(tweak_id: str, old_value: Any, new_value: Any) -> None:
    """
    Log a tweak override change.

    Args:
        tweak_id: Identifier of the tweak that changed
        old_value: Previous override (or a marker for "no override")
        new_value: New override (or a marker for "no override")
    """
    logger = get_logger()
    logger.info(f"Override changed: {tweak_id} = {old_value!r} -> {new_value!r}")


def reset_logging() -> None:
    """
    Reset the global logger instance.

    This is useful for testing or when you need to reconfigure
    the logging system from scratch.
    """
    global _logger
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    _logger = None
