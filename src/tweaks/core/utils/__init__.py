"""Shared utilities: logging, configuration and filesystem paths."""
