"""Command-line interface for inspecting and overriding tweaks."""
