"""
Test package marker.

Keeps `tests` importable as a regular package so `tests.helpers` resolves to
this checkout even when another `tests/` directory sits on `sys.path`.
"""
