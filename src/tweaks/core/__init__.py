"""Core engine: converters, stores, definitions and the tweak registry."""
