"""
Tweaks - runtime-overridable application values

Applications register named, categorized values (flags, numbers, strings,
colors, enums, optionals, arrays) whose effective value can be overridden at
runtime and persisted across restarts, while the compiled-in initial value is
always kept.

Package Structure:
- core/converters: composable value <-> string converters
- core/stores: in-memory and persistent value stores, string backends
- core/definition.py: tweak definitions and factories
- core/registry.py: category/section hierarchy and override resolution
- core/view_model.py: the surface rendering strategies use
- cli/: command-line rendering strategy (typer + rich)
"""

__version__ = "0.3.0"

from tweaks.core.converters import (
    Color,
    ConversionError,
    Converting,
    SymmetricConverting,
    TweaksError,
)
from tweaks.core.stores import (
    UNSET,
    InMemoryStore,
    JsonFileBackend,
    MemoryBackend,
    PersistentStore,
    StringBackend,
    ValueStore,
)
from tweaks.core.definition import (
    Tweak,
    TweakAction,
    TweakDefinition,
    TweakKind,
    array_tweak,
    bool_tweak,
    color_tweak,
    float_tweak,
    int_tweak,
    option_tweak,
    optional_tweak,
    string_tweak,
    tweak,
    uuid_tweak,
)
from tweaks.core.registry import (
    TweakHierarchy,
    TweakRegistry,
    get_registry,
    set_registry,
)
from tweaks.core.tweakable import converter_for, register_tweakable
from tweaks.core.view_model import TweakViewModel, view_model_for

__all__ = [
    "Color",
    "ConversionError",
    "Converting",
    "InMemoryStore",
    "JsonFileBackend",
    "MemoryBackend",
    "PersistentStore",
    "StringBackend",
    "SymmetricConverting",
    "Tweak",
    "TweakAction",
    "TweakDefinition",
    "TweakHierarchy",
    "TweakKind",
    "TweakRegistry",
    "TweakViewModel",
    "TweaksError",
    "UNSET",
    "ValueStore",
    "array_tweak",
    "bool_tweak",
    "color_tweak",
    "converter_for",
    "float_tweak",
    "get_registry",
    "int_tweak",
    "option_tweak",
    "optional_tweak",
    "register_tweakable",
    "set_registry",
    "string_tweak",
    "tweak",
    "uuid_tweak",
    "view_model_for",
]
