"""
Tweak definitions and the factories that wire them up.

A factory called with an ``id`` binds the definition to a PersistentStore
(the shared default backend unless one is passed), so overrides survive
restarts. Called without an ``id`` it generates a random id and an
InMemoryStore, so overrides last only as long as the process.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, List, Optional, Sequence, Tuple, TypeVar

from tweaks.core.converters import (
    Color,
    ConversionError,
    SymmetricConverting,
    array,
    description,
    hex_color,
    optional,
)
from tweaks.core.stores import (
    InMemoryStore,
    PersistentStore,
    StringBackend,
    ValueStore,
)
from tweaks.core.tweakable import converter_for

V = TypeVar("V")

PERSISTENCY_KEY_PREFIX = "tweaks"


class TweakKind(str, Enum):
    """Hint for rendering strategies; the engine itself treats all kinds alike."""

    TOGGLE = "toggle"
    STEPPER = "stepper"
    SLIDER = "slider"
    TEXT = "text"
    PICKER = "picker"
    OPTIONAL = "optional"
    ARRAY = "array"
    COLOR = "color"
    VALUE = "value"
    ACTION = "action"


class Tweak:
    """Anything the registry can hold: it has an id and a display name."""

    id: str
    name: str

    @property
    def is_action(self) -> bool:
        return False


@dataclass(frozen=True, eq=False)
class TweakDefinition(Tweak, Generic[V]):
    """
    Immutable descriptor of one tweakable value.

    ``converter`` turns the value into text and back for display and input;
    persistent stores carry their own converter for storage.
    """

    id: str
    name: str
    initial_value: V
    store: ValueStore[V]
    converter: SymmetricConverting[V, str]
    kind: TweakKind = TweakKind.VALUE
    options: Tuple[Any, ...] = ()
    value_range: Optional[Tuple[float, float]] = None
    default_for_new: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.store, PersistentStore):
            return
        converter = self.store.converter
        try:
            decoded = converter.decoding.convert(converter.encoding.convert(self.initial_value))
        except ConversionError as e:
            raise TypeError(
                f"store for tweak {self.id!r} cannot hold {type(self.initial_value).__name__} values"
            ) from e
        # Hex colors round to the nearest byte; the type must still survive.
        if decoded != self.initial_value and type(decoded) is not type(self.initial_value):
            raise TypeError(
                f"store for tweak {self.id!r} reads {self.initial_value!r} back as {decoded!r}"
            )

    def __repr__(self) -> str:
        return f"TweakDefinition(id={self.id!r}, name={self.name!r}, initial_value={self.initial_value!r})"

    @property
    def persistency_key(self) -> str:
        """Raw store key for this definition."""
        return f"{PERSISTENCY_KEY_PREFIX}.{self.id}"

    @property
    def is_persistent(self) -> bool:
        return isinstance(self.store, PersistentStore)


@dataclass(frozen=True, eq=False)
class TweakAction(Tweak):
    """A registry entry that runs a callback; it never holds an override."""

    name: str
    action: Callable[[], Any]
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    kind: TweakKind = TweakKind.ACTION

    @property
    def is_action(self) -> bool:
        return True

    def run(self) -> Any:
        return self.action()


def _bind_store(
    converter: SymmetricConverting[Any, str],
    id: Optional[str],
    backend: Optional[StringBackend],
    namespace: Optional[str],
) -> Tuple[str, ValueStore[Any]]:
    if id is None:
        return str(uuid.uuid4()), InMemoryStore()
    if namespace is None:
        from tweaks.core.utils.config import get_config

        namespace = get_config().storage.namespace
    return id, PersistentStore(converter, backend=backend, namespace=namespace)


def tweak(
    name: str,
    initial_value: V,
    id: Optional[str] = None,
    *,
    converter: Optional[SymmetricConverting[V, str]] = None,
    kind: TweakKind = TweakKind.VALUE,
    backend: Optional[StringBackend] = None,
    namespace: Optional[str] = None,
    store: Optional[ValueStore[V]] = None,
    **extra: Any,
) -> TweakDefinition[V]:
    """
    Build a definition for any tweakable value.

    ``converter`` defaults to the registered converter for the type of
    ``initial_value``. Passing ``store`` bypasses automatic store selection.
    """
    if converter is None:
        converter = converter_for(type(initial_value))
    if store is None:
        id, store = _bind_store(converter, id, backend, namespace)
    elif id is None:
        id = str(uuid.uuid4())
    return TweakDefinition(
        id=id,
        name=name,
        initial_value=initial_value,
        store=store,
        converter=converter,
        kind=kind,
        **extra,
    )


def bool_tweak(name: str, initial_value: bool, id: Optional[str] = None, **kwargs: Any) -> TweakDefinition[bool]:
    return tweak(name, initial_value, id, converter=description(bool), kind=TweakKind.TOGGLE, **kwargs)


def int_tweak(name: str, initial_value: int, id: Optional[str] = None, **kwargs: Any) -> TweakDefinition[int]:
    return tweak(name, initial_value, id, converter=description(int), kind=TweakKind.STEPPER, **kwargs)


def float_tweak(
    name: str,
    initial_value: float,
    id: Optional[str] = None,
    *,
    value_range: Tuple[float, float] = (0.0, 1.0),
    **kwargs: Any,
) -> TweakDefinition[float]:
    """Bounded number; the range is a rendering hint and writes are not clamped."""
    low, high = value_range
    if low > high:
        raise ValueError(f"invalid range {value_range!r}")
    return tweak(
        name,
        float(initial_value),
        id,
        converter=description(float),
        kind=TweakKind.SLIDER,
        value_range=(float(low), float(high)),
        **kwargs,
    )


def string_tweak(name: str, initial_value: str, id: Optional[str] = None, **kwargs: Any) -> TweakDefinition[str]:
    return tweak(name, initial_value, id, converter=description(str), kind=TweakKind.TEXT, **kwargs)


def color_tweak(name: str, initial_value: Color, id: Optional[str] = None, **kwargs: Any) -> TweakDefinition[Color]:
    return tweak(name, initial_value, id, converter=hex_color, kind=TweakKind.COLOR, **kwargs)


def uuid_tweak(
    name: str, initial_value: uuid.UUID, id: Optional[str] = None, **kwargs: Any
) -> TweakDefinition[uuid.UUID]:
    return tweak(name, initial_value, id, converter=description(uuid.UUID), kind=TweakKind.TEXT, **kwargs)


def option_tweak(
    name: str,
    initial_value: V,
    converter: SymmetricConverting[V, str],
    id: Optional[str] = None,
    *,
    options: Optional[Sequence[V]] = None,
    **kwargs: Any,
) -> TweakDefinition[V]:
    """Closed-set value; ``options`` defaults to every member of an Enum type."""
    if options is None:
        value_type = type(initial_value)
        if not (isinstance(value_type, type) and issubclass(value_type, Enum)):
            raise TypeError("options are required for non-Enum option tweaks")
        options = list(value_type)
    return tweak(
        name,
        initial_value,
        id,
        converter=converter,
        kind=TweakKind.PICKER,
        options=tuple(options),
        **kwargs,
    )


def optional_tweak(
    name: str,
    converter: SymmetricConverting[V, str],
    initial_value: Optional[V] = None,
    id: Optional[str] = None,
    *,
    default_for_new: V,
    **kwargs: Any,
) -> TweakDefinition[Optional[V]]:
    """Value that may be switched off; ``default_for_new`` is used when it is switched on."""
    return tweak(
        name,
        initial_value,
        id,
        converter=optional(converter),
        kind=TweakKind.OPTIONAL,
        default_for_new=default_for_new,
        **kwargs,
    )


def array_tweak(
    name: str,
    initial_value: List[V],
    converter: Optional[SymmetricConverting[V, str]] = None,
    id: Optional[str] = None,
    *,
    default_for_new: Any = None,
    **kwargs: Any,
) -> TweakDefinition[List[V]]:
    """
    List value.

    Without ``converter`` the element converter comes from the first initial
    element, or from ``default_for_new`` when the list starts empty (ints if
    neither is given). New elements default to ``default_for_new``, else to
    the first initial element.
    """
    values = list(initial_value)
    if default_for_new is None:
        default_for_new = values[0] if values else 0
    if converter is None:
        converter = converter_for(type(values[0] if values else default_for_new))
    return tweak(
        name,
        values,
        id,
        converter=array(converter),
        kind=TweakKind.ARRAY,
        default_for_new=default_for_new,
        **kwargs,
    )
