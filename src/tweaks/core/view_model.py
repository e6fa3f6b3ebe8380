"""
View models: what a rendering strategy may do with a tweak.

Renderers read the effective and initial values, write new values and
query/clear the override. They never touch stores directly.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar, Union

from tweaks.core.definition import Tweak, TweakAction, TweakDefinition, TweakKind
from tweaks.core.registry import TweakRegistry

V = TypeVar("V")

PREVIEW_FALLBACK = "<unprintable>"


class TweakViewModel(Generic[V]):
    def __init__(self, registry: TweakRegistry, definition: TweakDefinition[V]) -> None:
        self.registry = registry
        self.definition = definition

    def __repr__(self) -> str:
        return f"TweakViewModel({self.definition.id!r})"

    @property
    def initial_value(self) -> V:
        return self.definition.initial_value

    def value(self) -> V:
        return self.registry.value(self.definition)

    def set(self, value: V) -> None:
        self.registry.set(self.definition, value)

    def is_override(self) -> bool:
        return self.registry.has_override(self.definition)

    def reset(self) -> None:
        self.registry.reset(self.definition)

    def type_display_name(self) -> str:
        """Type label from the definition, so a None optional still reads as its wrapped type."""
        definition = self.definition
        if definition.kind is TweakKind.OPTIONAL:
            return f"Optional[{type(definition.default_for_new).__name__}]"
        if definition.kind is TweakKind.ARRAY:
            return f"List[{type(definition.default_for_new).__name__}]"
        return type(definition.initial_value).__name__

    def preview(self) -> str:
        return self.definition.converter.encoding.convert(self.value(), PREVIEW_FALLBACK)

    def preview_initial(self) -> str:
        return self.definition.converter.encoding.convert(self.initial_value, PREVIEW_FALLBACK)

    def parse(self, text: str) -> V:
        """Decode user input with the definition's converter (raises ConversionError)."""
        return self.definition.converter.decoding.convert(text)

    def set_text(self, text: str) -> V:
        value = self.parse(text)
        self.set(value)
        return value


class ActionViewModel:
    def __init__(self, action: TweakAction) -> None:
        self.definition = action

    def __repr__(self) -> str:
        return f"ActionViewModel({self.definition.id!r})"

    def is_override(self) -> bool:
        return False

    def reset(self) -> None:
        return None

    def type_display_name(self) -> str:
        return "action"

    def preview(self) -> str:
        return ""

    def run(self) -> Any:
        return self.definition.run()


def view_model_for(
    registry: TweakRegistry, tweak: Tweak
) -> Union[TweakViewModel[Any], ActionViewModel]:
    if isinstance(tweak, TweakAction):
        return ActionViewModel(tweak)
    if isinstance(tweak, TweakDefinition):
        return TweakViewModel(registry, tweak)
    raise TypeError(f"unsupported tweak type: {type(tweak).__name__}")
