"""
Tweak registry: the runtime catalog of tweak definitions.

The registry keeps two views of what was added:
- a flat id -> tweak map (last write wins)
- an ordered category -> section -> tweak hierarchy for display

Reads and writes go through each definition's own store under the key
``tweaks.<id>``. Definitions that were never added are ignored: reads return
the default and writes do nothing.

Override policy: writing a value equal to the definition's initial value
clears the override instead of storing it, so ``has_override`` only reports
values that actually differ from what the application compiled in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Union

from tweaks.core.definition import Tweak, TweakDefinition
from tweaks.core.search import SearchMatch, search
from tweaks.core.stores import UNSET
from tweaks.core.utils.logger import log_debug, log_override_change, log_warning

Observer = Callable[["TweakRegistry"], None]

_REJECTED: Any = object()


def _same_value(value: Any, other: Any) -> bool:
    # True == 1 in Python, but a bool is never the initial value of a number tweak.
    if isinstance(value, bool) != isinstance(other, bool):
        return False
    return value == other


@dataclass(frozen=True)
class TweakHierarchy:
    """Where a tweak goes: the insertion unit for ``TweakRegistry.add``."""

    tweak: Tweak
    category: str
    section: str


@dataclass
class Section:
    name: str
    tweaks: List[Tweak] = field(default_factory=list)


@dataclass
class Category:
    name: str
    sections: List[Section] = field(default_factory=list)

    def section(self, name: str) -> Optional[Section]:
        for section in self.sections:
            if section.name == name:
                return section
        return None

    def iter_tweaks(self) -> Iterator[Tweak]:
        for section in self.sections:
            yield from section.tweaks


@dataclass(frozen=True)
class TweakSearchResult:
    """A hierarchy position whose tweak name matched a search."""

    tweak: Tweak
    category: str
    section: str
    highlights: List[tuple]


CategoryRef = Union[Category, str]


class TweakRegistry:
    """
    Catalog of registered tweaks with override resolution.

    Not thread-safe: confine each instance to one thread (typically the UI
    loop). Observers are called synchronously after every write.
    """

    def __init__(self, log_overrides: bool = True) -> None:
        self._tweaks_by_id: Dict[str, Tweak] = {}
        self._categories: List[Category] = []
        self._observers: List[Observer] = []
        self.log_overrides = log_overrides

    def __repr__(self) -> str:
        return f"TweakRegistry(tweaks={len(self._tweaks_by_id)}, categories={len(self._categories)})"

    # Hierarchy -------------------------------------------------------------

    def add(self, tweak: Tweak, category: str, section: str) -> None:
        self.add_hierarchy(TweakHierarchy(tweak=tweak, category=category, section=section))

    def add_hierarchy(self, hierarchy: TweakHierarchy) -> None:
        """
        Upsert a tweak at a category/section path.

        An id already in that section is replaced in place; new sections and
        categories are appended. The same id under another path becomes a
        second, independent entry.
        """
        tweak = hierarchy.tweak
        category = self.category(hierarchy.category)
        if category is None:
            category = Category(name=hierarchy.category)
            self._categories.append(category)
        section = category.section(hierarchy.section)
        if section is None:
            section = Section(name=hierarchy.section)
            category.sections.append(section)

        for index, existing in enumerate(section.tweaks):
            if existing.id == tweak.id:
                section.tweaks[index] = tweak
                break
        else:
            section.tweaks.append(tweak)
        self._tweaks_by_id[tweak.id] = tweak
        log_debug("REGISTRY", f"Added {tweak.id!r}", f"{hierarchy.category} / {hierarchy.section}")

    @property
    def categories(self) -> List[Category]:
        return list(self._categories)

    @property
    def tweaks(self) -> List[Tweak]:
        return list(self._tweaks_by_id.values())

    def category(self, name: str) -> Optional[Category]:
        for category in self._categories:
            if category.name == name:
                return category
        return None

    def find(self, tweak_id: str) -> Optional[Tweak]:
        return self._tweaks_by_id.get(tweak_id)

    def is_registered(self, tweak: Tweak) -> bool:
        return tweak.id in self._tweaks_by_id

    def iter_hierarchy(self) -> Iterator[TweakHierarchy]:
        for category in self._categories:
            for section in category.sections:
                for tweak in section.tweaks:
                    yield TweakHierarchy(tweak=tweak, category=category.name, section=section.name)

    # Values ----------------------------------------------------------------

    def get(self, definition: TweakDefinition, default: Any = None) -> Any:
        """The stored override for ``definition``, or ``default``."""
        if not self.is_registered(definition):
            log_debug("REGISTRY", f"Read of unregistered tweak {definition.id!r} ignored")
            return default
        return definition.store.get(definition.persistency_key, default)

    def value(self, definition: TweakDefinition) -> Any:
        """Effective value: the override if there is one, else the initial value."""
        override = self.get(definition, UNSET)
        if override is UNSET:
            return definition.initial_value
        return override

    def set(self, definition: TweakDefinition, value: Any) -> None:
        """
        Write an override through the definition's store.

        UNSET, or a value equal to the initial value, clears the override.
        Values the definition's converter cannot encode are dropped with a
        warning. Observers are notified after every write that reached the
        store, clears included.
        """
        if not self.is_registered(definition):
            log_debug("REGISTRY", f"Write to unregistered tweak {definition.id!r} ignored")
            return
        if value is not UNSET and _same_value(value, definition.initial_value):
            value = UNSET
        if value is not UNSET and definition.converter.encoding.convert(value, _REJECTED) is _REJECTED:
            log_warning("REGISTRY", f"Rejected {value!r} for tweak {definition.id!r}")
            return
        old = definition.store.get(definition.persistency_key, UNSET) if self.log_overrides else UNSET
        if not definition.store.set(definition.persistency_key, value):
            return
        if self.log_overrides:
            log_override_change(definition.id, old, value)
        self._notify()

    def reset(self, definition: TweakDefinition) -> None:
        self.set(definition, UNSET)

    def has_override(self, definition: TweakDefinition) -> bool:
        return self.get(definition, UNSET) is not UNSET

    def _tweaks_in(self, category: Optional[CategoryRef]) -> List[TweakDefinition]:
        if category is None:
            categories = self._categories
        else:
            name = category.name if isinstance(category, Category) else category
            found = self.category(name)
            categories = [found] if found is not None else []
        return [
            tweak
            for found_category in categories
            for tweak in found_category.iter_tweaks()
            if isinstance(tweak, TweakDefinition)
        ]

    def reset_all(self, category: Optional[CategoryRef] = None) -> None:
        """Clear every override, or only those in ``category``."""
        for definition in self._tweaks_in(category):
            self.reset(definition)

    def has_override_any(self, category: Optional[CategoryRef] = None) -> bool:
        """True if any tweak (in ``category``) currently has an override."""
        return any(self.has_override(definition) for definition in self._tweaks_in(category))

    # Observers -------------------------------------------------------------

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Call ``observer(registry)`` after every write; returns an unsubscribe function."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self)

    # Search ----------------------------------------------------------------

    def search(self, query: str) -> List[TweakSearchResult]:
        """Hierarchy entries whose tweak name contains every word of ``query``."""
        entries = list(self.iter_hierarchy())
        matches: List[SearchMatch] = search(entries, query, key=lambda entry: entry.tweak.name)
        return [
            TweakSearchResult(
                tweak=match.element.tweak,
                category=match.element.category,
                section=match.element.section,
                highlights=match.highlights,
            )
            for match in matches
        ]


_registry: Optional[TweakRegistry] = None


def get_registry() -> TweakRegistry:
    """Process-wide default registry, created on first access."""
    global _registry
    if _registry is None:
        from tweaks.core.utils.config import get_config

        _registry = TweakRegistry(log_overrides=get_config().logging.log_overrides)
    return _registry


def set_registry(registry: Optional[TweakRegistry]) -> None:
    """Replace (or clear, with None) the default registry."""
    global _registry
    _registry = registry
