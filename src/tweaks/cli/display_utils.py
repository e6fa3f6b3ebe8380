"""Rich rendering of tweaks for the command line."""

from typing import Iterable, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tweaks.core.converters import Color
from tweaks.core.definition import TweakDefinition
from tweaks.core.registry import TweakHierarchy, TweakRegistry
from tweaks.core.view_model import view_model_for

OVERRIDE_STYLE = "bold dark_orange"


def color_swatch(color: Color) -> Text:
    """Two-cell block in the color (alpha is ignored by terminals)."""
    red, green, blue, _ = color.rgba255()
    return Text("  ", style=f"on #{red:02X}{green:02X}{blue:02X}")


def _value_text(preview: str, value: object, is_override: bool) -> Text:
    text = Text()
    if isinstance(value, Color):
        text.append_text(color_swatch(value))
        text.append(" ")
    text.append(preview, style=OVERRIDE_STYLE if is_override else "")
    return text


def tweaks_table(
    registry: TweakRegistry,
    entries: Iterable[TweakHierarchy],
    title: Optional[str] = "Tweaks",
) -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("Category", style="cyan")
    table.add_column("Section", style="cyan")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Value")
    table.add_column("Override", justify="center")

    for entry in entries:
        model = view_model_for(registry, entry.tweak)
        if isinstance(entry.tweak, TweakDefinition):
            value = model.value()
            value_cell = _value_text(model.preview(), value, model.is_override())
        else:
            value_cell = Text("(action)", style="italic")
        table.add_row(
            entry.category,
            entry.section,
            entry.tweak.id,
            entry.tweak.name,
            model.type_display_name(),
            value_cell,
            "●" if model.is_override() else "",
        )
    return table


def tweak_panel(registry: TweakRegistry, definition: TweakDefinition) -> Panel:
    model = view_model_for(registry, definition)
    body = Text()
    body.append("id:        ", style="dim")
    body.append(f"{definition.id}\n")
    body.append("type:      ", style="dim")
    body.append(f"{model.type_display_name()} ({definition.kind.value})\n")
    body.append("initial:   ", style="dim")
    body.append_text(_value_text(model.preview_initial(), definition.initial_value, False))
    body.append("\n")
    body.append("effective: ", style="dim")
    body.append_text(_value_text(model.preview(), model.value(), model.is_override()))
    if definition.options:
        body.append("\noptions:   ", style="dim")
        body.append(", ".join(definition.converter.encoding.convert(o, str(o)) for o in definition.options))
    if definition.value_range is not None:
        low, high = definition.value_range
        body.append("\nrange:     ", style="dim")
        body.append(f"{low} ... {high}")
    body.append("\nstorage:   ", style="dim")
    body.append("persistent" if definition.is_persistent else "in-memory")
    return Panel(body, title=definition.name, border_style=OVERRIDE_STYLE if model.is_override() else "blue")


def print_tweaks(console: Console, registry: TweakRegistry, entries: Iterable[TweakHierarchy]) -> None:
    entries = list(entries)
    if not entries:
        console.print("[yellow]No tweaks found[/yellow]")
        return
    console.print(tweaks_table(registry, entries))
