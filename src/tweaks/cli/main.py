"""
Typer-based CLI for Tweaks.

A command-line rendering strategy for the tweak registry. Tweaks are
registered by application code, so every invocation first imports one or
more setup modules (``--setup myapp.tweaks`` or ``--setup
myapp.tweaks:register``) that add definitions to the default registry.

Commands:
- list: tabular view of the hierarchy, optionally filtered by a search query
- show: one tweak with its initial and effective value
- set: parse text with the tweak's converter and store it as an override
- reset: clear overrides for one tweak, one category or everything
- run: run a tweak action
- overrides: raw dump of the persistent backend
"""

import importlib
import json
import os
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from tweaks.core.converters import ConversionError
from tweaks.core.definition import Tweak, TweakAction, TweakDefinition
from tweaks.core.registry import TweakHierarchy, TweakRegistry, get_registry
from tweaks.core.stores import get_default_backend
from tweaks.core.utils.config import get_config, load_config
from tweaks.core.utils.logger import LOG_LEVELS, log_error, log_info, setup_logging
from tweaks.core.view_model import view_model_for

from .display_utils import print_tweaks, tweak_panel
from .exit_codes import EXIT_USER_CANCEL, CliExit

console = Console()

app = typer.Typer(
    name="tweaks",
    help="Inspect and override application tweaks",
    add_completion=False,
    no_args_is_help=True,
)


def _run_setup(target: str, registry: TweakRegistry) -> None:
    module_name, _, function_name = target.partition(":")
    if os.getcwd() not in sys.path:
        sys.path.insert(0, os.getcwd())
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        log_error("CLI", f"Could not import setup module {module_name!r}", exception=e)
        raise CliExit.bad_input(f"Could not import setup module {module_name!r}: {e}")
    if function_name:
        register = getattr(module, function_name, None)
        if not callable(register):
            raise CliExit.bad_input(f"{target!r} is not a callable")
        register(registry)


def _registry(ctx: typer.Context) -> TweakRegistry:
    return ctx.obj if isinstance(ctx.obj, TweakRegistry) else get_registry()


def _find(registry: TweakRegistry, tweak_id: str) -> Tweak:
    tweak = registry.find(tweak_id)
    if tweak is None:
        raise CliExit.bad_input(f"Unknown tweak: {tweak_id}")
    return tweak


def _find_definition(registry: TweakRegistry, tweak_id: str) -> TweakDefinition:
    tweak = _find(registry, tweak_id)
    if not isinstance(tweak, TweakDefinition):
        raise CliExit.bad_input(f"{tweak_id} is an action, not a value")
    return tweak


def _entry_dict(registry: TweakRegistry, entry: TweakHierarchy) -> dict:
    model = view_model_for(registry, entry.tweak)
    return {
        "category": entry.category,
        "section": entry.section,
        "id": entry.tweak.id,
        "name": entry.tweak.name,
        "type": model.type_display_name(),
        "value": model.preview(),
        "override": model.is_override(),
    }


@app.callback()
def main(
    ctx: typer.Context,
    setup: List[str] = typer.Option(
        [], "--setup", "-s", help="Module (or module:function) that registers tweaks"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="JSON configuration file"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override the configured log level"
    ),
):
    """Inspect and override application tweaks."""
    try:
        config = load_config(str(config_file)) if config_file else get_config()
    except ValueError as e:
        raise CliExit.bad_input(str(e))
    if log_level and log_level.upper() not in LOG_LEVELS:
        raise CliExit.bad_input(f"Invalid log level: {log_level}")
    setup_logging(
        level=log_level or config.logging.level,
        log_file=config.logging.file or None,
    )
    registry = get_registry()
    for target in setup:
        _run_setup(target, registry)
    if setup:
        log_info("CLI", f"Registered {len(registry.tweaks)} tweaks", ", ".join(setup))
    ctx.obj = registry


@app.command("list")
def list_tweaks(
    ctx: typer.Context,
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Search tweak names"),
    category: Optional[str] = typer.Option(None, "--category", help="Only this category"),
    format: str = typer.Option("rich", "--format", "-f", help="Output format (rich, json)"),
):
    """List registered tweaks and their effective values."""
    registry = _registry(ctx)
    if query:
        entries = [
            TweakHierarchy(tweak=result.tweak, category=result.category, section=result.section)
            for result in registry.search(query)
        ]
    else:
        entries = list(registry.iter_hierarchy())
    if category:
        entries = [entry for entry in entries if entry.category == category]

    if format == "json":
        typer.echo(json.dumps([_entry_dict(registry, entry) for entry in entries], indent=2))
    else:
        print_tweaks(console, registry, entries)


@app.command("show")
def show_tweak(
    ctx: typer.Context,
    tweak_id: str = typer.Argument(..., help="Tweak id"),
):
    """Show one tweak with its initial and effective value."""
    registry = _registry(ctx)
    console.print(tweak_panel(registry, _find_definition(registry, tweak_id)))


@app.command("set")
def set_tweak(
    ctx: typer.Context,
    tweak_id: str = typer.Argument(..., help="Tweak id"),
    text: str = typer.Argument(..., help="New value in the tweak's text form"),
):
    """Override a tweak with a value given as text."""
    registry = _registry(ctx)
    definition = _find_definition(registry, tweak_id)
    model = view_model_for(registry, definition)
    try:
        model.set_text(text)
    except ConversionError as e:
        raise CliExit.bad_input(f"Invalid value for {tweak_id}: {e.message}")
    state = "override" if model.is_override() else "initial value"
    console.print(f"[green]{definition.name}[/green] = {model.preview()} ({state})")


@app.command("reset")
def reset_tweaks(
    ctx: typer.Context,
    tweak_id: Optional[str] = typer.Argument(None, help="Tweak id"),
    category: Optional[str] = typer.Option(None, "--category", help="Reset one category"),
    all_: bool = typer.Option(False, "--all", help="Reset every tweak"),
):
    """Clear overrides."""
    registry = _registry(ctx)
    if tweak_id:
        registry.reset(_find_definition(registry, tweak_id))
        console.print(f"[green]Reset {tweak_id}[/green]")
    elif category:
        if registry.category(category) is None:
            raise CliExit.bad_input(f"Unknown category: {category}")
        registry.reset_all(category)
        console.print(f"[green]Reset category {category}[/green]")
    elif all_:
        registry.reset_all()
        console.print("[green]Reset all tweaks[/green]")
    else:
        raise CliExit.bad_input("Give a tweak id, --category or --all")


@app.command("run")
def run_action(
    ctx: typer.Context,
    tweak_id: str = typer.Argument(..., help="Action id"),
):
    """Run a tweak action."""
    registry = _registry(ctx)
    tweak = _find(registry, tweak_id)
    if not isinstance(tweak, TweakAction):
        raise CliExit.bad_input(f"{tweak_id} is not an action")
    try:
        tweak.run()
    except Exception as e:
        log_error("CLI", f"Action {tweak_id} failed: {e}", exception=e)
        raise CliExit.error(f"Action failed: {e}")
    console.print(f"[green]Ran {tweak.name}[/green]")


@app.command("overrides")
def show_overrides(
    format: str = typer.Option("rich", "--format", "-f", help="Output format (rich, json)"),
):
    """Dump the raw keys stored in the persistent backend."""
    backend = get_default_backend()
    values = {key: backend.read_string(key) for key in backend.keys()}
    if format == "json":
        typer.echo(json.dumps(values, indent=2, sort_keys=True))
        return
    if not values:
        console.print("[yellow]No stored overrides[/yellow]")
        return
    table = Table(title="Stored overrides")
    table.add_column("Key", style="cyan")
    table.add_column("Raw value")
    for key, raw in values.items():
        table.add_row(key, raw)
    console.print(table)


def run() -> None:
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        sys.exit(EXIT_USER_CANCEL)


if __name__ == "__main__":
    run()
