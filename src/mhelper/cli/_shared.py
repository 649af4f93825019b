"""Shared CLI utilities to avoid circular imports."""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from mhelper.adapters.base import ToolAdapter
from mhelper.adapters.registry import ToolRegistry
from mhelper.core.errors import UnknownToolError
from mhelper.core.preferences import PreferenceStore
from mhelper.utils import paths
from mhelper.utils.output import error, error_console

FORMAT_OPTION = typer.Option(None, "--format", "-F", help="Output format: json or text")


def get_prefs() -> PreferenceStore:
    return PreferenceStore(paths.prefs_path(paths.home_dir()))


def get_registry(prefs: PreferenceStore | None = None) -> ToolRegistry:
    return ToolRegistry(prefs or get_prefs(), home=paths.home_dir())


def get_tool(registry: ToolRegistry, name: str) -> ToolAdapter:
    """Look up a tool, exiting with status 1 when it is unknown."""
    try:
        return registry.get(name)
    except UnknownToolError as e:
        error(f"{e}. Run `mhelper tools` to list identifiers.")
        raise typer.Exit(1)


def setup_logging(verbose: bool) -> None:
    logger = logging.getLogger("mhelper")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=error_console, show_time=False, show_path=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
