"""Typer app: root callback (menu, version, logging) and `init`."""

from __future__ import annotations

from typing import Optional

import typer

from mhelper import __version__
from mhelper.cli._shared import get_prefs, get_registry, setup_logging
from mhelper.cli.menu import main_menu, run_setup
from mhelper.core.constants import LANGUAGES
from mhelper.core.schema import Region
from mhelper.utils.output import error, info, is_piped, success

app = typer.Typer(
    name="mhelper",
    help="MiniMax Helper: configure AI coding tools to use the MiniMax API.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def root(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", callback=_version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """Run the setup wizard on first use, otherwise open the interactive menu."""
    setup_logging(verbose)
    if ctx.invoked_subcommand is not None:
        return
    if is_piped():
        info("Non-interactive mode detected, run `mhelper --help` for commands")
        return

    prefs = get_prefs()
    registry = get_registry(prefs)
    if prefs.is_first_run():
        info("Welcome! Let's set up MiniMax Helper.")
        run_setup(prefs, registry)
    else:
        main_menu(prefs, registry, doctor=run_doctor)


@app.command()
def init(
    lang: Optional[str] = typer.Option(None, "--lang", help="Language tag (en_US, es_ES, zh_CN)"),
    region: Optional[str] = typer.Option(None, "--region", help="Region: global or china"),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="MiniMax API key"),
) -> None:
    """Set language, region and API key. Prompts for anything not given."""
    prefs = get_prefs()
    registry = get_registry(prefs)

    if lang is None and region is None and api_key is None:
        run_setup(prefs, registry)
        return

    if lang is not None and lang not in LANGUAGES:
        error(f"Unknown language: {lang}. Options: {', '.join(LANGUAGES)}")
        raise typer.Exit(1)
    if region is not None and region not in {r.value for r in Region}:
        error(f"Unknown region: {region}. Options: {', '.join(r.value for r in Region)}")
        raise typer.Exit(1)

    prefs.set_language(lang or prefs.get_language())
    if region is not None:
        prefs.set_region(region)
    if api_key:
        prefs.set_api_key(api_key)
    success(f"Preferences saved to {prefs.path}")


# Register subcommand groups
from mhelper.cli.config_cmd import config_app
from mhelper.cli.tool_cmd import register_tool_commands, run_doctor

app.add_typer(config_app, name="config", help="Manage preferences (language, region, API key)")

register_tool_commands(app)
