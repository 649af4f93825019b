"""Config subcommands: get, set, list, revoke-key for mhelper preferences."""

from __future__ import annotations

from typing import Optional

import typer

from mhelper.cli._shared import FORMAT_OPTION, get_prefs
from mhelper.core.constants import LANGUAGES
from mhelper.core.preferences import PreferenceStore
from mhelper.core.schema import Region
from mhelper.utils.output import error, info, print_json, success
from mhelper.utils.paths import mask_key

config_app = typer.Typer(no_args_is_help=True)

_VALID_KEYS = {
    "lang": set(LANGUAGES),
    "region": {r.value for r in Region},
    "api_key": None,
}


def _display(prefs: PreferenceStore, key: str) -> str | None:
    if key == "lang":
        return prefs.get_language()
    if key == "region":
        return prefs.get_region().value
    return mask_key(prefs.get_api_key()) or None


def _check_key(key: str) -> None:
    if key not in _VALID_KEYS:
        error(f"Unknown key: {key}. Valid keys: {', '.join(sorted(_VALID_KEYS))}")
        raise typer.Exit(1)


@config_app.command("get")
def config_get(
    key: str = typer.Argument(..., help="Preference key"),
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Get a preference value (API keys are masked)."""
    _check_key(key)
    value = _display(get_prefs(), key)
    if fmt == "json":
        print_json({"key": key, "value": value})
    elif value is None:
        info(f"{key}: (not set)")
    else:
        info(f"{key}: {value}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Preference key"),
    value: str = typer.Argument(..., help="Value to set"),
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Set a preference value."""
    _check_key(key)
    valid_values = _VALID_KEYS[key]
    if valid_values is not None and value not in valid_values:
        error(f"Invalid value for {key}: {value}. Valid values: {', '.join(sorted(valid_values))}")
        raise typer.Exit(1)
    if key == "api_key" and not value.strip():
        error("API key cannot be empty")
        raise typer.Exit(1)

    prefs = get_prefs()
    if key == "lang":
        prefs.set_language(value)
    elif key == "region":
        prefs.set_region(value)
    else:
        prefs.set_api_key(value.strip())

    shown = _display(prefs, key)
    if fmt == "json":
        print_json({"key": key, "value": shown})
    else:
        success(f"{key} = {shown}")


@config_app.command("list")
def config_list(
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """List all preference values."""
    prefs = get_prefs()
    values = {key: _display(prefs, key) for key in _VALID_KEYS}
    if fmt == "json":
        print_json(values)
    else:
        for k, v in values.items():
            info(f"{k}: {v if v is not None else '(not set)'}")


@config_app.command("revoke-key")
def config_revoke_key() -> None:
    """Forget the stored API key."""
    prefs = get_prefs()
    prefs.revoke_api_key()
    success("API key removed")
