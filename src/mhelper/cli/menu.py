"""Interactive setup wizard and main menu for bare `mhelper` invocations."""

from __future__ import annotations

from typing import Callable

from rich.console import Console
from rich.prompt import Confirm, Prompt

from mhelper.adapters.base import ToolAdapter, ToolCategory
from mhelper.adapters.registry import ToolRegistry
from mhelper.core.constants import LANGUAGES
from mhelper.core.preferences import PreferenceStore
from mhelper.core.schema import Region
from mhelper.utils.output import console as default_console
from mhelper.utils.paths import mask_key

BACK = "b"


def _status(adapter: ToolAdapter) -> str:
    if not adapter.managed:
        return " "
    return "[green]✓[/green]" if adapter.is_configured() else "[dim]○[/dim]"


def _pick(
    adapters: list[ToolAdapter],
    title: str,
    console: Console,
    prompt_fn: Callable[..., str],
) -> ToolAdapter | None:
    """Show a numbered list of tools and return the chosen one (None for back)."""
    console.print(f"\n[cyan]── {title} ──[/cyan]")
    for i, adapter in enumerate(adapters, 1):
        console.print(f"  {i:>2}. {_status(adapter)} {adapter.display_name}")
    console.print(f"   {BACK}. [dim]← Back[/dim]")
    choices = [str(i) for i in range(1, len(adapters) + 1)] + [BACK]
    choice = prompt_fn("Select a tool", choices=choices, default=BACK, show_choices=False)
    if choice == BACK:
        return None
    return adapters[int(choice) - 1]


def configure_with_options(
    adapter: ToolAdapter,
    console: Console,
    prompt_fn: Callable[..., str],
) -> None:
    """Offer install, or remove when the tool is already configured."""
    choices = ["i"]
    labels = "(i)nstall"
    if adapter.is_configured():
        choices.append("r")
        labels += "  (r)emove"
    choices.append(BACK)
    choice = prompt_fn(f"{adapter.display_name}: {labels}  (b)ack", choices=choices, default="i")
    if choice == "i":
        adapter.configure()
    elif choice == "r":
        adapter.uninstall()
        console.print(f"[green]✓ {adapter.display_name} uninstalled[/green]")


def configure_language(
    prefs: PreferenceStore,
    prompt_fn: Callable[..., str],
    console: Console,
) -> None:
    for tag, label in LANGUAGES.items():
        console.print(f"  {tag}  {label}")
    lang = prompt_fn("Language", choices=list(LANGUAGES), default=prefs.get_language())
    prefs.set_language(lang)
    console.print(f"[green]✓ Language set to {lang}[/green]")


def configure_region(
    prefs: PreferenceStore,
    prompt_fn: Callable[..., str],
    console: Console,
) -> None:
    for region in Region:
        console.print(f"  {region.value:<7} {region.host}")
    region = prompt_fn("Region", choices=[r.value for r in Region], default=prefs.get_region().value)
    prefs.set_region(region)
    console.print(f"[green]✓ Region: {region}[/green]")


def configure_api_key(
    prefs: PreferenceStore,
    prompt_fn: Callable[..., str],
    console: Console,
) -> None:
    console.print(f"[dim]Current: {mask_key(prefs.get_api_key()) or 'not set'}[/dim]")
    api_key = prompt_fn("Enter your MiniMax API key", password=True, default="", show_default=False)
    if api_key.strip():
        prefs.set_api_key(api_key.strip())
        console.print("[green]✓ API key saved[/green]")


def run_setup(
    prefs: PreferenceStore,
    registry: ToolRegistry,
    console: Console | None = None,
    prompt_fn: Callable[..., str] | None = None,
    confirm_fn: Callable[..., bool] | None = None,
) -> None:
    """First-time setup: language, region, API key, then optionally a tool."""
    console = console or default_console
    prompt_fn = prompt_fn or Prompt.ask
    confirm_fn = confirm_fn or Confirm.ask

    console.print("\n[cyan]MiniMax M2.1 Coding Helper Setup[/cyan]\n")
    configure_language(prefs, prompt_fn, console)
    configure_region(prefs, prompt_fn, console)
    configure_api_key(prefs, prompt_fn, console)

    if confirm_fn("Configure a tool now?", default=True):
        tool_menu(registry, console, prompt_fn)
    console.print("\n[green]✓ Setup complete[/green]\n")


def tool_menu(registry: ToolRegistry, console: Console, prompt_fn: Callable[..., str]) -> None:
    adapters = registry.auto_tools() + registry.manual_tools()
    while True:
        adapter = _pick(adapters, "Coding tools", console, prompt_fn)
        if adapter is None:
            return
        if adapter.managed:
            configure_with_options(adapter, console, prompt_fn)
        else:
            adapter.configure()


def mcp_menu(registry: ToolRegistry, console: Console, prompt_fn: Callable[..., str]) -> None:
    info_cards = [a for a in registry.by_category(ToolCategory.MCP) if not a.managed]
    adapters = registry.mcp_tools() + info_cards
    while True:
        adapter = _pick(adapters, "MCP servers", console, prompt_fn)
        if adapter is None:
            return
        if adapter.managed:
            configure_with_options(adapter, console, prompt_fn)
        else:
            adapter.configure()


def uninstall_menu(
    registry: ToolRegistry,
    console: Console,
    prompt_fn: Callable[..., str],
    confirm_fn: Callable[..., bool],
) -> None:
    while True:
        configured = registry.configured_tools()
        if not configured:
            console.print("\n[yellow]No MiniMax configurations found[/yellow]\n")
            return
        console.print("\n[cyan]── Uninstall ──[/cyan]")
        for i, adapter in enumerate(configured, 1):
            console.print(f"  {i:>2}. {adapter.display_name}")
        console.print("   a. [red]Uninstall all[/red]")
        console.print(f"   {BACK}. [dim]← Back[/dim]")
        choices = [str(i) for i in range(1, len(configured) + 1)] + ["a", BACK]
        choice = prompt_fn("Select", choices=choices, default=BACK, show_choices=False)
        if choice == BACK:
            return
        if choice == "a":
            if confirm_fn("Remove MiniMax config from all tools?", default=False):
                registry.uninstall_all()
                console.print("\n[green]✓ All configurations removed[/green]\n")
            return
        adapter = configured[int(choice) - 1]
        adapter.uninstall()
        console.print(f"[green]✓ {adapter.display_name} uninstalled[/green]")


MAIN_MENU = (
    ("tool", "Configure coding tool"),
    ("mcp", "Configure MCP server"),
    ("uninstall", "Uninstall configurations"),
    ("lang", "Language"),
    ("region", "Region"),
    ("apikey", "API key"),
    ("doctor", "Doctor"),
    ("exit", "Exit"),
)


def main_menu(
    prefs: PreferenceStore,
    registry: ToolRegistry,
    console: Console | None = None,
    prompt_fn: Callable[..., str] | None = None,
    confirm_fn: Callable[..., bool] | None = None,
    doctor: Callable[[], None] | None = None,
) -> None:
    """Loop over the main menu until the user exits."""
    console = console or default_console
    prompt_fn = prompt_fn or Prompt.ask
    confirm_fn = confirm_fn or Confirm.ask

    while True:
        console.print()
        for value, label in MAIN_MENU:
            console.print(f"  [bold]{value:<10}[/bold] {label}")
        action = prompt_fn("Action", choices=[v for v, _ in MAIN_MENU], default="exit", show_choices=False)
        if action == "exit":
            return
        if action == "tool":
            tool_menu(registry, console, prompt_fn)
        elif action == "mcp":
            mcp_menu(registry, console, prompt_fn)
        elif action == "uninstall":
            uninstall_menu(registry, console, prompt_fn, confirm_fn)
        elif action == "lang":
            configure_language(prefs, prompt_fn, console)
        elif action == "region":
            configure_region(prefs, prompt_fn, console)
        elif action == "apikey":
            configure_api_key(prefs, prompt_fn, console)
        elif action == "doctor" and doctor is not None:
            doctor()
