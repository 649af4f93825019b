"""Tool commands: list, configure, uninstall, doctor."""

from __future__ import annotations

from typing import Optional

import typer
from rich.prompt import Confirm

from mhelper.adapters.base import ToolAdapter
from mhelper.cli._shared import FORMAT_OPTION, get_prefs, get_registry, get_tool
from mhelper.core.schema import Flavor
from mhelper.utils.output import console, error, info, output_table, print_json, success
from mhelper.utils.paths import mask_key


def _row(adapter: ToolAdapter) -> dict[str, str]:
    return {
        "name": adapter.name,
        "tool": adapter.display_name,
        "category": adapter.category.value,
        "configured": "yes" if adapter.is_configured() else ("n/a" if not adapter.managed else "no"),
    }


def register_tool_commands(app: typer.Typer) -> None:
    """Register `tools`, `configure`, `uninstall` and `doctor` on the root app."""

    @app.command("tools")
    def tools_cmd(fmt: Optional[str] = FORMAT_OPTION) -> None:
        """List supported tools and whether they are configured."""
        registry = get_registry()
        rows = [_row(a) for a in registry]
        output_table(rows, ["name", "tool", "category", "configured"], fmt=fmt)

    @app.command("configure")
    def configure_cmd(
        tool: str = typer.Argument(..., help="Tool identifier (see `mhelper tools`)"),
    ) -> None:
        """Configure a tool to use MiniMax, or print its setup steps."""
        adapter = get_tool(get_registry(), tool)
        try:
            ok = adapter.configure()
        except OSError as e:
            error(f"Could not write {adapter.display_name} config: {e}")
            raise typer.Exit(1)
        if not ok:
            raise typer.Exit(1)

    @app.command("uninstall")
    def uninstall_cmd(
        tool: Optional[str] = typer.Argument(None, help="Tool identifier"),
        all_tools: bool = typer.Option(False, "--all", help="Remove MiniMax config from every tool"),
        yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation for --all"),
        fmt: Optional[str] = FORMAT_OPTION,
    ) -> None:
        """Remove MiniMax configuration from one tool or all of them."""
        registry = get_registry()
        if all_tools:
            configured = registry.configured_tools()
            if not configured:
                if fmt == "json":
                    print_json({"removed": []})
                else:
                    info("No MiniMax configurations found")
                return
            names = ", ".join(a.display_name for a in configured)
            if not yes and not Confirm.ask(f"Remove MiniMax config from {names}?", default=False):
                raise typer.Exit(1)
            try:
                removed = registry.uninstall_all()
            except OSError as e:
                error(f"Uninstall failed: {e}")
                raise typer.Exit(1)
            if fmt == "json":
                print_json({"removed": removed})
            else:
                success(f"Removed MiniMax config from {len(removed)} tool(s)")
            return

        if tool is None:
            error("Specify a tool or --all")
            raise typer.Exit(1)
        adapter = get_tool(registry, tool)
        try:
            adapter.uninstall()
        except OSError as e:
            error(f"Could not write {adapter.display_name} config: {e}")
            raise typer.Exit(1)
        if fmt == "json":
            print_json({"tool": adapter.name, "uninstalled": True})
        else:
            success(f"{adapter.display_name} uninstalled")

    @app.command("doctor")
    def doctor_cmd(fmt: Optional[str] = FORMAT_OPTION) -> None:
        """Check preferences and show which tools are configured."""
        run_doctor(fmt)


def run_doctor(fmt: Optional[str] = None) -> None:
    prefs = get_prefs()
    registry = get_registry(prefs)
    snapshot = prefs.snapshot()
    configured = registry.configured_tools()

    if fmt == "json":
        print_json({
            "api_key": bool(snapshot.api_key),
            "region": snapshot.region.value,
            "lang": snapshot.lang,
            "configured": [a.name for a in configured],
            "base_urls": {
                "anthropic": prefs.base_url(Flavor.ANTHROPIC),
                "openai": prefs.base_url(Flavor.OPENAI),
            },
        })
        return

    def check(ok: bool) -> str:
        return "[green]✓[/green]" if ok else "[red]✗[/red]"

    key_state = f"configured ({mask_key(snapshot.api_key)})" if snapshot.api_key else "not configured"
    console.print("\n[cyan]Checking configuration...[/cyan]\n")
    console.print(f"{check(bool(snapshot.api_key))} API key: {key_state}")
    console.print(f"{check(True)} Region: {snapshot.region.value}")
    console.print(f"{check(True)} Language: {snapshot.lang}")

    console.print("\n[cyan]Tools status:[/cyan]\n")
    for adapter in configured:
        console.print(f"  [green]✓[/green] {adapter.display_name}")
    if not configured:
        info("  No MiniMax configurations found")

    console.print(f"\n  Base URL (Anthropic): {prefs.base_url(Flavor.ANTHROPIC)}")
    console.print(f"  Base URL (OpenAI): {prefs.base_url(Flavor.OPENAI)}\n")
