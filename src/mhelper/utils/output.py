"""Console helpers: status lines on Rich consoles, JSON for scripts."""

from __future__ import annotations

import json
import sys
from typing import Any

from rich.console import Console
from rich.table import Table

console = Console()
error_console = Console(stderr=True)


def is_piped() -> bool:
    return not sys.stdout.isatty()


def print_json(data: Any) -> None:
    """Write ``data`` to stdout as indented JSON, bypassing Rich markup."""
    print(json.dumps(data, indent=2, ensure_ascii=False))


def output_table(rows: list[dict[str, str]], columns: list[str], fmt: str | None = None) -> None:
    """Print rows as a table, or as JSON when asked to or when piped."""
    if fmt is None:
        fmt = "json" if is_piped() else "text"
    if fmt == "json":
        print_json(rows)
        return
    table = Table()
    for col in columns:
        table.add_column(col.title())
    for row in rows:
        table.add_row(*[row.get(col, "") for col in columns])
    console.print(table)


def error(msg: str) -> None:
    error_console.print(f"[red]Error:[/red] {msg}")


def success(msg: str) -> None:
    console.print(f"[green]✓ {msg}[/green]")


def hint(msg: str) -> None:
    console.print(f"[yellow]  {msg}[/yellow]")


def info(msg: str) -> None:
    console.print(f"[dim]{msg}[/dim]")
