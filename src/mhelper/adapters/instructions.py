"""Instruction-only adapters for tools whose settings live outside reach.

These tools keep their configuration in editor state or extension storage,
so mhelper only prints the steps to follow. Nothing is read or written and
the configured state cannot be determined.
"""

from __future__ import annotations

import json
from typing import Callable

from rich.markup import escape

from mhelper.adapters.base import ToolCategory
from mhelper.core.constants import (
    API_KEY_ENV,
    API_KEY_PLACEHOLDER,
    MCP_PACKAGE,
    MCP_SERVER_NAME,
    MCP_TOOLS,
    MODEL_ID,
)
from mhelper.core.preferences import PreferenceStore
from mhelper.core.schema import Flavor
from mhelper.utils.output import console

Renderer = Callable[[PreferenceStore], str]


def _key(prefs: PreferenceStore) -> str:
    return prefs.get_api_key() or API_KEY_PLACEHOLDER


def _green(value: str) -> str:
    return f"[green]{escape(value)}[/green]"


def _title(text: str) -> str:
    return f"[cyan]{text}[/cyan]\n"


def _steps(*lines: str) -> str:
    return "\n".join(f"{i}. {line}" for i, line in enumerate(lines, 1))


def cursor(prefs: PreferenceStore) -> str:
    return _title("Cursor Configuration:") + _steps(
        "Settings → Models",
        'Enable "Override OpenAI Base URL"',
        f"Base URL: {_green(prefs.base_url(Flavor.OPENAI))}",
        f"OpenAI API Key: {_green(_key(prefs))}",
        'Click "Enable OpenAI API Key" to verify',
        f"View All Models → Add Custom Model → {MODEL_ID}",
        f"Enable {MODEL_ID} and select it",
    )


def _minimax_provider(title: str, first: str, model: str, finish: str) -> Renderer:
    """Extensions with a built-in MiniMax provider share the same form."""

    def render(prefs: PreferenceStore) -> str:
        return _title(title) + _steps(
            first,
            "API Provider: MiniMax",
            f"MiniMax Entrypoint: {_green(prefs.resolve_endpoint_host())}",
            f"MiniMax API Key: {_green(_key(prefs))}",
            f"Model: {model}",
            finish,
        )

    return render


_cline_steps = _minimax_provider(
    "Cline Configuration:",
    'Click "Use your own API key"',
    "MiniMax-M2",
    "Click \"Let's go!\" then \"Done\"",
)
kilo_code = _minimax_provider("Kilo Code Configuration:", "Click Settings", MODEL_ID, 'Click "Save" then "Done"')
roo_code = _minimax_provider("Roo Code Configuration:", "Click Settings", MODEL_ID, 'Click "Save" then "Done"')


def cline(prefs: PreferenceStore) -> str:
    note = f"[yellow]Note: {MODEL_ID} is coming soon for Cline, use MiniMax-M2[/yellow]\n"
    return note + _cline_steps(prefs)


def trae(prefs: PreferenceStore) -> str:
    return _title("TRAE Configuration:") + _steps(
        "Settings icon (top right) → Models",
        'Click "+ Add Model"',
        "Provider: OpenRouter or SiliconFlow",
        'Model: Select "other models"',
        "Model ID: MiniMax M2.1",
        f"API Key: {_green(_key(prefs))}",
        'Click "Add Model"',
    )


def windsurf(prefs: PreferenceStore) -> str:
    return _title("Windsurf Configuration:") + _steps(
        "Settings → AI Provider → Custom OpenAI-compatible",
        f"Base URL: {_green(prefs.base_url(Flavor.OPENAI))}",
        f"API Key: {_green(_key(prefs))}",
        f"Model: {MODEL_ID}",
    )


def aider(prefs: PreferenceStore) -> str:
    return "\n".join([
        _title("Aider Configuration:"),
        _green(f'export OPENAI_API_BASE="{prefs.base_url(Flavor.OPENAI)}"'),
        _green(f'export OPENAI_API_KEY="{_key(prefs)}"'),
        "",
        f"[yellow]aider --model openai/{MODEL_ID}[/yellow]",
    ])


def grok_cli(prefs: PreferenceStore) -> str:
    return "\n".join([
        _title("Grok CLI Configuration:"),
        "[yellow]Note: Not recommended by MiniMax[/yellow]",
        "Set environment variables:",
        _green(f'export GROK_BASE_URL="{prefs.base_url(Flavor.OPENAI)}"'),
        _green(f'export GROK_API_KEY="{_key(prefs)}"'),
        "",
        "Run:",
        f"[yellow]grok --model {MODEL_ID}[/yellow]",
    ])


def neovim(prefs: PreferenceStore) -> str:
    setup = (
        "require('avante').setup({\n"
        '  provider = "openai",\n'
        f'  openai = {{ endpoint = "{prefs.base_url(Flavor.OPENAI)}", model = "{MODEL_ID}" }}\n'
        "})"
    )
    return "\n".join([
        _title("Neovim (avante.nvim) Configuration:"),
        _green(f'export OPENAI_API_KEY="{_key(prefs)}"'),
        "",
        f"[dim]{escape(setup)}[/dim]",
    ])


def mcp_info(prefs: PreferenceStore) -> str:
    config = {
        "mcpServers": {
            MCP_SERVER_NAME: {
                "command": "uvx",
                "args": [MCP_PACKAGE],
                "env": {
                    API_KEY_ENV: prefs.get_api_key() or "<KEY>",
                    "MINIMAX_API_HOST": prefs.api_host(),
                },
            }
        }
    }
    return "\n".join([
        _title("MiniMax MCP Server Configuration:"),
        "[yellow]Install uvx: curl -LsSf https://astral.sh/uv/install.sh | sh[/yellow]",
        "",
        f"[dim]{escape(json.dumps(config, indent=2))}[/dim]",
        "",
        f"[yellow]Tools: {MCP_TOOLS}[/yellow]",
    ])


class InstructionsAdapter:
    managed = False

    def __init__(
        self,
        prefs: PreferenceStore,
        name: str,
        display_name: str,
        renderer: Renderer,
        category: ToolCategory = ToolCategory.MANUAL,
    ) -> None:
        self.prefs = prefs
        self.name = name
        self.display_name = display_name
        self.renderer = renderer
        self.category = category

    def render(self) -> str:
        return self.renderer(self.prefs)

    def is_installed(self) -> bool:
        return True

    def is_configured(self) -> bool:
        return False

    def configure(self) -> bool:
        console.print()
        console.print(self.render())
        console.print()
        return True

    def uninstall(self) -> bool:
        return True


MANUAL_TOOLS: tuple[tuple[str, str, Renderer], ...] = (
    ("cursor", "Cursor", cursor),
    ("cline", "Cline", cline),
    ("kilo-code", "Kilo Code", kilo_code),
    ("roo-code", "Roo Code", roo_code),
    ("trae", "TRAE", trae),
    ("windsurf", "Windsurf", windsurf),
    ("grok-cli", "Grok CLI", grok_cli),
    ("aider", "Aider", aider),
    ("neovim", "Neovim", neovim),
)


def instruction_adapters(prefs: PreferenceStore) -> list[InstructionsAdapter]:
    adapters = [
        InstructionsAdapter(prefs, name, display_name, renderer)
        for name, display_name, renderer in MANUAL_TOOLS
    ]
    adapters.append(InstructionsAdapter(prefs, "mcp", "MCP Info", mcp_info, category=ToolCategory.MCP))
    return adapters
