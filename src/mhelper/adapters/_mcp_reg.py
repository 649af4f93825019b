"""MCP server registration: the MiniMax coding-plan server in each host's JSON config."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from mhelper.adapters._json_tool import JsonToolAdapter
from mhelper.adapters.base import ToolCategory
from mhelper.core.constants import API_KEY_ENV, MCP_PACKAGE, MCP_SERVER_NAME, MCP_TOOLS
from mhelper.core.preferences import PreferenceStore
from mhelper.core.sync import MapSlot


def server_entry(api_key: str | None, api_host: str, extra_args: tuple[str, ...] = ()) -> dict:
    """Build the MCP server entry launched through ``uvx``."""
    return {
        "command": "uvx",
        "args": [MCP_PACKAGE, *extra_args],
        "env": {API_KEY_ENV: api_key, "MINIMAX_API_HOST": api_host},
    }


class McpServerAdapter(JsonToolAdapter):
    """Registers the MiniMax MCP server under ``container`` in a host's config.

    Most hosts use ``mcpServers``; Zed, VS Code and Crush use their own
    container key and want a few extra fields on the entry.
    """

    category = ToolCategory.MCP

    def __init__(
        self,
        prefs: PreferenceStore,
        name: str,
        display_name: str,
        relative_path: tuple[str, ...],
        container: str = "mcpServers",
        extra_fields: dict[str, Any] | None = None,
        extra_args: tuple[str, ...] = (),
        home: Path | None = None,
    ) -> None:
        super().__init__(prefs, home=home)
        self.name = name
        self.display_name = display_name
        self.relative_path = relative_path
        self.container = container
        self.extra_fields = extra_fields or {}
        self.extra_args = extra_args
        self.slots = (MapSlot(container, (MCP_SERVER_NAME,)),)

    def contribution(self) -> dict:
        entry = {
            **self.extra_fields,
            **server_entry(self.prefs.get_api_key(), self.prefs.api_host(), self.extra_args),
        }
        return {self.container: {MCP_SERVER_NAME: entry}}

    def hints(self) -> list[str]:
        return [f"Tools: {MCP_TOOLS}"]


# (name, display name, path under home, container, extra fields, extra args)
MCP_HOSTS: tuple[tuple[str, str, tuple[str, ...], str, dict[str, Any], tuple[str, ...]], ...] = (
    ("mcp-claude-code", "MCP (Claude Code)", (".claude.json",), "mcpServers", {}, ("-y",)),
    ("mcp-cursor", "MCP (Cursor)", (".cursor", "mcp.json"), "mcpServers", {}, ()),
    ("mcp-kiro", "MCP (Kiro)", (".kiro", "settings", "mcp.json"), "mcpServers", {}, ()),
    ("mcp-amazonq", "MCP (Amazon Q)", (".aws", "amazonq", "mcp.json"), "mcpServers", {}, ()),
    ("mcp-droid", "MCP (Droid)", (".factory", "mcp.json"), "mcpServers", {}, ()),
    ("mcp-grok", "MCP (Grok)", (".grok", "mcp.json"), "mcpServers", {}, ()),
    ("mcp-copilot", "MCP (Copilot CLI)", (".copilot", "mcp-config.json"), "mcpServers", {}, ()),
    ("mcp-kilocode", "MCP (Kilocode)", (".kilocode", "mcp.json"), "mcpServers", {}, ()),
    ("mcp-gemini", "MCP (Gemini)", (".gemini", "antigravity", "mcp_config.json"), "mcpServers", {}, ()),
    ("mcp-warp", "MCP (Warp)", (".config", "warp", "mcp.json"), "mcpServers", {}, ()),
    (
        "mcp-claude-desktop",
        "MCP (Claude Desktop)",
        (".config", "Claude", "claude_desktop_config.json"),
        "mcpServers",
        {},
        (),
    ),
    (
        "mcp-zed",
        "MCP (Zed)",
        (".config", "zed", "settings.json"),
        "context_servers",
        {"source": "custom", "enabled": True},
        (),
    ),
    ("mcp-vscode", "MCP (VS Code)", (".config", "Code", "User", "settings.json"), "chat.mcp.servers", {}, ()),
    ("mcp-crush", "MCP (Crush)", (".config", "crush", "crush.json"), "mcp", {"type": "stdio"}, ()),
)


def mcp_adapters(prefs: PreferenceStore, home: Path | None = None) -> list[McpServerAdapter]:
    return [
        McpServerAdapter(
            prefs,
            name,
            display_name,
            relative_path,
            container=container,
            extra_fields=extra_fields,
            extra_args=extra_args,
            home=home,
        )
        for name, display_name, relative_path, container, extra_fields, extra_args in MCP_HOSTS
    ]
