"""Tool registry: identifier to adapter mapping, built once per process."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from mhelper.adapters._mcp_reg import mcp_adapters
from mhelper.adapters.base import ToolAdapter, ToolCategory
from mhelper.adapters.claude_code import ClaudeCodeAdapter
from mhelper.adapters.codex import CodexAdapter
from mhelper.adapters.continue_dev import ContinueAdapter
from mhelper.adapters.crush import CrushAdapter
from mhelper.adapters.droid import DroidAdapter
from mhelper.adapters.instructions import instruction_adapters
from mhelper.adapters.opencode import OpenCodeAdapter
from mhelper.adapters.zed import ZedAdapter
from mhelper.core.errors import UnknownToolError
from mhelper.core.preferences import PreferenceStore

logger = logging.getLogger(__name__)

_AUTO_CLASSES = (
    ClaudeCodeAdapter,
    DroidAdapter,
    OpenCodeAdapter,
    ContinueAdapter,
    CrushAdapter,
    CodexAdapter,
    ZedAdapter,
)


def build_adapters(prefs: PreferenceStore, home: Path | None = None) -> list[ToolAdapter]:
    """Instantiate every adapter in menu order: auto, manual, then MCP."""
    adapters: list[ToolAdapter] = [cls(prefs, home=home) for cls in _AUTO_CLASSES]
    adapters.extend(instruction_adapters(prefs))
    adapters.extend(mcp_adapters(prefs, home=home))
    return adapters


class ToolRegistry:
    """Fixed set of adapters keyed by tool identifier.

    Adapters hold no state of their own; the configured status of each tool
    is read from disk on every query.
    """

    def __init__(self, prefs: PreferenceStore, home: Path | None = None) -> None:
        self._adapters: dict[str, ToolAdapter] = {}
        for adapter in build_adapters(prefs, home=home):
            if adapter.name in self._adapters:
                raise ValueError(f"Duplicate tool identifier: {adapter.name}")
            self._adapters[adapter.name] = adapter

    def __iter__(self) -> Iterator[ToolAdapter]:
        return iter(self._adapters.values())

    def __len__(self) -> int:
        return len(self._adapters)

    def __contains__(self, name: object) -> bool:
        return name in self._adapters

    def get(self, name: str) -> ToolAdapter:
        try:
            return self._adapters[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def names(self) -> list[str]:
        return list(self._adapters)

    def all(self) -> list[ToolAdapter]:
        return list(self._adapters.values())

    def by_category(self, category: ToolCategory) -> list[ToolAdapter]:
        return [a for a in self if a.category is category]

    def auto_tools(self) -> list[ToolAdapter]:
        return self.by_category(ToolCategory.AUTO)

    def manual_tools(self) -> list[ToolAdapter]:
        return self.by_category(ToolCategory.MANUAL)

    def mcp_tools(self) -> list[ToolAdapter]:
        """MCP hosts mhelper can write to (excludes the MCP info card)."""
        return [a for a in self.by_category(ToolCategory.MCP) if a.managed]

    def managed_tools(self) -> list[ToolAdapter]:
        return [a for a in self if a.managed]

    def configured_tools(self) -> list[ToolAdapter]:
        return [a for a in self.managed_tools() if a.is_configured()]

    def status(self) -> dict[str, bool]:
        """Configured flag for every managed tool."""
        return {a.name: a.is_configured() for a in self.managed_tools()}

    def uninstall_all(self) -> list[str]:
        """Uninstall every configured tool, returning the identifiers touched."""
        removed = []
        for adapter in self.configured_tools():
            adapter.uninstall()
            removed.append(adapter.name)
        logger.info("Uninstalled %d tool configuration(s)", len(removed))
        return removed
