"""ToolAdapter: interface shared by every configurable tool."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


class ToolCategory(str, Enum):
    AUTO = "auto"
    MANUAL = "manual"
    MCP = "mcp"


@runtime_checkable
class ToolAdapter(Protocol):
    """Interface that all tool adapters must implement."""

    name: str
    display_name: str
    category: ToolCategory
    managed: bool

    def is_installed(self) -> bool:
        """Check if the tool appears present. Always True for now."""
        ...

    def is_configured(self) -> bool:
        """Check the tool's config file for mhelper's entries. Never raises."""
        ...

    def configure(self) -> bool:
        """Write mhelper's entries into the tool's config file."""
        ...

    def uninstall(self) -> bool:
        """Remove mhelper's entries from the tool's config file."""
        ...
