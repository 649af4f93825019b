"""Exception types raised by the helper."""

from __future__ import annotations


class HelperError(Exception):
    pass


class UnknownToolError(HelperError):
    """Raised when a tool identifier has no registered adapter."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name
