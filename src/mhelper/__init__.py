"""MiniMax Helper: configure AI coding tools to use the MiniMax API."""

__version__ = "0.1.0"
