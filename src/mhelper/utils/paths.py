"""Path utilities for the preference file and tool config locations."""

from __future__ import annotations

from pathlib import Path


PREFS_DIR = ".minimax-helper"
PREFS_FILE = "config.yaml"


def home_dir() -> Path:
    """Return the directory tool config paths are resolved against."""
    return Path.home()


def prefs_path(home: Path | None = None) -> Path:
    """Return the per-user preference file (~/.minimax-helper/config.yaml)."""
    return (home or home_dir()) / PREFS_DIR / PREFS_FILE


def mask_key(key: str | None) -> str:
    """Shorten an API key for display: first 8 and last 4 characters."""
    if not key:
        return ""
    if len(key) <= 12:
        return "*" * len(key)
    return f"{key[:8]}...{key[-4:]}"
