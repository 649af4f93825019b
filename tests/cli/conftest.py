"""CLI fixtures: point the home directory at a temp dir."""

from __future__ import annotations

import pytest


@pytest.fixture
def cli_home(monkeypatch, home):
    """Redirect mhelper's home directory (preferences and tool configs)."""
    monkeypatch.setattr("mhelper.utils.paths.home_dir", lambda: home)
    return home
