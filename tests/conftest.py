"""Shared fixtures: temp home directories, preference stores, registries."""

from __future__ import annotations

from pathlib import Path

import pytest

from mhelper.adapters.registry import ToolRegistry
from mhelper.core.preferences import PreferenceStore
from mhelper.utils.paths import prefs_path

TEST_KEY = "sk-test-123"


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """An empty home directory for tool config files."""
    h = tmp_path / "home"
    h.mkdir()
    return h


@pytest.fixture
def prefs(home: Path) -> PreferenceStore:
    """Preference store with no API key (first run)."""
    return PreferenceStore(prefs_path(home))


@pytest.fixture
def keyed_prefs(prefs: PreferenceStore) -> PreferenceStore:
    """Preference store with the test API key and the global region."""
    prefs.set_api_key(TEST_KEY)
    return prefs


@pytest.fixture
def registry(keyed_prefs: PreferenceStore, home: Path) -> ToolRegistry:
    return ToolRegistry(keyed_prefs, home=home)
