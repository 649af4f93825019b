"""Shared base for adapters that own part of a JSON config file."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from mhelper.adapters.base import ToolCategory
from mhelper.core.preferences import PreferenceStore
from mhelper.core.sync import Slot, load_json, sync_document, unsync_document
from mhelper.utils.output import error, hint, success
from mhelper.utils.paths import home_dir

NO_API_KEY = "API key not set. Run `mhelper config set api_key <key>` first."


class JsonToolAdapter:
    """Adapter for a tool whose config is a JSON object at a fixed path.

    Subclasses declare ``relative_path`` (under the home directory), the
    ``slots`` they own and ``contribution()``; detection defaults to any slot
    holding mhelper's entries.
    """

    name: str = ""
    display_name: str = ""
    category = ToolCategory.AUTO
    managed = True
    relative_path: tuple[str, ...] = ()
    slots: tuple[Slot, ...] = ()

    def __init__(self, prefs: PreferenceStore, home: Path | None = None) -> None:
        self.prefs = prefs
        self.home = home

    @property
    def config_path(self) -> Path:
        return (self.home or home_dir()).joinpath(*self.relative_path)

    def is_installed(self) -> bool:
        return True

    def is_configured(self) -> bool:
        doc = load_json(self.config_path)
        if doc is None:
            return False
        return self.detect(doc)

    def detect(self, doc: dict) -> bool:
        return any(slot.present(doc) for slot in self.slots)

    def contribution(self) -> dict[str, Any]:
        raise NotImplementedError

    def defaults(self) -> dict[str, Any]:
        return {}

    def hints(self) -> list[str]:
        return []

    def configure(self) -> bool:
        if not self.prefs.get_api_key():
            error(NO_API_KEY)
            return False
        sync_document(self.config_path, self.slots, self.contribution(), self.defaults())
        success(f"{self.display_name} configured ({self.config_path})")
        for line in self.hints():
            hint(line)
        return True

    def uninstall(self) -> bool:
        unsync_document(self.config_path, self.slots, self.defaults())
        return True
