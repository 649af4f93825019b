"""PreferenceStore: API key, region and language persisted as YAML."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from mhelper.core.schema import Flavor, Preferences, Region
from mhelper.utils.paths import prefs_path

logger = logging.getLogger(__name__)


def _valid_fields(data: dict) -> dict:
    """Keep each known field that validates on its own; the rest take defaults."""
    valid = {}
    for name, value in data.items():
        if name not in Preferences.model_fields:
            continue
        try:
            Preferences.model_validate({name: value})
        except ValidationError:
            logger.debug("Ignoring invalid preference %r", name)
            continue
        valid[name] = value
    return valid


class PreferenceStore:
    """Reads and writes the preference file.

    The record is loaded once on construction. Every setter rewrites the
    whole file immediately; there is no batching.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or prefs_path()
        self._prefs = self._load()

    def _load(self) -> Preferences:
        if not self.path.is_file():
            return Preferences()
        try:
            data = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.debug("Unreadable preference file %s, using defaults: %s", self.path, e)
            return Preferences()
        if not isinstance(data, dict):
            logger.debug("Preference file %s is not a mapping, using defaults", self.path)
            return Preferences()
        return Preferences.model_validate(_valid_fields(data))

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = self._prefs.model_dump(mode="json", exclude_none=True)
        self.path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")
        logger.debug("Wrote preferences to %s", self.path)

    def snapshot(self) -> Preferences:
        return self._prefs.model_copy()

    def is_first_run(self) -> bool:
        return not self.path.exists()

    # -- Language --

    def get_language(self) -> str:
        return self._prefs.lang

    def set_language(self, tag: str) -> None:
        self._prefs.lang = tag
        self._save()

    # -- Region --

    def get_region(self) -> Region:
        return self._prefs.region

    def set_region(self, region: Region | str) -> None:
        self._prefs.region = Region(region)
        self._save()

    # -- API key --

    def get_api_key(self) -> str | None:
        return self._prefs.api_key or None

    def set_api_key(self, key: str) -> None:
        self._prefs.api_key = key
        self._save()

    def revoke_api_key(self) -> None:
        self._prefs.api_key = None
        self._save()

    # -- Endpoints --

    def resolve_endpoint_host(self, region: Region | str | None = None) -> str:
        return Region(region or self._prefs.region).host

    def api_host(self) -> str:
        """Origin passed to the MCP server as MINIMAX_API_HOST."""
        return f"https://{self.resolve_endpoint_host()}"

    def base_url(self, flavor: Flavor | str = Flavor.ANTHROPIC) -> str:
        suffix = "v1" if Flavor(flavor) is Flavor.OPENAI else "anthropic"
        return f"{self.api_host()}/{suffix}"
