"""Codex CLI adapter: provider and profile sections in ~/.codex/config.toml."""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape

from mhelper.adapters._json_tool import NO_API_KEY
from mhelper.adapters.base import ToolCategory
from mhelper.core.constants import API_KEY_ENV, MODEL_ID, PROVIDER_KEY
from mhelper.core.preferences import PreferenceStore
from mhelper.core.schema import Flavor
from mhelper.core.sync import read_text, sync_text, unsync_text
from mhelper.utils.output import error, hint, info, success
from mhelper.utils.paths import home_dir

PROVIDER_HEADER = f"[model_providers.{PROVIDER_KEY}]"
PROFILE_NAME = "m21"
PROFILE_HEADER = f"[profiles.{PROFILE_NAME}]"


class CodexAdapter:
    """Appends TOML sections as plain text.

    Sections are matched by header only. Once ``[model_providers.minimax]``
    exists, configure leaves the file alone, so hand edits to the section
    body (or a region change) are not rewritten.
    """

    name = "codex"
    display_name = "Codex CLI"
    category = ToolCategory.AUTO
    managed = True

    def __init__(self, prefs: PreferenceStore, home: Path | None = None) -> None:
        self.prefs = prefs
        self.home = home

    @property
    def config_path(self) -> Path:
        return (self.home or home_dir()) / ".codex" / "config.toml"

    def is_installed(self) -> bool:
        return True

    def is_configured(self) -> bool:
        text = read_text(self.config_path)
        return text is not None and PROVIDER_KEY in text

    def render_sections(self) -> str:
        return "\n".join([
            PROVIDER_HEADER,
            'name = "MiniMax Chat Completions API"',
            f'base_url = "{self.prefs.base_url(Flavor.OPENAI)}"',
            f'env_key = "{API_KEY_ENV}"',
            'wire_api = "chat"',
            "requires_openai_auth = false",
            "",
            PROFILE_HEADER,
            f'model = "codex-{MODEL_ID}"',
            f'model_provider = "{PROVIDER_KEY}"',
        ])

    def configure(self) -> bool:
        if not self.prefs.get_api_key():
            error(NO_API_KEY)
            return False
        if not sync_text(self.config_path, PROVIDER_HEADER, self.render_sections()):
            info(escape(f"{PROVIDER_HEADER} already present in {self.config_path}"))
        success(f"{self.display_name} configured ({self.config_path})")
        hint(f'export {API_KEY_ENV}="{self.prefs.get_api_key()}"')
        hint(f"codex --profile {PROFILE_NAME}")
        return True

    def uninstall(self) -> bool:
        unsync_text(self.config_path, (PROVIDER_HEADER, PROFILE_HEADER))
        return True
