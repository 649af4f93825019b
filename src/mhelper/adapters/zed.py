"""Zed adapter: OpenAI-compatible language model in ~/.config/zed/settings.json."""

from __future__ import annotations

from mhelper.adapters._json_tool import JsonToolAdapter
from mhelper.core.constants import MODEL_ID, PROVIDER_KEY
from mhelper.core.schema import Flavor
from mhelper.core.sync import MapSlot, load_json, unsync_document


class ZedAdapter(JsonToolAdapter):
    """Zed has a single ``openai`` slot under ``language_models``.

    The slot is only counted as ours when its ``api_url`` points at MiniMax,
    and uninstall leaves it alone otherwise. Zed reads the key from
    OPENAI_API_KEY, which is printed as a hint.
    """

    name = "zed"
    display_name = "Zed"
    relative_path = (".config", "zed", "settings.json")
    slots = (
        MapSlot("language_models", ("openai",)),
        MapSlot("assistant", ("default_model",)),
    )

    def detect(self, doc: dict) -> bool:
        models = doc.get("language_models")
        openai = models.get("openai") if isinstance(models, dict) else None
        api_url = openai.get("api_url") if isinstance(openai, dict) else None
        return isinstance(api_url, str) and PROVIDER_KEY in api_url

    def contribution(self) -> dict:
        return {
            "language_models": {
                "openai": {
                    "api_url": self.prefs.base_url(Flavor.OPENAI),
                    "available_models": [{"name": MODEL_ID, "max_tokens": 64000}],
                }
            },
            "assistant": {
                "default_model": {"provider": "openai", "model": MODEL_ID},
            },
        }

    def hints(self) -> list[str]:
        return [f'export OPENAI_API_KEY="{self.prefs.get_api_key()}"']

    def uninstall(self) -> bool:
        doc = load_json(self.config_path)
        if doc is not None and self.detect(doc):
            unsync_document(self.config_path, self.slots)
        return True
