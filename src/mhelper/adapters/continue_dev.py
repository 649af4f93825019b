"""Continue adapter: model entry in ~/.continue/config.json."""

from __future__ import annotations

from mhelper.adapters._json_tool import JsonToolAdapter
from mhelper.core.constants import MODEL_ID, PROVIDER_MARKER
from mhelper.core.schema import Flavor
from mhelper.core.sync import ArraySlot


class ContinueAdapter(JsonToolAdapter):
    name = "continue"
    display_name = "Continue"
    relative_path = (".continue", "config.json")
    slots = (ArraySlot("models", field="title", marker=PROVIDER_MARKER),)

    def contribution(self) -> dict:
        return {
            "models": [
                {
                    "title": MODEL_ID,
                    "provider": "openai",
                    "model": MODEL_ID,
                    "apiBase": self.prefs.base_url(Flavor.OPENAI),
                    "apiKey": self.prefs.get_api_key(),
                }
            ]
        }
