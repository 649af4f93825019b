"""Droid (Factory) adapter: custom model entry in ~/.factory/config.json."""

from __future__ import annotations

from mhelper.adapters._json_tool import JsonToolAdapter
from mhelper.core.constants import MODEL_ID, PROVIDER_MARKER
from mhelper.core.schema import Flavor
from mhelper.core.sync import ArraySlot


class DroidAdapter(JsonToolAdapter):
    name = "droid"
    display_name = "Droid"
    relative_path = (".factory", "config.json")
    slots = (ArraySlot("custom_models", field="model", marker=PROVIDER_MARKER),)

    def contribution(self) -> dict:
        return {
            "custom_models": [
                {
                    "model_display_name": MODEL_ID,
                    "model": MODEL_ID,
                    "base_url": self.prefs.base_url(Flavor.ANTHROPIC),
                    "api_key": self.prefs.get_api_key(),
                    "provider": "anthropic",
                    "max_tokens": 64000,
                }
            ]
        }
