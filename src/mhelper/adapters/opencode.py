"""OpenCode adapter: minimax provider in ~/.config/opencode/opencode.json."""

from __future__ import annotations

from mhelper.adapters._json_tool import JsonToolAdapter
from mhelper.core.constants import MODEL_ID, PROVIDER_KEY
from mhelper.core.schema import Flavor
from mhelper.core.sync import MapSlot

SCHEMA_URL = "https://opencode.ai/config.json"


class OpenCodeAdapter(JsonToolAdapter):
    name = "opencode"
    display_name = "OpenCode"
    relative_path = (".config", "opencode", "opencode.json")
    slots = (MapSlot("provider", (PROVIDER_KEY,)),)

    def defaults(self) -> dict:
        return {"$schema": SCHEMA_URL}

    def contribution(self) -> dict:
        return {
            "provider": {
                PROVIDER_KEY: {
                    "npm": "@ai-sdk/anthropic",
                    "options": {
                        "baseURL": f"{self.prefs.base_url(Flavor.ANTHROPIC)}/v1",
                        "apiKey": self.prefs.get_api_key(),
                    },
                    "models": {MODEL_ID: {"name": MODEL_ID}},
                }
            }
        }
