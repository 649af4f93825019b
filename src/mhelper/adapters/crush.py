"""Crush adapter: openai-compat provider in ~/.config/crush/crush.json."""

from __future__ import annotations

from mhelper.adapters._json_tool import JsonToolAdapter
from mhelper.core.constants import API_KEY_ENV, MODEL_ID, PROVIDER_KEY
from mhelper.core.schema import Flavor
from mhelper.core.sync import MapSlot


class CrushAdapter(JsonToolAdapter):
    """Crush expands ``$MINIMAX_API_KEY`` itself, so the key stays out of the file."""

    name = "crush"
    display_name = "Crush"
    relative_path = (".config", "crush", "crush.json")
    slots = (MapSlot("providers", (PROVIDER_KEY,)),)

    def contribution(self) -> dict:
        return {
            "providers": {
                PROVIDER_KEY: {
                    "type": "openai-compat",
                    "base_url": self.prefs.base_url(Flavor.OPENAI),
                    "api_key": f"${API_KEY_ENV}",
                    "models": [
                        {
                            "id": MODEL_ID,
                            "name": "MiniMax M2.1",
                            "context_window": 200000,
                            "default_max_tokens": 64000,
                        }
                    ],
                }
            }
        }

    def hints(self) -> list[str]:
        return [f'export {API_KEY_ENV}="{self.prefs.get_api_key()}"']
