"""Claude Code adapter: MiniMax endpoint via the env map of ~/.claude/settings.json."""

from __future__ import annotations

from mhelper.adapters._json_tool import JsonToolAdapter
from mhelper.core.constants import MODEL_ID, PROVIDER_KEY
from mhelper.core.schema import Flavor
from mhelper.core.sync import MapSlot

ENV_KEYS = (
    "ANTHROPIC_BASE_URL",
    "ANTHROPIC_AUTH_TOKEN",
    "API_TIMEOUT_MS",
    "CLAUDE_CODE_DISABLE_NONESSENTIAL_TRAFFIC",
    "ANTHROPIC_MODEL",
    "ANTHROPIC_SMALL_FAST_MODEL",
    "ANTHROPIC_DEFAULT_SONNET_MODEL",
    "ANTHROPIC_DEFAULT_OPUS_MODEL",
    "ANTHROPIC_DEFAULT_HAIKU_MODEL",
)


class ClaudeCodeAdapter(JsonToolAdapter):
    """Points Claude Code at the Anthropic-compatible MiniMax endpoint.

    Only the variables in ENV_KEYS are written or removed; any other entries
    the user keeps under ``env`` survive both operations.
    """

    name = "claude-code"
    display_name = "Claude Code"
    relative_path = (".claude", "settings.json")
    slots = (MapSlot("env", ENV_KEYS),)

    def detect(self, doc: dict) -> bool:
        env = doc.get("env")
        if not isinstance(env, dict):
            return False
        base_url = env.get("ANTHROPIC_BASE_URL")
        return isinstance(base_url, str) and PROVIDER_KEY in base_url

    def contribution(self) -> dict:
        return {
            "env": {
                "ANTHROPIC_BASE_URL": self.prefs.base_url(Flavor.ANTHROPIC),
                "ANTHROPIC_AUTH_TOKEN": self.prefs.get_api_key(),
                "API_TIMEOUT_MS": "3000000",
                "CLAUDE_CODE_DISABLE_NONESSENTIAL_TRAFFIC": 1,
                "ANTHROPIC_MODEL": MODEL_ID,
                "ANTHROPIC_SMALL_FAST_MODEL": MODEL_ID,
                "ANTHROPIC_DEFAULT_SONNET_MODEL": MODEL_ID,
                "ANTHROPIC_DEFAULT_OPUS_MODEL": MODEL_ID,
                "ANTHROPIC_DEFAULT_HAIKU_MODEL": MODEL_ID,
            }
        }
