"""Provider constants shared by the preference store and the tool adapters."""

from __future__ import annotations

MODEL_ID = "MiniMax-M2.1"

# Substrings identifying entries written by mhelper inside shared documents
PROVIDER_KEY = "minimax"
PROVIDER_MARKER = "MiniMax"
MCP_SERVER_NAME = "MiniMax"

GLOBAL_HOST = "api.minimax.io"
CHINA_HOST = "api.minimaxi.com"

MCP_PACKAGE = "minimax-coding-plan-mcp"
MCP_TOOLS = "web_search, understand_image"

API_KEY_ENV = "MINIMAX_API_KEY"
API_KEY_PLACEHOLDER = "<YOUR_MINIMAX_API_KEY>"

DEFAULT_LANGUAGE = "en_US"
LANGUAGES = {
    "en_US": "English",
    "es_ES": "Español",
    "zh_CN": "中文",
}
