"""Pydantic v2 models for the persisted preference record."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from mhelper.core.constants import CHINA_HOST, DEFAULT_LANGUAGE, GLOBAL_HOST


class Region(str, Enum):
    GLOBAL = "global"
    CHINA = "china"

    @property
    def host(self) -> str:
        return CHINA_HOST if self is Region.CHINA else GLOBAL_HOST


class Flavor(str, Enum):
    """API dialect a tool speaks; selects the base URL suffix."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"


class Preferences(BaseModel):
    lang: str = DEFAULT_LANGUAGE
    region: Region = Region.GLOBAL
    api_key: str | None = None
