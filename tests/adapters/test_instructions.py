"""Tests for instruction-only adapters."""

import pytest

from mhelper.adapters.base import ToolCategory
from mhelper.adapters.instructions import MANUAL_TOOLS, instruction_adapters
from mhelper.core.constants import API_KEY_PLACEHOLDER
from mhelper.core.schema import Region


def _by_name(prefs, name):
    return next(a for a in instruction_adapters(prefs) if a.name == name)


class TestRendering:
    @pytest.mark.parametrize("name", [t[0] for t in MANUAL_TOOLS])
    def test_placeholder_without_key(self, prefs, name):
        assert API_KEY_PLACEHOLDER in _by_name(prefs, name).render()

    @pytest.mark.parametrize("name", [t[0] for t in MANUAL_TOOLS])
    def test_key_when_set(self, keyed_prefs, name):
        text = _by_name(keyed_prefs, name).render()
        assert "sk-test-123" in text
        assert API_KEY_PLACEHOLDER not in text

    def test_cursor_openai_url(self, keyed_prefs):
        assert "https://api.minimax.io/v1" in _by_name(keyed_prefs, "cursor").render()

    def test_cline_entrypoint_follows_region(self, keyed_prefs):
        keyed_prefs.set_region(Region.CHINA)
        assert "api.minimaxi.com" in _by_name(keyed_prefs, "cline").render()

    def test_mcp_info_json(self, keyed_prefs):
        text = _by_name(keyed_prefs, "mcp").render()
        assert "minimax-coding-plan-mcp" in text
        assert "https://api.minimax.io" in text


class TestBehaviour:
    def test_categories(self, prefs):
        adapters = instruction_adapters(prefs)
        assert [a.category for a in adapters[:-1]] == [ToolCategory.MANUAL] * len(MANUAL_TOOLS)
        assert adapters[-1].category is ToolCategory.MCP

    def test_never_configured(self, keyed_prefs):
        for adapter in instruction_adapters(keyed_prefs):
            assert adapter.managed is False
            assert adapter.is_configured() is False

    def test_configure_writes_nothing(self, keyed_prefs, home):
        before = sorted(p.relative_to(home) for p in home.rglob("*"))
        for adapter in instruction_adapters(keyed_prefs):
            assert adapter.configure() is True
            assert adapter.uninstall() is True
            assert adapter.is_configured() is False
        assert sorted(p.relative_to(home) for p in home.rglob("*")) == before
