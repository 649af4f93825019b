"""Tests for the Droid, Continue, OpenCode, Crush and Zed adapters."""

import json

from mhelper.adapters.continue_dev import ContinueAdapter
from mhelper.adapters.crush import CrushAdapter
from mhelper.adapters.droid import DroidAdapter
from mhelper.adapters.opencode import SCHEMA_URL, OpenCodeAdapter
from mhelper.adapters.zed import ZedAdapter


def _write(path, doc):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(doc))


def _read(path):
    return json.loads(path.read_text())


class TestDroid:
    def test_replaces_old_minimax_model(self, keyed_prefs, home):
        adapter = DroidAdapter(keyed_prefs, home=home)
        _write(adapter.config_path, {"custom_models": [
            {"model": "MiniMax-Old", "api_key": "stale"},
            {"model": "Some-Other-Model"},
        ]})
        adapter.configure()
        models = _read(adapter.config_path)["custom_models"]
        assert [m["model"] for m in models] == ["Some-Other-Model", "MiniMax-M2.1"]
        assert models[1]["api_key"] == "sk-test-123"
        assert models[1]["base_url"] == "https://api.minimax.io/anthropic"

    def test_repeat_configure_keeps_one_entry(self, keyed_prefs, home):
        adapter = DroidAdapter(keyed_prefs, home=home)
        adapter.configure()
        adapter.configure()
        models = _read(adapter.config_path)["custom_models"]
        assert len([m for m in models if "MiniMax" in m["model"]]) == 1

    def test_uninstall_keeps_other_models(self, keyed_prefs, home):
        adapter = DroidAdapter(keyed_prefs, home=home)
        _write(adapter.config_path, {"custom_models": [{"model": "Some-Other-Model"}]})
        adapter.configure()
        adapter.uninstall()
        assert _read(adapter.config_path) == {"custom_models": [{"model": "Some-Other-Model"}]}


class TestContinue:
    def test_matches_on_title(self, keyed_prefs, home):
        adapter = ContinueAdapter(keyed_prefs, home=home)
        _write(adapter.config_path, {"models": [
            {"title": "MiniMax-Old", "model": "x"},
            {"title": "GPT", "model": "MiniMax-lookalike"},
        ]})
        adapter.configure()
        titles = [m["title"] for m in _read(adapter.config_path)["models"]]
        assert titles == ["GPT", "MiniMax-M2.1"]

    def test_uses_openai_base_url(self, keyed_prefs, home):
        adapter = ContinueAdapter(keyed_prefs, home=home)
        adapter.configure()
        model = _read(adapter.config_path)["models"][0]
        assert model["apiBase"] == "https://api.minimax.io/v1"
        assert model["provider"] == "openai"


class TestOpenCode:
    def test_adds_schema_and_provider(self, keyed_prefs, home):
        adapter = OpenCodeAdapter(keyed_prefs, home=home)
        adapter.configure()
        doc = _read(adapter.config_path)
        assert doc["$schema"] == SCHEMA_URL
        options = doc["provider"]["minimax"]["options"]
        assert options["baseURL"] == "https://api.minimax.io/anthropic/v1"
        assert options["apiKey"] == "sk-test-123"

    def test_uninstall_drops_schema_it_added(self, keyed_prefs, home):
        adapter = OpenCodeAdapter(keyed_prefs, home=home)
        adapter.configure()
        adapter.uninstall()
        assert _read(adapter.config_path) == {}

    def test_uninstall_keeps_schema_beside_user_settings(self, keyed_prefs, home):
        adapter = OpenCodeAdapter(keyed_prefs, home=home)
        _write(adapter.config_path, {"$schema": SCHEMA_URL, "theme": "opencode"})
        adapter.configure()
        adapter.uninstall()
        assert _read(adapter.config_path) == {"$schema": SCHEMA_URL, "theme": "opencode"}

    def test_keeps_other_providers(self, keyed_prefs, home):
        adapter = OpenCodeAdapter(keyed_prefs, home=home)
        _write(adapter.config_path, {"provider": {"ollama": {"npm": "x"}}})
        adapter.configure()
        assert set(_read(adapter.config_path)["provider"]) == {"ollama", "minimax"}
        adapter.uninstall()
        assert _read(adapter.config_path)["provider"] == {"ollama": {"npm": "x"}}


class TestCrush:
    def test_key_stays_in_environment(self, keyed_prefs, home):
        adapter = CrushAdapter(keyed_prefs, home=home)
        adapter.configure()
        provider = _read(adapter.config_path)["providers"]["minimax"]
        assert provider["api_key"] == "$MINIMAX_API_KEY"
        assert "sk-test-123" not in adapter.config_path.read_text()

    def test_hint_exports_key(self, keyed_prefs, home):
        assert CrushAdapter(keyed_prefs, home=home).hints() == ['export MINIMAX_API_KEY="sk-test-123"']


class TestZed:
    def test_merges_into_existing_settings(self, keyed_prefs, home):
        adapter = ZedAdapter(keyed_prefs, home=home)
        _write(adapter.config_path, {
            "language_models": {"anthropic": {"version": "1"}},
            "assistant": {"version": "2"},
        })
        adapter.configure()
        doc = _read(adapter.config_path)
        assert set(doc["language_models"]) == {"anthropic", "openai"}
        assert doc["assistant"] == {
            "version": "2",
            "default_model": {"provider": "openai", "model": "MiniMax-M2.1"},
        }
        adapter.uninstall()
        assert _read(adapter.config_path) == {
            "language_models": {"anthropic": {"version": "1"}},
            "assistant": {"version": "2"},
        }

    def test_foreign_openai_slot_left_alone(self, keyed_prefs, home):
        adapter = ZedAdapter(keyed_prefs, home=home)
        original = {
            "language_models": {"openai": {"api_url": "https://api.openai.com/v1"}},
            "assistant": {"default_model": {"provider": "openai", "model": "gpt-4o"}},
        }
        _write(adapter.config_path, original)
        assert adapter.is_configured() is False
        adapter.uninstall()
        assert _read(adapter.config_path) == original

    def test_commented_settings_survive(self, keyed_prefs, home):
        adapter = ZedAdapter(keyed_prefs, home=home)
        adapter.config_path.parent.mkdir(parents=True)
        adapter.config_path.write_text(
            '// Zed settings\n//\n// For information on how to configure Zed, see the docs.\n'
            '{\n  "theme": "One Dark",\n  "vim_mode": true, // modal editing\n}\n'
        )
        adapter.configure()
        doc = _read(adapter.config_path)
        assert doc["theme"] == "One Dark"
        assert doc["vim_mode"] is True
        assert adapter.is_configured() is True
        adapter.uninstall()
        assert _read(adapter.config_path) == {"theme": "One Dark", "vim_mode": True}
