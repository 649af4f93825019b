"""Tests for mhelper config subcommands."""

import json

from typer.testing import CliRunner

from mhelper.cli.main import app
from mhelper.core.preferences import PreferenceStore
from mhelper.utils.paths import prefs_path

runner = CliRunner()


class TestConfigSetGet:
    def test_set_and_get(self, cli_home):
        result = runner.invoke(app, ["config", "set", "region", "china"])
        assert result.exit_code == 0

        result = runner.invoke(app, ["config", "get", "region"])
        assert result.exit_code == 0
        assert "china" in result.output

    def test_get_json(self, cli_home):
        runner.invoke(app, ["config", "set", "lang", "es_ES"])
        result = runner.invoke(app, ["config", "get", "lang", "--format", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"key": "lang", "value": "es_ES"}

    def test_api_key_is_masked(self, cli_home):
        runner.invoke(app, ["config", "set", "api_key", "sk-abcdefgh-0123456789"])
        result = runner.invoke(app, ["config", "get", "api_key", "-F", "json"])
        assert json.loads(result.output)["value"] == "sk-abcde...6789"
        assert PreferenceStore(prefs_path(cli_home)).get_api_key() == "sk-abcdefgh-0123456789"

    def test_unset_api_key(self, cli_home):
        result = runner.invoke(app, ["config", "get", "api_key", "-F", "json"])
        assert json.loads(result.output) == {"key": "api_key", "value": None}

    def test_invalid_key(self, cli_home):
        result = runner.invoke(app, ["config", "set", "nonexistent", "value"])
        assert result.exit_code == 1

    def test_invalid_value(self, cli_home):
        result = runner.invoke(app, ["config", "set", "region", "mars"])
        assert result.exit_code == 1
        assert not prefs_path(cli_home).exists()

    def test_empty_api_key(self, cli_home):
        result = runner.invoke(app, ["config", "set", "api_key", "  "])
        assert result.exit_code == 1


class TestConfigList:
    def test_defaults(self, cli_home):
        result = runner.invoke(app, ["config", "list", "-F", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"lang": "en_US", "region": "global", "api_key": None}


class TestRevokeKey:
    def test_revoke(self, cli_home):
        runner.invoke(app, ["config", "set", "api_key", "sk-test-123"])
        result = runner.invoke(app, ["config", "revoke-key"])
        assert result.exit_code == 0
        assert PreferenceStore(prefs_path(cli_home)).get_api_key() is None
