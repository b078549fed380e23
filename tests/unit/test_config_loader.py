"""Tests for tvdbclient.config_loader module."""

import os
import pytest
from pathlib import Path

from tvdbclient.config_loader import (
    load_config, config_from_env, _find_config, _parse_config, _interpolate,
)
from tvdbclient.exceptions import ConfigError
from tvdbclient.json_client import DEFAULT_BASE_URL

FIXTURES = Path(__file__).parent.parent / "fixtures"


class TestInterpolate:
    """Tests for _interpolate function."""

    def test_returns_none_for_none(self):
        assert _interpolate(None) is None

    def test_returns_non_string_unchanged(self):
        assert _interpolate(123) == 123
        assert _interpolate(True) is True

    def test_returns_string_without_vars_unchanged(self):
        assert _interpolate("hello world") == "hello world"

    def test_interpolates_env_var_in_string(self, monkeypatch):
        monkeypatch.setenv("HOST", "api.example")
        assert _interpolate("https://${HOST}/") == "https://api.example/"

    def test_raises_for_missing_env_var(self):
        os.environ.pop("NONEXISTENT_VAR", None)
        with pytest.raises(ConfigError, match="Environment variable not set"):
            _interpolate("${NONEXISTENT_VAR}")

    def test_interpolates_multiple_env_vars(self, monkeypatch):
        monkeypatch.setenv("HOST", "api.example")
        monkeypatch.setenv("PORT", "8443")
        assert _interpolate("https://${HOST}:${PORT}") == "https://api.example:8443"

    def test_empty_env_var_is_allowed(self, monkeypatch):
        monkeypatch.setenv("EMPTY_VAR", "")
        assert _interpolate("x${EMPTY_VAR}y") == "xy"


class TestParseConfig:
    """Tests for _parse_config function."""

    def test_parses_valid_config(self, monkeypatch):
        monkeypatch.setenv("TVDB_TEST_API_KEY", "secret-key")

        config = _parse_config(FIXTURES / "valid_config.yaml")

        assert config.api_key == "secret-key"
        assert config.username == "tester"
        assert config.base_url == "https://api.tvdb.test"
        assert config.accept_language == "de"
        assert config.timeout_seconds == 10.0
        assert config.log_level == "DEBUG"

    def test_parses_minimal_config_with_defaults(self):
        config = _parse_config(FIXTURES / "minimal_config.yaml")

        assert config.base_url == DEFAULT_BASE_URL
        assert config.accept_language == "en"
        assert config.timeout_seconds == 30.0
        assert config.log_path is None

    def test_missing_credentials_raise(self):
        with pytest.raises(ConfigError, match="user_key"):
            _parse_config(FIXTURES / "missing_user_key.yaml")

    def test_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("api_key: [unclosed")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            _parse_config(path)

    def test_non_mapping_raises(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="must be a YAML mapping"):
            _parse_config(path)

    def test_invalid_timeout_raises(self, tmp_path):
        path = tmp_path / "timeout.yaml"
        path.write_text("api_key: k\nusername: u\nuser_key: x\ntimeout_seconds: soon\n")

        with pytest.raises(ConfigError, match="timeout_seconds"):
            _parse_config(path)


class TestLoadConfig:
    """Tests for load_config function."""

    def test_loads_cli_path(self):
        config = load_config(str(FIXTURES / "minimal_config.yaml"))

        assert config.username == "tester"

    def test_missing_cli_path_raises(self, tmp_path):
        with pytest.raises(ConfigError, match="Config file not found"):
            load_config(str(tmp_path / "nope.yaml"))

    def test_searches_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / "tvdb.yaml").write_text("api_key: k\nusername: local\nuser_key: x\n")
        monkeypatch.chdir(tmp_path)

        assert load_config().username == "local"

    def test_no_config_found_raises(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(Path, "home", lambda: tmp_path)

        with pytest.raises(ConfigError, match="No config file found"):
            load_config()


class TestFindConfig:
    """Tests for _find_config function."""

    def test_returns_first_existing_path(self, tmp_path):
        first = tmp_path / "a.yaml"
        second = tmp_path / "b.yaml"
        second.write_text("api_key: k\n")
        third = tmp_path / "c.yaml"
        third.write_text("api_key: k\n")

        assert _find_config([first, second, third]) == second

    def test_lists_searched_paths(self, tmp_path):
        missing = tmp_path / "missing.yaml"

        with pytest.raises(ConfigError, match="missing.yaml"):
            _find_config([missing])


class TestConfigFromEnv:
    """Tests for config_from_env function."""

    def test_reads_tvdb_variables(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("TVDB_API_KEY", "k")
        monkeypatch.setenv("TVDB_USERNAME", "u")
        monkeypatch.setenv("TVDB_USER_KEY", "x")
        monkeypatch.setenv("TVDB_LANGUAGE", "fr")
        monkeypatch.setenv("TVDB_TIMEOUT", "12.5")

        config = config_from_env()

        assert config.api_key == "k"
        assert config.accept_language == "fr"
        assert config.timeout_seconds == 12.5

    def test_missing_variable_raises(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("TVDB_API_KEY", "k")
        monkeypatch.setenv("TVDB_USERNAME", "u")
        monkeypatch.delenv("TVDB_USER_KEY", raising=False)

        with pytest.raises(ConfigError, match="environment missing required field: user_key"):
            config_from_env()
