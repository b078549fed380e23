"""YAML configuration loader with env var interpolation."""

import os
import re
import yaml
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from tvdbclient.config_schema import ClientConfig
from tvdbclient.exceptions import ConfigError
from tvdbclient.json_client import DEFAULT_BASE_URL

REQUIRED_FIELDS = ("api_key", "username", "user_key")
_ENV_VAR = re.compile(r"\$\{([^}]+)\}")


def load_config(cli_path: "Optional[str]" = None) -> ClientConfig:
    """Load configuration from YAML file.

    An explicit ``cli_path`` must exist. Otherwise the first of
    ./tvdb.yaml, ~/.config/tvdbclient/config.yaml and
    /etc/tvdbclient/config.yaml that exists is used.
    """
    load_dotenv()

    if cli_path:
        config_path = Path(cli_path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {cli_path}")
        return _parse_config(config_path)

    return _parse_config(_find_config(_search_paths()))


def _search_paths() -> List[Path]:
    return [
        Path("./tvdb.yaml"),
        Path.home() / ".config" / "tvdbclient" / "config.yaml",
        Path("/etc/tvdbclient/config.yaml"),
    ]


def _find_config(candidates: List[Path]) -> Path:
    found = next((path for path in candidates if path.exists()), None)
    if found is None:
        searched = "\n  ".join(str(p) for p in candidates)
        raise ConfigError(
            f"No config file found. Searched:\n  {searched}\n\n"
            "Create tvdb.yaml or pass --config"
        )
    return found


def config_from_env() -> ClientConfig:
    """Build configuration from TVDB_* environment variables."""
    load_dotenv()
    raw = {
        "api_key": os.environ.get("TVDB_API_KEY"),
        "username": os.environ.get("TVDB_USERNAME"),
        "user_key": os.environ.get("TVDB_USER_KEY"),
        "base_url": os.environ.get("TVDB_BASE_URL", DEFAULT_BASE_URL),
        "accept_language": os.environ.get("TVDB_LANGUAGE", "en"),
        "timeout_seconds": os.environ.get("TVDB_TIMEOUT", 30),
        "log_level": os.environ.get("TVDB_LOG_LEVEL", "INFO"),
        "log_path": os.environ.get("TVDB_LOG_PATH"),
    }
    return _build(raw, source="environment")


def _parse_config(path: Path) -> ClientConfig:
    """Parse YAML config file."""
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")

    if not isinstance(raw, dict):
        raise ConfigError(f"Config must be a YAML mapping, got {type(raw).__name__}")

    return _build({key: _interpolate(value) for key, value in raw.items()}, source=str(path))


def _build(raw: dict, source: str) -> ClientConfig:
    for field in REQUIRED_FIELDS:
        value = raw.get(field)
        if value is None or not str(value).strip():
            raise ConfigError(f"{source} missing required field: {field}")

    try:
        timeout = float(raw.get("timeout_seconds") or 30)
    except (TypeError, ValueError):
        raise ConfigError(f"{source} has invalid timeout_seconds: {raw.get('timeout_seconds')}")

    return ClientConfig(
        api_key=str(raw["api_key"]),
        username=str(raw["username"]),
        user_key=str(raw["user_key"]),
        base_url=(raw.get("base_url") or DEFAULT_BASE_URL).rstrip("/"),
        accept_language=raw.get("accept_language") or "en",
        timeout_seconds=timeout,
        log_level=(raw.get("log_level") or "INFO").upper(),
        log_path=raw.get("log_path"),
    )


def _interpolate(value: "Optional[str]") -> "Optional[str]":
    """Expand ${VAR} references in a string value."""
    if value is None:
        return None
    if not isinstance(value, str):
        return value

    return _ENV_VAR.sub(_env_lookup, value)


def _env_lookup(match: "re.Match") -> str:
    name = match.group(1)
    if name not in os.environ:
        raise ConfigError(f"Environment variable not set: {name}")
    return os.environ[name]
