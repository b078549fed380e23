"""Configuration data classes."""

from dataclasses import dataclass
from typing import Optional

from tvdbclient.json_client import DEFAULT_BASE_URL


@dataclass
class ClientConfig:
    """Connection and credential settings for a TvdbClient."""
    api_key: str
    username: str
    user_key: str
    base_url: str = DEFAULT_BASE_URL
    accept_language: str = "en"
    timeout_seconds: float = 30.0
    log_level: str = "INFO"
    log_path: Optional[str] = None
