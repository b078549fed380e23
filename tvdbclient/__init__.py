"""tvdbclient - Async client for the TheTVDB JSON API."""

__description__ = "Async client for the TheTVDB JSON API."
__version__ = "0.3.0"

from tvdbclient.client import TvdbClient
from tvdbclient.clients import AuthenticationRequest
from tvdbclient.config_loader import load_config, config_from_env
from tvdbclient.config_schema import ClientConfig
from tvdbclient.error_messages import ErrorMessages
from tvdbclient.exceptions import (
    ConfigError,
    TvdbError,
    TvdbServerError,
    TvdbValidationError,
)
from tvdbclient.filters import EpisodeQuery, ImagesQuery, KeyType, SearchQuery, SeriesFilter
from tvdbclient.logging_setup import setup_logging
from tvdbclient.models import Envelope
from tvdbclient.query import to_query_string

__all__ = [
    "AuthenticationRequest",
    "ClientConfig",
    "ConfigError",
    "Envelope",
    "EpisodeQuery",
    "ErrorMessages",
    "ImagesQuery",
    "KeyType",
    "SearchQuery",
    "SeriesFilter",
    "TvdbClient",
    "TvdbError",
    "TvdbServerError",
    "TvdbValidationError",
    "config_from_env",
    "load_config",
    "setup_logging",
    "to_query_string",
]
