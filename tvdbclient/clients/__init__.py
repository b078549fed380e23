"""Resource clients for the TheTVDB API."""

from tvdbclient.clients.authentication import AuthenticationClient, AuthenticationRequest
from tvdbclient.clients.base import BaseClient
from tvdbclient.clients.episodes import EpisodesClient
from tvdbclient.clients.languages import LanguagesClient
from tvdbclient.clients.search import SearchClient
from tvdbclient.clients.series import SeriesClient
from tvdbclient.clients.updates import UpdatesClient

__all__ = [
    "AuthenticationClient",
    "AuthenticationRequest",
    "BaseClient",
    "EpisodesClient",
    "LanguagesClient",
    "SearchClient",
    "SeriesClient",
    "UpdatesClient",
]
