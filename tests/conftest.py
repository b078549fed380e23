"""Shared test fixtures for tvdbclient tests."""

import json

import httpx
import pytest

from tvdbclient.client import TvdbClient
from tvdbclient.config_schema import ClientConfig
from tvdbclient.error_messages import ErrorMessages
from tvdbclient.json_client import JsonClient

BASE_URL = "https://api.tvdb.test"


class FakeTvdbApi:
    """Canned responses keyed by method and path (query string included)."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method, path, json=None, status=200):
        self.routes[(method, path)] = (status, json)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.raw_path.decode("ascii"))
        if key not in self.routes:
            return httpx.Response(404, json={"Error": "Resource not found"})
        status, body = self.routes[key]
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def body_of(self, request: httpx.Request):
        return json.loads(request.content)


@pytest.fixture
def api():
    """Fake TheTVDB API backing the client transport."""
    return FakeTvdbApi()


@pytest.fixture
def tvdb(api):
    """TvdbClient wired to the fake API."""
    return TvdbClient(base_url=BASE_URL, transport=httpx.MockTransport(api))


@pytest.fixture
def json_client(api):
    """JsonClient wired to the fake API."""
    return JsonClient(base_url=BASE_URL, transport=httpx.MockTransport(api))


@pytest.fixture
def mock_json_client(mocker):
    """Mocked JsonClient with awaitable verbs."""
    client = mocker.Mock(spec=JsonClient)
    client.authorization = None
    client.get_json = mocker.AsyncMock()
    client.post_json = mocker.AsyncMock()
    client.put_json = mocker.AsyncMock()
    client.delete_json = mocker.AsyncMock()
    return client


@pytest.fixture
def error_messages():
    """Default error message table."""
    return ErrorMessages()


@pytest.fixture
def client_config():
    """Sample client configuration."""
    return ClientConfig(
        api_key="test-api-key",
        username="tester",
        user_key="test-user-key",
        base_url=BASE_URL,
        accept_language="en",
        timeout_seconds=5.0,
        log_level="INFO",
        log_path=None,
    )


@pytest.fixture
def sample_series():
    """Sample series payload."""
    return {
        "id": 81189,
        "seriesName": "Breaking Bad",
        "aliases": [],
        "banner": "graphical/81189-g21.jpg",
        "seriesId": "74713",
        "status": "Ended",
        "firstAired": "2008-01-20",
        "network": "AMC",
        "networkId": "",
        "runtime": "45",
        "genre": ["Crime", "Drama"],
        "overview": "A chemistry teacher turned meth cook.",
        "lastUpdated": 1500000000,
        "airsDayOfWeek": "Sunday",
        "airsTime": "9:00 PM",
        "rating": "TV-MA",
        "imdbId": "tt0903747",
        "zap2itId": "SH01009396",
        "added": "2008-02-04 02:25:48",
        "addedBy": 1,
        "siteRating": 9.4,
        "siteRatingCount": 1234,
    }


@pytest.fixture
def sample_episodes():
    """Sample basic episode payloads."""
    return [
        {"id": 349232, "airedSeason": 1, "airedEpisodeNumber": 1, "episodeName": "Pilot"},
        {"id": 349235, "airedSeason": 1, "airedEpisodeNumber": 2, "episodeName": "Cat's in the Bag..."},
    ]
