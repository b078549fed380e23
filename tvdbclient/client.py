"""TvdbClient: one JSON transport shared by every resource client."""

from __future__ import annotations

from typing import Mapping, Optional

import httpx

from tvdbclient.clients import (
    AuthenticationClient,
    EpisodesClient,
    LanguagesClient,
    SearchClient,
    SeriesClient,
    UpdatesClient,
)
from tvdbclient.config_schema import ClientConfig
from tvdbclient.error_messages import ErrorMessages
from tvdbclient.json_client import DEFAULT_BASE_URL, JsonClient


class TvdbClient:
    """Entry point bundling the resource clients.

    All resource clients share one :class:`JsonClient`, so a token installed
    by ``authentication`` is used by every later call. Use as an async
    context manager to close the underlying connection pool::

        async with TvdbClient() as tvdb:
            await tvdb.authentication.authenticate(api_key, username, user_key)
            series = await tvdb.series.get(81189)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        accept_language: Optional[str] = "en",
        timeout: float = 30.0,
        error_messages: Optional[Mapping[str, Mapping[int, str]]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.json_client = JsonClient(
            base_url=base_url,
            accept_language=accept_language,
            timeout=timeout,
            transport=transport,
        )
        self.error_messages = ErrorMessages(error_messages)

        args = (self.json_client, self.error_messages)
        self.authentication = AuthenticationClient(*args)
        self.series = SeriesClient(*args)
        self.episodes = EpisodesClient(*args)
        self.search = SearchClient(*args)
        self.languages = LanguagesClient(*args)
        self.updates = UpdatesClient(*args)

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs) -> "TvdbClient":
        return cls(
            base_url=config.base_url,
            accept_language=config.accept_language,
            timeout=config.timeout_seconds,
            **kwargs,
        )

    @property
    def accept_language(self) -> Optional[str]:
        return self.json_client.accept_language

    @accept_language.setter
    def accept_language(self, value: Optional[str]) -> None:
        self.json_client.accept_language = value

    async def aclose(self) -> None:
        await self.json_client.aclose()

    async def __aenter__(self) -> "TvdbClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
