"""JSON transport over httpx for the TheTVDB API."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from tvdbclient.exceptions import TvdbServerError

logger = logging.getLogger("tvdbclient")

DEFAULT_BASE_URL = "https://api.thetvdb.com"


class JsonClient:
    """Thin async JSON client holding the shared authorization credential.

    ``authorization`` is the single credential slot for a client instance.
    It is read on every request, and only the authentication client writes
    it. Non-2xx responses raise :class:`TvdbServerError`. Connection
    failures, timeouts and cancellation propagate as-is.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        accept_language: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.accept_language = accept_language
        self._authorization: Optional[str] = None
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
            headers={"Accept": "application/json"},
        )

    @property
    def authorization(self) -> Optional[str]:
        """Current ``Authorization`` header value, e.g. ``Bearer <token>``."""
        return self._authorization

    @authorization.setter
    def authorization(self, value: Optional[str]) -> None:
        self._authorization = value

    async def get_json(self, path: str) -> Any:
        return await self._send("GET", path)

    async def post_json(self, path: str, body: Any) -> Any:
        return await self._send("POST", path, json=body)

    async def put_json(self, path: str) -> Any:
        return await self._send("PUT", path)

    async def delete_json(self, path: str) -> Any:
        return await self._send("DELETE", path)

    async def aclose(self) -> None:
        await self._http.aclose()

    def _headers(self) -> dict:
        headers = {}
        if self._authorization:
            headers["Authorization"] = self._authorization
        if self.accept_language:
            headers["Accept-Language"] = self.accept_language
        return headers

    async def _send(self, method: str, path: str, **kwargs) -> Any:
        logger.debug(f"{method} {path}")
        response = await self._http.request(method, path, headers=self._headers(), **kwargs)

        if response.is_success:
            # 204 and other empty 2xx bodies carry no payload
            if response.status_code == 204 or not response.content:
                return None
            return response.json()

        raise TvdbServerError(_error_message(response), response.status_code)


def _error_message(response: httpx.Response) -> str:
    """Pull the upstream ``Error`` field, falling back to the reason phrase."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("Error"):
        return str(body["Error"])
    return f"{response.status_code} {response.reason_phrase}".strip()
