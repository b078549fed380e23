"""Shared plumbing for the TheTVDB resource clients."""

from __future__ import annotations

import logging
from typing import Any, Awaitable

from tvdbclient.error_messages import ErrorMessages
from tvdbclient.exceptions import CallResult, TvdbServerError
from tvdbclient.json_client import JsonClient
from tvdbclient.models import Envelope

logger = logging.getLogger("tvdbclient")


class BaseClient:
    """Routes every transport call through error translation.

    Subclasses set ``_resource`` so operation ids read
    ``"<resource>.<method>"``, matching the keys of :class:`ErrorMessages`.
    """

    _resource: str = ""

    def __init__(self, json_client: JsonClient, error_messages: ErrorMessages) -> None:
        self.json_client = json_client
        self.error_messages = error_messages

    def _operation(self, name: str) -> str:
        return f"{self._resource}.{name}"

    async def _call(self, operation: str, pending: Awaitable[Any]) -> CallResult:
        """Await a transport call and translate server errors.

        A status code mapped for ``operation`` yields a new error carrying
        the mapped message and the original as ``__cause__``. Unmapped codes
        yield the original error. Other exceptions are not caught.
        """
        try:
            return CallResult(value=await pending)
        except TvdbServerError as exc:
            return CallResult(error=self._translate(operation, exc))

    def _translate(self, operation: str, exc: TvdbServerError) -> TvdbServerError:
        message = self.error_messages.lookup(operation, exc.status_code)
        if message is None:
            logger.debug(f"{operation} failed with unmapped status {exc.status_code}: {exc}")
            return exc
        logger.warning(f"{operation} failed ({exc.status_code}): {message}")
        translated = TvdbServerError(message, exc.status_code)
        translated.__cause__ = exc
        return translated

    async def _get(self, name: str, path: str, model: Any) -> Envelope:
        """GET ``path`` and parse the envelope around ``model``."""
        result = await self._call(self._operation(name), self.json_client.get_json(path))
        return Envelope[model].model_validate(result.unwrap())
