"""Login and token refresh against the TheTVDB API."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from tvdbclient.clients.base import BaseClient
from tvdbclient.exceptions import TvdbValidationError, require_text
from tvdbclient.models import AuthenticationResponse

logger = logging.getLogger("tvdbclient")


@dataclass(frozen=True)
class AuthenticationRequest:
    """Credentials for ``POST /login``."""

    api_key: str
    username: str
    user_key: str

    def validate(self) -> None:
        require_text(self.api_key, "api_key")
        require_text(self.username, "username")
        require_text(self.user_key, "user_key")

    def to_json(self) -> dict:
        return {"apikey": self.api_key, "username": self.username, "userkey": self.user_key}


class AuthenticationClient(BaseClient):
    """Obtains bearer tokens and installs them on the shared JSON client.

    The credential is written only after the response has been parsed, so a
    failed or cancelled call leaves the previous credential in place.
    Concurrent authenticate/refresh calls on one client are not serialized;
    the last one to finish wins.
    """

    _resource = "authentication"

    @property
    def is_authenticated(self) -> bool:
        return self.json_client.authorization is not None

    async def authenticate(
        self,
        request: Union[AuthenticationRequest, str, None],
        username: Optional[str] = None,
        user_key: Optional[str] = None,
    ) -> None:
        """Log in with a request object, or with ``api_key, username, user_key``."""
        if request is None and username is None and user_key is None:
            raise TvdbValidationError("request is required")
        if not isinstance(request, AuthenticationRequest):
            request = AuthenticationRequest(
                api_key=require_text(request, "api_key"),
                username=require_text(username, "username"),
                user_key=require_text(user_key, "user_key"),
            )
        request.validate()

        logger.debug(f"Authenticating as {request.username}")
        result = await self._call(
            self._operation("authenticate"),
            self.json_client.post_json("/login", request.to_json()),
        )
        self._install(result.unwrap())
        logger.info(f"Authenticated as {request.username}")

    async def refresh_token(self) -> None:
        """Exchange the current token for a fresh one."""
        result = await self._call(
            self._operation("refresh_token"),
            self.json_client.get_json("/refresh_token"),
        )
        self._install(result.unwrap())
        logger.info("Refreshed authentication token")

    def _install(self, payload: dict) -> None:
        response = AuthenticationResponse.model_validate(payload)
        self.json_client.authorization = f"Bearer {response.token}"
