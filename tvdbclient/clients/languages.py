"""Language endpoints."""

from __future__ import annotations

from typing import List

from tvdbclient.clients.base import BaseClient
from tvdbclient.models import Envelope, Language


class LanguagesClient(BaseClient):
    _resource = "languages"

    async def get_all(self) -> Envelope[List[Language]]:
        return await self._get("get_all", "/languages", List[Language])

    async def get(self, language_id: int) -> Envelope[Language]:
        return await self._get("get", f"/languages/{language_id}", Language)
