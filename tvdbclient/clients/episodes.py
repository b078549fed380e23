"""Episode endpoints."""

from __future__ import annotations

from tvdbclient.clients.base import BaseClient
from tvdbclient.models import Envelope, Episode


class EpisodesClient(BaseClient):
    _resource = "episodes"

    async def get(self, episode_id: int) -> Envelope[Episode]:
        return await self._get("get", f"/episodes/{episode_id}", Episode)
