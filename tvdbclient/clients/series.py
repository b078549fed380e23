"""Series endpoints: ``/series/{id}/...``."""

from __future__ import annotations

import logging
from typing import List

from tvdbclient.clients.base import BaseClient
from tvdbclient.exceptions import TvdbValidationError
from tvdbclient.filters import EpisodeQuery, ImagesQuery, SeriesFilter
from tvdbclient.models import (
    Actor,
    BasicEpisode,
    Envelope,
    EpisodesSummary,
    Image,
    ImageQueryParam,
    ImagesSummary,
    Series,
    SeriesFilterResult,
)
from tvdbclient.query import append_query, flag_names

logger = logging.getLogger("tvdbclient")


class SeriesClient(BaseClient):
    """Client for a single series and its episodes, actors and images."""

    _resource = "series"

    async def get(self, series_id: int) -> Envelope[Series]:
        return await self._get("get", f"/series/{series_id}", Series)

    async def get_actors(self, series_id: int) -> Envelope[List[Actor]]:
        return await self._get("get_actors", f"/series/{series_id}/actors", List[Actor])

    async def get_episodes(self, series_id: int, page: int = 1) -> Envelope[List[BasicEpisode]]:
        """Fetch one page of episodes. Pages below 1 are clamped to 1."""
        return await self._get(
            "get_episodes",
            f"/series/{series_id}/episodes?page={max(page, 1)}",
            List[BasicEpisode],
        )

    async def get_all_episodes(self, series_id: int) -> List[BasicEpisode]:
        """Fetch every page of episodes, following ``links.next``."""
        episodes: List[BasicEpisode] = []
        page = 1
        while True:
            envelope = await self.get_episodes(series_id, page)
            episodes.extend(envelope.data)
            next_page = envelope.links.next if envelope.links else None
            if not next_page or next_page <= page:
                break
            page = next_page
        logger.debug(f"Fetched {len(episodes)} episodes for series {series_id} in {page} page(s)")
        return episodes

    async def get_episodes_summary(self, series_id: int) -> Envelope[EpisodesSummary]:
        return await self._get(
            "get_episodes_summary",
            f"/series/{series_id}/episodes/summary",
            EpisodesSummary,
        )

    async def search_episodes(
        self,
        series_id: int,
        query: EpisodeQuery,
        page: int = 1,
    ) -> Envelope[List[BasicEpisode]]:
        """Query episodes by number, season or air date."""
        if query is None:
            raise TvdbValidationError("query is required")
        path = append_query(f"/series/{series_id}/episodes/query?page={max(page, 1)}", query)
        return await self._get("search_episodes", path, List[BasicEpisode])

    async def get_images(self, series_id: int) -> Envelope[ImagesSummary]:
        return await self._get("get_images", f"/series/{series_id}/images", ImagesSummary)

    async def get_images_query(self, series_id: int, query: ImagesQuery) -> Envelope[List[Image]]:
        if query is None:
            raise TvdbValidationError("query is required")
        return await self._get(
            "get_images_query",
            append_query(f"/series/{series_id}/images/query", query),
            List[Image],
        )

    async def get_images_query_params(self, series_id: int) -> Envelope[List[ImageQueryParam]]:
        return await self._get(
            "get_images_query_params",
            f"/series/{series_id}/images/query/params",
            List[ImageQueryParam],
        )

    async def get_with_filter(self, series_id: int, keys: SeriesFilter) -> Envelope[SeriesFilterResult]:
        """Fetch only the series fields selected by ``keys``."""
        if not keys:
            raise TvdbValidationError("keys must select at least one field")
        return await self._get(
            "get_with_filter",
            f"/series/{series_id}/filter?keys={','.join(flag_names(keys))}",
            SeriesFilterResult,
        )
