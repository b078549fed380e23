"""Series search endpoints."""

from __future__ import annotations

from typing import List

from tvdbclient.clients.base import BaseClient
from tvdbclient.exceptions import TvdbValidationError, require_text
from tvdbclient.filters import SearchQuery
from tvdbclient.models import Envelope, SeriesSearchResult
from tvdbclient.query import to_query_string


class SearchClient(BaseClient):
    """Search series by name, IMDb id or Zap2it id."""

    _resource = "search"

    async def search_series(self, query: SearchQuery) -> Envelope[List[SeriesSearchResult]]:
        if query is None:
            raise TvdbValidationError("query is required")
        fields = [query.name, query.imdb_id, query.zap2it_id]
        if sum(value is not None for value in fields) != 1:
            raise TvdbValidationError("query must set exactly one of name, imdb_id or zap2it_id")
        fragment = to_query_string(query)
        return await self._get(
            "search_series",
            f"/search/series?{fragment}",
            List[SeriesSearchResult],
        )

    async def search_series_by_name(self, name: str) -> Envelope[List[SeriesSearchResult]]:
        return await self.search_series(SearchQuery(name=require_text(name, "name")))

    async def search_series_by_imdb_id(self, imdb_id: str) -> Envelope[List[SeriesSearchResult]]:
        return await self.search_series(SearchQuery(imdb_id=require_text(imdb_id, "imdb_id")))

    async def search_series_by_zap2it_id(self, zap2it_id: str) -> Envelope[List[SeriesSearchResult]]:
        return await self.search_series(SearchQuery(zap2it_id=require_text(zap2it_id, "zap2it_id")))

    async def get_search_params(self) -> Envelope[List[str]]:
        """List the parameter names ``/search/series`` accepts."""
        envelope = await self._get("get_search_params", "/search/series/params", dict)
        params = envelope.data.get("params", [])
        return Envelope[List[str]](data=params, links=envelope.links, errors=envelope.errors)
