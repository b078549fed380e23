"""Filter and query objects accepted by the resource clients."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from tvdbclient.query import QueryParameter, query_parameters


class KeyType(enum.Enum):
    """Image categories for ``/series/{id}/images/query``."""
    FANART = "fanart"
    POSTER = "poster"
    SEASON = "season"
    SEASONWIDE = "seasonwide"
    SERIES = "series"


class SeriesFilter(enum.Flag):
    """Series fields selectable through ``/series/{id}/filter?keys=``."""
    ADDED = enum.auto()
    ADDED_BY = enum.auto()
    AIRS_DAY_OF_WEEK = enum.auto()
    AIRS_TIME = enum.auto()
    ALIASES = enum.auto()
    BANNER = enum.auto()
    FIRST_AIRED = enum.auto()
    GENRE = enum.auto()
    ID = enum.auto()
    IMDB_ID = enum.auto()
    LAST_UPDATED = enum.auto()
    NETWORK = enum.auto()
    NETWORK_ID = enum.auto()
    OVERVIEW = enum.auto()
    RATING = enum.auto()
    RUNTIME = enum.auto()
    SERIES_ID = enum.auto()
    SERIES_NAME = enum.auto()
    SITE_RATING = enum.auto()
    SITE_RATING_COUNT = enum.auto()
    STATUS = enum.auto()
    ZAP2IT_ID = enum.auto()


@dataclass(frozen=True)
class EpisodeQuery:
    """Filter for ``/series/{id}/episodes/query``."""

    absolute_number: Optional[int] = None
    aired_episode: Optional[int] = None
    aired_season: Optional[int] = None
    dvd_episode: Optional[float] = None
    dvd_season: Optional[int] = None
    first_aired: Optional[str] = None
    imdb_id: Optional[str] = None

    __query_parameters__: ClassVar[Tuple[QueryParameter, ...]] = query_parameters(
        "absolute_number",
        "aired_episode",
        "aired_season",
        "dvd_episode",
        "dvd_season",
        "first_aired",
        "imdb_id",
    )


@dataclass(frozen=True)
class ImagesQuery:
    """Filter for ``/series/{id}/images/query``."""

    key_type: Optional[KeyType] = None
    resolution: Optional[str] = None
    sub_key: Optional[str] = None

    __query_parameters__: ClassVar[Tuple[QueryParameter, ...]] = query_parameters(
        "key_type",
        "resolution",
        "sub_key",
    )


@dataclass(frozen=True)
class SearchQuery:
    """Filter for ``/search/series``. Set exactly one field."""

    name: Optional[str] = None
    imdb_id: Optional[str] = None
    zap2it_id: Optional[str] = None

    __query_parameters__: ClassVar[Tuple[QueryParameter, ...]] = query_parameters(
        "name",
        "imdb_id",
        "zap2it_id",
    )


@dataclass(frozen=True)
class UpdatesQuery:
    """Filter for ``/updated/query``, times in epoch seconds."""

    from_time: Optional[int] = None
    to_time: Optional[int] = None

    __query_parameters__: ClassVar[Tuple[QueryParameter, ...]] = query_parameters(
        "from_time",
        "to_time",
    )
