"""Response models for the TheTVDB API.

Every successful response is wrapped in an :class:`Envelope` holding the
payload under ``data`` plus optional paging ``links`` and soft ``errors``.
Field names follow the upstream JSON in lower camel case.
"""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from tvdbclient.query import lower_camel

T = TypeVar("T")


class TvdbModel(BaseModel):
    """Base model mapping snake_case attributes to camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=lower_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Links(TvdbModel):
    """Paging links, given as page numbers."""
    first: Optional[int] = None
    last: Optional[int] = None
    next: Optional[int] = None
    prev: Optional[int] = None


class ErrorsInfo(TvdbModel):
    """Soft errors reported alongside a successful payload."""
    invalid_filters: Optional[List[str]] = None
    invalid_language: Optional[str] = None
    invalid_query_params: Optional[List[str]] = None


class Envelope(TvdbModel, Generic[T]):
    """Wrapper around every 2xx response body."""
    data: T
    links: Optional[Links] = None
    errors: Optional[ErrorsInfo] = None


class AuthenticationResponse(TvdbModel):
    token: str


class Series(TvdbModel):
    id: int
    series_name: Optional[str] = None
    aliases: List[str] = Field(default_factory=list)
    banner: Optional[str] = None
    series_id: Optional[str] = None
    status: Optional[str] = None
    first_aired: Optional[str] = None
    network: Optional[str] = None
    network_id: Optional[str] = None
    runtime: Optional[str] = None
    genre: List[str] = Field(default_factory=list)
    overview: Optional[str] = None
    last_updated: Optional[int] = None
    airs_day_of_week: Optional[str] = None
    airs_time: Optional[str] = None
    rating: Optional[str] = None
    imdb_id: Optional[str] = None
    zap2it_id: Optional[str] = None
    added: Optional[str] = None
    added_by: Optional[int] = None
    site_rating: Optional[float] = None
    site_rating_count: Optional[int] = None


class SeriesFilterResult(Series):
    """Partial series from ``/series/{id}/filter``; only the selected keys are present."""
    id: Optional[int] = None


class SeriesSearchResult(TvdbModel):
    id: int
    series_name: Optional[str] = None
    aliases: List[str] = Field(default_factory=list)
    banner: Optional[str] = None
    first_aired: Optional[str] = None
    network: Optional[str] = None
    overview: Optional[str] = None
    status: Optional[str] = None
    slug: Optional[str] = None


class BasicEpisode(TvdbModel):
    id: int
    absolute_number: Optional[int] = None
    aired_episode_number: Optional[int] = None
    aired_season: Optional[int] = None
    dvd_episode_number: Optional[float] = None
    dvd_season: Optional[int] = None
    episode_name: Optional[str] = None
    first_aired: Optional[str] = None
    last_updated: Optional[int] = None
    overview: Optional[str] = None


class Episode(BasicEpisode):
    aired_season_id: Optional[int] = Field(default=None, alias="airedSeasonID")
    series_id: Optional[int] = None
    imdb_id: Optional[str] = None
    directors: List[str] = Field(default_factory=list)
    writers: List[str] = Field(default_factory=list)
    guest_stars: List[str] = Field(default_factory=list)
    filename: Optional[str] = None
    production_code: Optional[str] = None
    site_rating: Optional[float] = None
    site_rating_count: Optional[int] = None


class EpisodesSummary(TvdbModel):
    aired_episodes: Optional[str] = None
    aired_seasons: List[str] = Field(default_factory=list)
    dvd_episodes: Optional[str] = None
    dvd_seasons: List[str] = Field(default_factory=list)


class RatingsInfo(TvdbModel):
    average: Optional[float] = None
    count: Optional[int] = None


class Image(TvdbModel):
    id: int
    key_type: Optional[str] = None
    sub_key: Optional[str] = None
    file_name: Optional[str] = None
    resolution: Optional[str] = None
    thumbnail: Optional[str] = None
    language_id: Optional[int] = None
    ratings_info: Optional[RatingsInfo] = None


class ImagesSummary(TvdbModel):
    fanart: Optional[int] = None
    poster: Optional[int] = None
    season: Optional[int] = None
    seasonwide: Optional[int] = None
    series: Optional[int] = None


class ImageQueryParam(TvdbModel):
    key_type: Optional[str] = None
    language_id: Optional[str] = None
    resolution: List[str] = Field(default_factory=list)
    sub_key: List[str] = Field(default_factory=list)


class Actor(TvdbModel):
    id: int
    series_id: Optional[int] = None
    name: Optional[str] = None
    role: Optional[str] = None
    sort_order: Optional[int] = None
    image: Optional[str] = None
    image_author: Optional[int] = None
    image_added: Optional[str] = None
    last_updated: Optional[str] = None


class Language(TvdbModel):
    id: int
    abbreviation: Optional[str] = None
    name: Optional[str] = None
    english_name: Optional[str] = None


class Update(TvdbModel):
    id: int
    last_updated: Optional[int] = None
