"""Per-operation, per-status-code messages for TheTVDB API failures.

The API answers most failures with terse or inconsistent bodies. Each
operation maps the status codes it knows about to a friendlier message;
unmapped codes keep the original server message.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional

INVALID_TOKEN = "Invalid token"

DEFAULT_MESSAGES: Dict[str, Dict[int, str]] = {
    "authentication.authenticate": {
        401: "Invalid credentials and/or API token",
    },
    "authentication.refresh_token": {
        401: INVALID_TOKEN,
    },
    "series.get": {
        401: INVALID_TOKEN,
        404: "Given series ID does not exist",
    },
    "series.get_actors": {
        401: INVALID_TOKEN,
        404: "Given series ID does not exist",
    },
    "series.get_episodes": {
        401: INVALID_TOKEN,
        404: "Given series ID does not exist or the page is out of range",
    },
    "series.get_episodes_summary": {
        401: INVALID_TOKEN,
        404: "Given series ID does not exist",
    },
    "series.search_episodes": {
        401: INVALID_TOKEN,
        404: "No results for your query",
    },
    "series.get_images": {
        401: INVALID_TOKEN,
        404: "Given series ID does not exist",
    },
    "series.get_images_query": {
        401: INVALID_TOKEN,
        404: "No results for your query",
        405: "Missing query params",
    },
    "series.get_images_query_params": {
        401: INVALID_TOKEN,
        404: "Given series ID does not exist",
    },
    "series.get_with_filter": {
        401: INVALID_TOKEN,
        404: "Given series ID does not exist",
    },
    "episodes.get": {
        401: INVALID_TOKEN,
        404: "Given episode ID does not exist",
    },
    "search.search_series": {
        401: INVALID_TOKEN,
        404: "No records are found that match your query",
    },
    "search.get_search_params": {
        401: INVALID_TOKEN,
    },
    "languages.get_all": {
        401: INVALID_TOKEN,
    },
    "languages.get": {
        401: INVALID_TOKEN,
        404: "Given language ID does not exist",
    },
    "updates.get": {
        401: INVALID_TOKEN,
        404: "No records exist for the given timespan",
        405: "Missing query params",
    },
}


class ErrorMessages:
    """Read-only lookup of operation -> status code -> message.

    ``overrides`` entries are merged over the defaults per operation, so a
    caller can replace a single status code without restating the rest.
    Pass ``defaults=False`` to start from an empty table.
    """

    def __init__(
        self,
        overrides: Optional[Mapping[str, Mapping[int, str]]] = None,
        defaults: bool = True,
    ) -> None:
        merged: Dict[str, Dict[int, str]] = {}
        if defaults:
            for operation, messages in DEFAULT_MESSAGES.items():
                merged[operation] = dict(messages)
        for operation, messages in (overrides or {}).items():
            merged.setdefault(operation, {}).update(messages)
        self._table = MappingProxyType(
            {op: MappingProxyType(msgs) for op, msgs in merged.items()}
        )

    def __getitem__(self, operation: str) -> Mapping[int, str]:
        return self._table.get(operation, MappingProxyType({}))

    def __contains__(self, operation: str) -> bool:
        return operation in self._table

    def lookup(self, operation: str, status_code: int) -> Optional[str]:
        """Return the message for ``status_code`` or None when unmapped."""
        return self[operation].get(status_code)
