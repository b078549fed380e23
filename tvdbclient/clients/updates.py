"""Recently updated series."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Union

from tvdbclient.clients.base import BaseClient
from tvdbclient.exceptions import TvdbValidationError
from tvdbclient.filters import UpdatesQuery
from tvdbclient.models import Envelope, Update
from tvdbclient.query import append_query

Timestamp = Union[datetime, int]


def _epoch(value: Optional[Timestamp]) -> Optional[int]:
    if isinstance(value, datetime):
        return int(value.timestamp())
    return value


class UpdatesClient(BaseClient):
    _resource = "updates"

    async def get(
        self,
        from_time: Timestamp,
        to_time: Optional[Timestamp] = None,
    ) -> Envelope[List[Update]]:
        """Series updated between ``from_time`` and ``to_time`` (max one week)."""
        if from_time is None:
            raise TvdbValidationError("from_time is required")
        query = UpdatesQuery(from_time=_epoch(from_time), to_time=_epoch(to_time))
        return await self._get("get", append_query("/updated/query", query), List[Update])
