"""Query string serialization for filter objects.

Filter classes declare their parameters once with :func:`query_parameters`,
which sorts them by rendered name at class definition time. Serializing an
object is then a single ordered walk over that tuple:

- parameters whose value is ``None`` are skipped;
- names are rendered in lower camel case;
- values are percent-encoded as query components;
- :class:`enum.Flag` values become a sorted, comma-joined list of member names.
"""

from __future__ import annotations

import enum
from operator import attrgetter
from typing import Any, Callable, List, NamedTuple, Tuple
from urllib.parse import quote


class QueryParameter(NamedTuple):
    """A query string name paired with the accessor that reads its value."""

    name: str
    accessor: Callable[[Any], Any]


def lower_camel(name: str) -> str:
    """Render an attribute or member name in lower camel case.

    ``aired_season`` -> ``airedSeason``, ``AIRS_DAY_OF_WEEK`` ->
    ``airsDayOfWeek``, ``ImdbId`` -> ``imdbId``.
    """
    if not name:
        return name
    if name.isupper():
        name = name.lower()
    head, *rest = name.split("_")
    return head[:1].lower() + head[1:] + "".join(p[:1].upper() + p[1:] for p in rest)


def query_parameters(*attributes: str) -> Tuple[QueryParameter, ...]:
    """Build the sorted parameter table for a filter class."""
    params = [QueryParameter(lower_camel(attr), attrgetter(attr)) for attr in attributes]
    return tuple(sorted(params, key=lambda p: p.name))


def flag_names(value: enum.Flag) -> List[str]:
    """Decompose a flag value into sorted, lower camel member names."""
    members = [
        member for member in type(value)
        if _is_single_bit(member) and member in value
    ]
    return sorted(lower_camel(member.name) for member in members)


def format_value(value: Any) -> str:
    """Percent-encode a single query value."""
    if isinstance(value, enum.Flag):
        return ",".join(quote(name, safe="") for name in flag_names(value))
    if isinstance(value, enum.Enum):
        value = value.value
    if isinstance(value, bool):
        value = "true" if value else "false"
    return quote(str(value), safe="")


def to_query_string(obj: Any) -> str:
    """Serialize a filter object into a canonical query string fragment."""
    parts = []
    for param in type(obj).__query_parameters__:
        value = param.accessor(obj)
        if value is not None:
            parts.append(f"{param.name}={format_value(value)}")
    return "&".join(parts)


def _is_single_bit(member: enum.Flag) -> bool:
    bits = member.value
    return bits != 0 and bits & (bits - 1) == 0


def append_query(path: str, obj: Any) -> str:
    """Append the serialized ``obj`` to ``path``, if it has any set fields."""
    fragment = to_query_string(obj)
    if not fragment:
        return path
    return f"{path}{'&' if '?' in path else '?'}{fragment}"
