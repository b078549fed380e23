"""tvdbclient exception hierarchy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class TvdbError(Exception):
    """Base exception for all tvdbclient errors."""


class ConfigError(TvdbError):
    """Invalid configuration or missing keys."""


class TvdbValidationError(TvdbError, ValueError):
    """Invalid argument rejected before any request is made."""


class TvdbServerError(TvdbError):
    """Non-2xx response from the TheTVDB API."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"TvdbServerError({self.message!r}, status_code={self.status_code})"


@dataclass(frozen=True)
class CallResult(Generic[T]):
    """Outcome of a transport call: either a value or a server error."""

    value: Optional[T] = None
    error: Optional[TvdbServerError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the error when the call failed."""
        if self.error is not None:
            raise self.error
        return self.value


def require_text(value: Optional[str], name: str) -> str:
    """Reject ``None`` and blank strings for required arguments."""
    if value is None:
        raise TvdbValidationError(f"{name} is required")
    if not value.strip():
        raise TvdbValidationError(
            f"The {_display(name)} cannot be an empty string or white space."
        )
    return value


def _display(name: str) -> str:
    # api_key -> ApiKey
    return "".join(part[:1].upper() + part[1:] for part in name.split("_"))
