"""Exception hierarchy shared by the stream resolution pipeline."""
from __future__ import annotations


class ResolverError(RuntimeError):
    """Base class for stage failures inside a source resolver."""


class FetchFailure(ResolverError):
    """Raised when an outbound request fails, times out or returns a non-success status."""

    def __init__(self, url: str, reason: str, *, status_code: int | None = None) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason
        self.status_code = status_code


class NotFound(ResolverError):
    """Raised when an expected structural element is absent from fetched content."""
