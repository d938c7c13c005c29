"""
HTTP fetch primitive used by every resolver stage.
"""
from __future__ import annotations

import logging
from typing import Optional, Protocol

import requests

from .errors import FetchFailure

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) "
    "Gecko/20100101 Firefox/121.0"
)
DEFAULT_TIMEOUT = 15.0


class Fetcher(Protocol):
    def fetch(self, url: str) -> str: ...


class ManifestFetcher:
    """Single-shot GET wrapper; retry and failover policy live above this layer."""

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = user_agent

    def fetch(self, url: str) -> str:
        logger.debug("GET %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.Timeout as exc:
            raise FetchFailure(url, f"timed out after {self.timeout}s") from exc
        except requests.RequestException as exc:
            raise FetchFailure(url, str(exc)) from exc

        if not resp.ok:
            raise FetchFailure(url, f"HTTP {resp.status_code}", status_code=resp.status_code)
        return resp.text

    def close(self) -> None:
        self.session.close()
