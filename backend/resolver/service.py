"""
Cache-fronted entry point for stream resolution.
"""
from __future__ import annotations

import logging
from typing import List

from .cache import CacheLayer, stream_key
from .models import StreamLocator
from .orchestrator import FailoverOrchestrator

logger = logging.getLogger(__name__)


class StreamService:
    def __init__(self, cache: CacheLayer, orchestrator: FailoverOrchestrator) -> None:
        self.cache = cache
        self.orchestrator = orchestrator

    def get_streams(self, content_id: str) -> List[StreamLocator]:
        """Return locators for ``content_id``, scraping only on a cache miss.

        Only non-empty results are cached, so an id that resolves to nothing
        is retried live on the next request.
        """

        key = stream_key(content_id)
        cached = self._read_cached(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached

        streams = self.orchestrator.resolve(content_id)
        if streams:
            self.cache.set_json(
                key,
                [stream.to_dict() for stream in streams],
                CacheLayer.ttl_for("stream"),
            )
        return streams

    def _read_cached(self, key: str) -> List[StreamLocator] | None:
        payload = self.cache.get_json(key)
        if payload is None:
            return None
        try:
            return [StreamLocator.from_dict(item) for item in payload]
        except (KeyError, TypeError, AttributeError):
            logger.warning("Ignoring malformed cache entry %s", key)
            return None
