"""
Two-tier source failover.
"""
from __future__ import annotations

import logging
from typing import List, Protocol

from .models import StreamLocator

logger = logging.getLogger(__name__)


class StreamSource(Protocol):
    name: str

    def resolve(self, content_id: str) -> List[StreamLocator]: ...


class FailoverOrchestrator:
    """Try the primary source and fall back only when it yields nothing.

    Results are never merged: the failover source is not consulted at all
    once the primary produced a locator.
    """

    def __init__(self, primary: StreamSource, failover: StreamSource) -> None:
        self.primary = primary
        self.failover = failover

    def resolve(self, content_id: str) -> List[StreamLocator]:
        streams = self.primary.resolve(content_id)
        if streams:
            return streams

        logger.warning("Primary site failed, trying failover for %s", content_id)
        return self.failover.resolve(content_id)
