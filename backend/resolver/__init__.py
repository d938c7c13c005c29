"""
Resolver backend package for the stream addon.

This package bundles the source scrapers, the failover orchestrator and the
Redis-fronted services that turn a content id into playable HLS locators.
"""

from .cache import CACHE_TTLS, CacheLayer
from .errors import FetchFailure, NotFound, ResolverError
from .models import CatalogItem, MetaItem, QualityVariant, StreamLocator
from .orchestrator import FailoverOrchestrator
from .service import StreamService

__all__ = [
    "CACHE_TTLS",
    "CacheLayer",
    "CatalogItem",
    "FailoverOrchestrator",
    "FetchFailure",
    "MetaItem",
    "NotFound",
    "QualityVariant",
    "ResolverError",
    "StreamLocator",
    "StreamService",
]
