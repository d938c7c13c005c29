"""Shared state container for the addon API."""
from __future__ import annotations

from dataclasses import dataclass

from backend.resolver.cache import CacheLayer
from backend.resolver.catalog import CatalogService
from backend.resolver.fetcher import Fetcher, ManifestFetcher
from backend.resolver.metadata import MetadataService
from backend.resolver.orchestrator import FailoverOrchestrator
from backend.resolver.scrapers import CuevanaScraper, PelisplusScraper
from backend.resolver.service import StreamService

from .settings import AddonSettings


@dataclass(slots=True)
class AppState:
    """Wires the resolver services shared across routers."""

    settings: AddonSettings
    fetcher: Fetcher
    cache: CacheLayer
    stream_service: StreamService
    catalog_service: CatalogService
    metadata_service: MetadataService

    def __init__(self, settings: AddonSettings, *, fetcher: Fetcher | None = None) -> None:
        self.settings = settings
        self.fetcher = fetcher or ManifestFetcher(
            timeout=settings.fetch_timeout,
            user_agent=settings.user_agent,
        )
        self.cache = CacheLayer.from_url(settings.redis_url)

        orchestrator = FailoverOrchestrator(
            primary=CuevanaScraper(self.fetcher, base_url=settings.primary_base_url),
            failover=PelisplusScraper(self.fetcher, base_url=settings.failover_base_url),
        )
        self.stream_service = StreamService(self.cache, orchestrator)
        self.catalog_service = CatalogService(
            self.fetcher,
            self.cache,
            base_url=settings.primary_base_url,
        )
        self.metadata_service = MetadataService(
            self.cache,
            placeholder_poster=settings.placeholder_poster,
        )
