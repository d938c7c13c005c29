"""
Shared scrape pipeline for page → iframe → manifest sources.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List
from urllib.parse import urljoin

from ..errors import NotFound, ResolverError
from ..fetcher import Fetcher
from ..models import StreamLocator
from ..page import DocumentFactory, SoupDocument, extract_frame_source
from ..playlist import extract_master_manifest_url

logger = logging.getLogger(__name__)


class SourceScraper(ABC):
    """Resolve stream locators for a content id on one third-party source.

    Subclasses set ``name`` and ``DEFAULT_BASE_URL`` and decide how a master
    manifest URL is turned into locators. Stage failures never escape
    :meth:`resolve`; they are logged and become an empty list.
    """

    name = ""
    DEFAULT_BASE_URL = ""

    def __init__(
        self,
        fetcher: Fetcher,
        *,
        base_url: str | None = None,
        document_factory: DocumentFactory = SoupDocument,
    ) -> None:
        self.fetcher = fetcher
        self.base_url = base_url or self.DEFAULT_BASE_URL
        self.document_factory = document_factory

    def page_url(self, content_id: str) -> str:
        return f"{self.base_url}{content_id}"

    def resolve(self, content_id: str) -> List[StreamLocator]:
        try:
            return self._scrape(content_id)
        except ResolverError as exc:
            logger.warning("%s scrape error for %s: %s", self.name, content_id, exc)
            return []

    def _scrape(self, content_id: str) -> List[StreamLocator]:
        page_url = self.page_url(content_id)
        page_html = self.fetcher.fetch(page_url)

        frame_src = extract_frame_source(page_html, self.document_factory)
        try:
            embed_url = urljoin(page_url, frame_src)
        except ValueError as exc:
            raise NotFound(f"Unusable iframe src {frame_src!r}") from exc

        embed_html = self.fetcher.fetch(embed_url)
        master_url = extract_master_manifest_url(embed_html)
        logger.info("%s found master playlist for %s: %s", self.name, content_id, master_url)
        return self.build_locators(master_url)

    @abstractmethod
    def build_locators(self, master_url: str) -> List[StreamLocator]:
        """Turn a master manifest URL into this source's locators."""
