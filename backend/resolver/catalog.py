"""
Catalog listing scraper backing the addon catalog resource.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple
from urllib.parse import urljoin, urlparse

from .cache import CacheLayer, catalog_key
from .errors import ResolverError
from .fetcher import Fetcher
from .models import CatalogItem
from .page import DocumentFactory, SoupDocument
from .scrapers.cuevana import CuevanaScraper

logger = logging.getLogger(__name__)

# (content type, catalog id) pairs advertised by the addon manifest.
CATALOGS: Tuple[Tuple[str, str], ...] = (
    ("movie", "top-movies"),
    ("series", "top-shows"),
)


def is_known_catalog(content_type: str, catalog_id: str) -> bool:
    return (content_type, catalog_id) in CATALOGS


def _content_id_from_href(href: str) -> str:
    path = urlparse(href).path.rstrip("/")
    return path.rsplit("/", 1)[-1]


def parse_catalog(
    html: str,
    content_type: str,
    *,
    page_url: str = "",
    document_factory: DocumentFactory = SoupDocument,
) -> List[CatalogItem]:
    items: List[CatalogItem] = []
    for article in document_factory(html).find_all("article"):
        link = article.find("a")
        href = link.get("href") if link is not None else None
        if not href:
            continue
        content_id = _content_id_from_href(href)
        if not content_id:
            continue

        heading = article.find("h2")
        name = heading.get_text(strip=True) if heading is not None else ""

        image = article.find("img")
        poster: Optional[str] = image.get("src") if image is not None else None
        if poster and page_url:
            poster = urljoin(page_url, poster)

        items.append(CatalogItem(id=content_id, type=content_type, name=name, poster=poster))
    return items


class CatalogService:
    def __init__(
        self,
        fetcher: Fetcher,
        cache: CacheLayer,
        *,
        base_url: str = CuevanaScraper.DEFAULT_BASE_URL,
        document_factory: DocumentFactory = SoupDocument,
    ) -> None:
        self.fetcher = fetcher
        self.cache = cache
        self.base_url = base_url
        self.document_factory = document_factory

    def listing_url(self, content_type: str) -> str:
        if content_type == "series":
            return urljoin(self.base_url, "series")
        return self.base_url

    def get_catalog(self, content_type: str, catalog_id: str) -> List[CatalogItem]:
        key = catalog_key(content_type, catalog_id)
        cached = self.cache.get_json(key)
        if cached is not None:
            try:
                return [CatalogItem.from_dict(item) for item in cached]
            except (KeyError, TypeError, AttributeError):
                logger.warning("Ignoring malformed cache entry %s", key)

        url = self.listing_url(content_type)
        try:
            html = self.fetcher.fetch(url)
        except ResolverError as exc:
            logger.error("Catalog scrape failed: %s", exc)
            return []

        items = parse_catalog(
            html,
            content_type,
            page_url=url,
            document_factory=self.document_factory,
        )
        self.cache.set_json(key, [item.to_dict() for item in items], CacheLayer.ttl_for("catalog"))
        return items
