"""
Metadata stubs for scraped content ids.
"""
from __future__ import annotations

import logging

from .cache import CacheLayer, meta_key
from .models import MetaItem

logger = logging.getLogger(__name__)

PLACEHOLDER_POSTER = "https://via.placeholder.com/300"


class MetadataService:
    def __init__(self, cache: CacheLayer, *, placeholder_poster: str = PLACEHOLDER_POSTER) -> None:
        self.cache = cache
        self.placeholder_poster = placeholder_poster

    def build_stub(self, content_type: str, content_id: str) -> MetaItem:
        return MetaItem(
            id=content_id,
            type=content_type,
            name=f"Scraped {content_id}",
            poster=self.placeholder_poster,
            description="Auto scraped",
        )

    def get_meta(self, content_type: str, content_id: str) -> MetaItem:
        key = meta_key(content_id)
        cached = self.cache.get_json(key)
        if cached is not None:
            try:
                return MetaItem.from_dict(cached)
            except (KeyError, TypeError, AttributeError):
                logger.warning("Ignoring malformed cache entry %s", key)

        meta = self.build_stub(content_type, content_id)
        self.cache.set_json(key, meta.to_dict(), CacheLayer.ttl_for("meta"))
        return meta
