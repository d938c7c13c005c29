"""
Redis-backed cache used as a write-through memo for scraped results.
"""
from __future__ import annotations

import json
import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional

from redis import Redis
from redis.exceptions import RedisError

try:  # pragma: no cover - optional dependency for test environments
    import fakeredis
except ModuleNotFoundError:  # pragma: no cover - runtime path without fakeredis
    fakeredis = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)

# Seconds; streams rot fastest, metadata is the most stable.
CACHE_TTLS: Mapping[str, int] = MappingProxyType(
    {
        "catalog": 3600,
        "meta": 24 * 3600,
        "stream": 6 * 3600,
    }
)


class CacheConfigurationError(RuntimeError):
    """Raised when the cache backend cannot be constructed from its URL."""


def stream_key(content_id: str) -> str:
    return f"stream:{content_id}"


def meta_key(content_id: str) -> str:
    return f"meta:{content_id}"


def catalog_key(content_type: str, catalog_id: str) -> str:
    return f"catalog:{content_type}:{catalog_id}"


def create_redis_connection(url: str) -> Redis:
    """Instantiate a Redis connection, supporting fakeredis for tests."""

    if url.startswith("fakeredis://"):
        if fakeredis is None:  # pragma: no cover - safety branch
            raise CacheConfigurationError(
                "fakeredis:// URLs need fakeredis; install stream-addon-resolver[local]"
            )
        return fakeredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)  # type: ignore[return-value]
    return Redis.from_url(url, decode_responses=True)


class CacheLayer:
    """String-keyed get/set with per-entry expiry.

    Backend failures never propagate: reads degrade to a miss and writes are
    dropped, so an outage only means every request scrapes live.
    """

    def __init__(self, connection: Redis) -> None:
        self._connection = connection

    @classmethod
    def from_url(cls, url: str) -> "CacheLayer":
        return cls(create_redis_connection(url))

    @property
    def connection(self) -> Redis:
        return self._connection

    @staticmethod
    def ttl_for(kind: str) -> int:
        return CACHE_TTLS[kind]

    def ping(self) -> bool:
        try:
            return bool(self._connection.ping())
        except RedisError:
            return False

    def get(self, key: str) -> Optional[str]:
        try:
            value = self._connection.get(key)
        except RedisError as exc:
            logger.warning("Cache read failed for %s: %s", key, exc)
            return None
        if isinstance(value, bytes):
            value = value.decode("utf-8", "replace")
        return value

    def set(self, key: str, value: str, ttl: int) -> bool:
        try:
            self._connection.set(key, value, ex=ttl)
        except RedisError as exc:
            logger.warning("Cache write failed for %s: %s", key, exc)
            return False
        return True

    def get_json(self, key: str) -> Optional[Any]:
        raw = self.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Discarding undecodable cache entry %s", key)
            return None

    def set_json(self, key: str, payload: Any, ttl: int) -> bool:
        return self.set(key, json.dumps(payload, ensure_ascii=False), ttl)
