"""Pydantic models exposed by the addon API."""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from backend.resolver.catalog import CATALOGS
from backend.resolver.models import CatalogItem, MetaItem, StreamLocator

ADDON_VERSION = "6.0.0"


class CacheHealthStatus(BaseModel):
    """Represents Redis cache connectivity status."""

    status: Literal["ok", "error"] = Field(default="ok")
    detail: str | None = Field(
        default=None, description="Optional diagnostic message when the cache is unavailable."
    )


class HealthStatus(BaseModel):
    """Service health payload."""

    status: Literal["ok"] = Field(default="ok")
    version: str = Field(default=ADDON_VERSION, description="Semantic version of the addon.")
    cache: CacheHealthStatus = Field(
        default_factory=CacheHealthStatus,
        description="Health information for the Redis cache. Outages degrade to live scraping.",
    )


class StreamModel(BaseModel):
    """A playable HLS locator."""

    title: str = Field(description="Quality label, e.g. 720p or Auto (Master).")
    url: str = Field(description="Absolute URL of the media manifest.")
    name: str = Field(description="Name of the source that produced the locator.")

    @classmethod
    def from_locator(cls, locator: StreamLocator) -> "StreamModel":
        return cls.model_validate(locator.to_dict())


class StreamsResponse(BaseModel):
    streams: list[StreamModel] = Field(default_factory=list)


class CatalogMetaModel(BaseModel):
    """Preview entry returned by catalog listings."""

    id: str
    type: str
    name: str
    poster: str | None = None

    @classmethod
    def from_item(cls, item: CatalogItem) -> "CatalogMetaModel":
        return cls.model_validate(item.to_dict())


class CatalogResponse(BaseModel):
    metas: list[CatalogMetaModel] = Field(default_factory=list)


class MetaModel(BaseModel):
    """Detailed metadata for a single content id."""

    id: str
    type: str
    name: str
    poster: str
    description: str

    @classmethod
    def from_item(cls, item: MetaItem) -> "MetaModel":
        return cls.model_validate(item.to_dict())


class MetaResponse(BaseModel):
    meta: MetaModel


class ManifestCatalog(BaseModel):
    type: str
    id: str


class AddonManifest(BaseModel):
    """Addon descriptor advertised to clients."""

    id: str = Field(default="org.scraper.failover.supreme")
    version: str = Field(default=ADDON_VERSION)
    name: str = Field(default="Supreme Streams (Failover + Redis)")
    description: str = Field(default="Scrapes real .m3u8 with failover & Redis cache")
    resources: list[str] = Field(default_factory=lambda: ["catalog", "meta", "stream"])
    types: list[str] = Field(default_factory=lambda: ["movie", "series"])
    catalogs: list[ManifestCatalog] = Field(
        default_factory=lambda: [
            ManifestCatalog(type=content_type, id=catalog_id)
            for content_type, catalog_id in CATALOGS
        ]
    )
