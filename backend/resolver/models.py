"""
Value objects produced by the resolver pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class StreamLocator:
    title: str
    url: str
    source_name: str

    def to_dict(self) -> Dict[str, str]:
        return {"title": self.title, "url": self.url, "name": self.source_name}

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "StreamLocator":
        return cls(
            title=str(payload["title"]),
            url=str(payload["url"]),
            source_name=str(payload.get("name") or ""),
        )


@dataclass(frozen=True)
class QualityVariant:
    """A variant stream declared by a master manifest.

    ``url`` is already resolved against the master manifest URL.
    """

    vertical_resolution: int
    url: str
    bandwidth: Optional[int] = None

    @property
    def label(self) -> str:
        return f"{self.vertical_resolution}p"


@dataclass(frozen=True)
class CatalogItem:
    id: str
    type: str
    name: str
    poster: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        return {"id": self.id, "type": self.type, "name": self.name, "poster": self.poster}

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "CatalogItem":
        poster = payload.get("poster")
        return cls(
            id=str(payload["id"]),
            type=str(payload["type"]),
            name=str(payload.get("name") or ""),
            poster=str(poster) if poster else None,
        )


@dataclass(frozen=True)
class MetaItem:
    id: str
    type: str
    name: str
    poster: str
    description: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "type": self.type,
            "name": self.name,
            "poster": self.poster,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "MetaItem":
        return cls(
            id=str(payload["id"]),
            type=str(payload["type"]),
            name=str(payload.get("name") or ""),
            poster=str(payload.get("poster") or ""),
            description=str(payload.get("description") or ""),
        )
