"""Router exports for the addon API."""
from . import catalog, health, manifest, meta, stream

__all__ = ["catalog", "health", "manifest", "meta", "stream"]
