"""FastAPI surface exposing the resolver as a catalog/meta/stream addon."""

from .app import create_app

__all__ = ["create_app"]
