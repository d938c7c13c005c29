"""FastAPI dependencies for the addon API."""
from fastapi import Depends, Request

from backend.resolver.cache import CacheLayer
from backend.resolver.catalog import CatalogService
from backend.resolver.metadata import MetadataService
from backend.resolver.service import StreamService

from .state import AppState


def get_app_state(request: Request) -> AppState:
    """Resolve the shared application state from the FastAPI request."""
    return request.app.state.app_state


def get_cache(app_state: AppState = Depends(get_app_state)) -> CacheLayer:
    return app_state.cache


def get_stream_service(app_state: AppState = Depends(get_app_state)) -> StreamService:
    return app_state.stream_service


def get_catalog_service(app_state: AppState = Depends(get_app_state)) -> CatalogService:
    return app_state.catalog_service


def get_metadata_service(app_state: AppState = Depends(get_app_state)) -> MetadataService:
    return app_state.metadata_service
