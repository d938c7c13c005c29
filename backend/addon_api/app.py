"""Application factory for the stream addon API."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.resolver.fetcher import Fetcher

from .routers import catalog, health, manifest, meta, stream
from .schemas import ADDON_VERSION
from .settings import AddonSettings
from .state import AppState


def create_app(settings: AddonSettings | None = None, *, fetcher: Fetcher | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""

    resolved_settings = settings or AddonSettings()
    app_state = AppState(settings=resolved_settings, fetcher=fetcher)

    app = FastAPI(title="Stream Addon API", version=ADDON_VERSION)
    app.state.app_state = app_state
    app.state.settings = app_state.settings

    # Addon clients fetch from arbitrary origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    for router in (
        health.router,
        manifest.router,
        catalog.router,
        meta.router,
        stream.router,
    ):
        app.include_router(router)

    return app
