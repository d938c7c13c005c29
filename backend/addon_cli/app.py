"""Command line interface for the stream addon."""
from __future__ import annotations

import json
from typing import Any, Optional

import typer

from backend.addon_api.settings import AddonSettings
from backend.addon_api.state import AppState

from .client import create_client


DEFAULT_API_BASE = "http://localhost:7000"

app = typer.Typer(help="Interact with the stream addon service.")


def _api_base_option() -> typer.Option:
    return typer.Option(
        DEFAULT_API_BASE,
        "--api-base",
        help="Base URL for the addon API service.",
        show_default=True,
        envvar="STREAMADDON_API_BASE",
    )


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _get(api_base: str, path: str) -> None:
    with create_client(api_base) as client:
        response = client.get(path)
        response.raise_for_status()
        _echo_json(response.json())


@app.command()
def health(api_base: str = _api_base_option()) -> None:
    """Call the /health endpoint and pretty-print the response."""

    _get(api_base, "/health")


@app.command()
def manifest(api_base: str = _api_base_option()) -> None:
    """Display the addon manifest."""

    _get(api_base, "/manifest.json")


@app.command()
def streams(
    content_type: str = typer.Argument(..., help="Content type, movie or series."),
    content_id: str = typer.Argument(..., help="Content identifier to resolve."),
    api_base: str = _api_base_option(),
) -> None:
    """Resolve playable stream locators through the API."""

    _get(api_base, f"/stream/{content_type}/{content_id}.json")


@app.command()
def meta(
    content_type: str = typer.Argument(..., help="Content type, movie or series."),
    content_id: str = typer.Argument(..., help="Content identifier."),
    api_base: str = _api_base_option(),
) -> None:
    """Show metadata for a content id."""

    _get(api_base, f"/meta/{content_type}/{content_id}.json")


@app.command()
def catalog(
    content_type: str = typer.Argument(..., help="Content type, movie or series."),
    catalog_id: str = typer.Argument(..., help="Catalog identifier, e.g. top-movies."),
    api_base: str = _api_base_option(),
) -> None:
    """List a scraped catalog."""

    with create_client(api_base) as client:
        response = client.get(f"/catalog/{content_type}/{catalog_id}.json")
        if response.status_code == 404:
            typer.echo(f"Unknown catalog: {content_type}/{catalog_id}", err=True)
            raise typer.Exit(code=1)
        response.raise_for_status()
        _echo_json(response.json())


@app.command()
def resolve(
    content_id: str = typer.Argument(..., help="Content identifier to resolve."),
    redis_url: Optional[str] = typer.Option(
        None,
        help=(
            "Override the cache URL. fakeredis:// keeps the cache in memory "
            "and needs the 'local' extra."
        ),
    ),
) -> None:
    """Resolve stream locators in-process, without a running API."""

    settings = AddonSettings()
    if redis_url is not None:
        settings = settings.model_copy(update={"redis_url": redis_url})

    state = AppState(settings)
    locators = state.stream_service.get_streams(content_id)
    _echo_json({"streams": [locator.to_dict() for locator in locators]})
    if not locators:
        raise typer.Exit(code=1)
