"""CLI entry point for launching the addon API with Uvicorn."""
import logging

import uvicorn

from .app import create_app
from .settings import AddonSettings


def main() -> None:
    """Start a development server for the addon API."""
    settings = AddonSettings()
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
