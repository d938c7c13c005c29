"""Console entry point for the addon CLI."""
from __future__ import annotations

import logging

from .app import app


def main() -> None:
    """Execute the Typer application."""

    logging.basicConfig(level=logging.WARNING)
    app()


if __name__ == "__main__":
    main()
