"""Source scrapers for the stream resolver."""

from .base import SourceScraper
from .cuevana import CuevanaScraper
from .pelisplus import PelisplusScraper

__all__ = ["SourceScraper", "CuevanaScraper", "PelisplusScraper"]
