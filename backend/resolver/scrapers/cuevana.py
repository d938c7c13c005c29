"""
Primary source: expands master playlists into per-quality locators.
"""
from __future__ import annotations

from typing import List

from ..models import StreamLocator
from ..playlist import extract_variants
from .base import SourceScraper

MASTER_TITLE = "Auto (Master)"


class CuevanaScraper(SourceScraper):
    name = "Cuevana Stream"
    DEFAULT_BASE_URL = "https://cuevana3.me/"

    def build_locators(self, master_url: str) -> List[StreamLocator]:
        playlist = self.fetcher.fetch(master_url)
        variants = extract_variants(playlist, master_url)
        if not variants:
            return [StreamLocator(title=MASTER_TITLE, url=master_url, source_name=self.name)]
        return [
            StreamLocator(title=variant.label, url=variant.url, source_name=self.name)
            for variant in variants
        ]
