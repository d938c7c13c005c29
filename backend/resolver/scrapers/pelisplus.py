"""
Failover source: emits the master playlist as-is, without a further fetch.
"""
from __future__ import annotations

from typing import List

from ..models import StreamLocator
from .base import SourceScraper

FAILOVER_TITLE = "Auto (Failover)"


class PelisplusScraper(SourceScraper):
    name = "Failover Stream"
    DEFAULT_BASE_URL = "https://pelisplushd.net/ver/"

    def build_locators(self, master_url: str) -> List[StreamLocator]:
        return [StreamLocator(title=FAILOVER_TITLE, url=master_url, source_name=self.name)]
