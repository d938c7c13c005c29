"""Shared fixtures for the resolver and addon tests."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List, Union

import fakeredis
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.resolver.cache import CacheLayer  # noqa: E402
from backend.resolver.errors import FetchFailure  # noqa: E402

PRIMARY_BASE = "https://primary.example/"
FAILOVER_BASE = "https://failover.example/ver/"

PAGE_HTML = """
<html><body>
  <h1>Example</h1>
  <iframe src="https://player.example/embed/1" allowfullscreen></iframe>
  <iframe src="https://ads.example/banner"></iframe>
</body></html>
"""
EMBED_HTML = """
<script>
  var player = new Player({file: "https://cdn.example/hls/master.m3u8?token=abc", autoplay: true});
</script>
"""
MASTER_URL = "https://cdn.example/hls/master.m3u8?token=abc"
MASTER_PLAYLIST = """#EXTM3U
#EXT-X-VERSION:3
#EXT-X-STREAM-INF:BANDWIDTH=2800000,RESOLUTION=1280x720,CODECS="avc1.4d401f,mp4a.40.2"
720p.m3u8
#EXT-X-STREAM-INF:BANDWIDTH=800000,RESOLUTION=640x360
360p.m3u8
"""
SINGLE_RENDITION_PLAYLIST = """#EXTM3U
#EXT-X-TARGETDURATION:10
#EXTINF:10.0,
segment0.ts
#EXT-X-ENDLIST
"""

Outcome = Union[str, Exception]


class StubFetcher:
    """Fetcher double serving canned responses and recording every call."""

    def __init__(self, responses: Dict[str, Outcome] | None = None) -> None:
        self.responses: Dict[str, Outcome] = dict(responses or {})
        self.calls: List[str] = []

    def fetch(self, url: str) -> str:
        self.calls.append(url)
        outcome = self.responses.get(url)
        if outcome is None:
            raise FetchFailure(url, "HTTP 404", status_code=404)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def calls_to(self, prefix: str) -> List[str]:
        return [url for url in self.calls if url.startswith(prefix)]


def primary_responses(content_id: str, master: str = MASTER_PLAYLIST) -> Dict[str, Outcome]:
    return {
        f"{PRIMARY_BASE}{content_id}": PAGE_HTML,
        "https://player.example/embed/1": EMBED_HTML,
        MASTER_URL: master,
    }


@pytest.fixture()
def cache() -> CacheLayer:
    """Provide a cache backed by an isolated in-memory Redis server."""

    return CacheLayer(fakeredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True))


@pytest.fixture()
def stub_fetcher() -> StubFetcher:
    return StubFetcher()
