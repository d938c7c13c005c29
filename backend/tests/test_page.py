"""Tests for iframe extraction."""
from __future__ import annotations

from typing import List, Optional

import pytest

from backend.resolver.errors import NotFound
from backend.resolver.page import SoupDocument, extract_frame_source


def test_returns_first_iframe_src() -> None:
    """The first iframe's src should be returned."""

    html = (
        "<div><iframe src='https://player.example/e/1'></iframe>"
        "<iframe src='https://player.example/e/2'></iframe></div>"
    )

    assert extract_frame_source(html) == "https://player.example/e/1"


def test_missing_iframe_raises_not_found() -> None:
    """Pages without an iframe should raise NotFound."""

    with pytest.raises(NotFound):
        extract_frame_source("<html><body><p>No player here</p></body></html>")


def test_iframe_without_src_raises_not_found() -> None:
    """An iframe with an empty src should raise NotFound."""

    with pytest.raises(NotFound):
        extract_frame_source("<iframe data-src='https://lazy.example/e/1'></iframe>")


def test_malformed_html_is_tolerated() -> None:
    """Unclosed markup should still yield the iframe src."""

    html = "<div><p>unclosed <iframe src=\"//player.example/e/9\">"

    assert extract_frame_source(html) == "//player.example/e/9"


class _FixedElement:
    def __init__(self, attrs: dict) -> None:
        self.attrs = attrs

    def get(self, key: str, default=None):
        return self.attrs.get(key, default)

    def find(self, name: str):
        return None

    def get_text(self, separator: str = "", strip: bool = False) -> str:
        return ""


class _FixedDocument:
    """Alternate HtmlDocument used to check the parser is swappable."""

    def __init__(self, html: str) -> None:
        self.queries: List[str] = []

    def find_first(self, kind: str) -> Optional[_FixedElement]:
        self.queries.append(kind)
        return _FixedElement({"src": "https://swapped.example/embed"})

    def find_all(self, kind: str) -> List[_FixedElement]:
        return []


def test_document_factory_is_pluggable() -> None:
    """Any HtmlDocument implementation should be accepted."""

    assert extract_frame_source("ignored", document_factory=_FixedDocument) == "https://swapped.example/embed"


def test_soup_document_find_all() -> None:
    """find_all should return every matching element in order."""

    document = SoupDocument("<article>a</article><article>b</article>")

    assert [node.get_text() for node in document.find_all("article")] == ["a", "b"]
    assert document.find_first("iframe") is None
