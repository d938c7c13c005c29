"""
Structural HTML queries used to locate embedded players.

Resolvers only talk to :class:`HtmlDocument`; :class:`SoupDocument` is the
BeautifulSoup implementation.
"""
from __future__ import annotations

from typing import Callable, List, Optional, Protocol

from bs4 import BeautifulSoup
from bs4.element import Tag

from .errors import NotFound

FRAME = "iframe"


class HtmlElement(Protocol):
    def get(self, key: str, default=None): ...

    def find(self, name: str): ...

    def get_text(self, separator: str = "", strip: bool = False) -> str: ...


class HtmlDocument(Protocol):
    def find_first(self, kind: str) -> Optional[HtmlElement]: ...

    def find_all(self, kind: str) -> List[HtmlElement]: ...


class SoupDocument:
    """HtmlDocument backed by BeautifulSoup's built-in ``html.parser``."""

    def __init__(self, html: str) -> None:
        self._soup = BeautifulSoup(html or "", "html.parser")

    def find_first(self, kind: str) -> Optional[Tag]:
        return self._soup.find(kind)

    def find_all(self, kind: str) -> List[Tag]:
        return list(self._soup.find_all(kind))


DocumentFactory = Callable[[str], HtmlDocument]


def extract_frame_source(html: str, document_factory: DocumentFactory = SoupDocument) -> str:
    """Return the ``src`` of the first inline frame in ``html``."""

    frame = document_factory(html).find_first(FRAME)
    if frame is None:
        raise NotFound("Iframe not found")
    src = (frame.get("src") or "").strip()
    if not src:
        raise NotFound("Iframe has no src attribute")
    return src
