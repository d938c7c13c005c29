"""
Scanners for HLS manifests.

``extract_master_manifest_url`` walks embed-page text looking for an absolute
``.m3u8`` URL; ``extract_variants`` is a line-oriented parser for the
``#EXT-X-STREAM-INF`` declarations of a master playlist.
"""
from __future__ import annotations

import re
from typing import Dict, List, Optional
from urllib.parse import urljoin

from .errors import NotFound
from .models import QualityVariant

MANIFEST_EXTENSION = ".m3u8"
SCHEME_PREFIX = "http"
SCHEME_SUFFIXES = ("://", "s://")
# A URL run ends at a quote, whitespace, a tag bracket or a character that is
# never legal unescaped in a URL.
RUN_TERMINATORS = "\"'<> \t\r\n\f\v`\\[]{}|^"
# "a.m3u8,https://b" lists split into separate runs.
LIST_SEPARATORS = ",;"
QUERY_MARKERS = frozenset("?#&")
PATH_CONTINUATION = frozenset("./-_~%")
TRAILING_PUNCTUATION = ").,;:!"
_RUN_CHUNK = re.compile("[^" + re.escape(RUN_TERMINATORS + LIST_SEPARATORS) + "]*")

STREAM_INF_TAG = "#EXT-X-STREAM-INF:"


def _scheme_length(text: str, start: int) -> int:
    """Length of the ``http://`` / ``https://`` prefix at ``start``, or 0."""

    offset = start + len(SCHEME_PREFIX)
    for suffix in SCHEME_SUFFIXES:
        if text.startswith(suffix, offset):
            return len(SCHEME_PREFIX) + len(suffix)
    return 0


def _run_end(text: str, body_start: int) -> int:
    end = body_start
    while True:
        end = _RUN_CHUNK.match(text, end).end()
        if end >= len(text) or text[end] not in LIST_SEPARATORS:
            return end
        if text.startswith(SCHEME_PREFIX, end + 1):
            return end
        end += 1


def _manifest_url(text: str, start: int, body_start: int, end: int) -> Optional[str]:
    """Cut the URL in ``text[start:end]`` at its first usable ``.m3u8``.

    The extension must close the path: it is followed by the end of the run,
    a query/fragment marker (the query then runs to the end of the run), or a
    character that cannot continue a path, such as ``)`` or ``,``.
    """

    lowered = text[body_start:end].lower()
    index = lowered.find(MANIFEST_EXTENSION)
    while index >= 0:
        after = body_start + index + len(MANIFEST_EXTENSION)
        if after == end:
            return text[start:after]
        follower = text[after]
        if follower in QUERY_MARKERS:
            return text[start:end].rstrip(TRAILING_PUNCTUATION)
        if not (follower.isalnum() or follower in PATH_CONTINUATION):
            return text[start:after]
        index = lowered.find(MANIFEST_EXTENSION, index + len(MANIFEST_EXTENSION))
    return None


def extract_master_manifest_url(text: str) -> str:
    """Return the first absolute ``.m3u8`` URL found in ``text``.

    Single forward pass: every character is visited a bounded number of
    times, so cost stays linear in the size of the page.
    """

    text = text or ""
    pos = 0
    while True:
        start = text.find(SCHEME_PREFIX, pos)
        if start < 0:
            raise NotFound("No .m3u8 master link found")

        scheme_length = _scheme_length(text, start)
        if not scheme_length:
            pos = start + len(SCHEME_PREFIX)
            continue

        body_start = start + scheme_length
        end = _run_end(text, body_start)
        url = _manifest_url(text, start, body_start, end)
        if url is not None:
            return url
        pos = end


def parse_attribute_list(raw: str) -> Dict[str, str]:
    """Parse an HLS attribute list, honouring quoted values containing commas."""

    attributes: Dict[str, str] = {}
    key: List[str] = []
    value: List[str] = []
    in_value = False
    in_quotes = False

    def _flush() -> None:
        name = "".join(key).strip().upper()
        if name:
            attributes[name] = "".join(value).strip()

    for char in raw:
        if in_quotes:
            if char == '"':
                in_quotes = False
            else:
                value.append(char)
        elif char == '"' and in_value:
            in_quotes = True
        elif char == ",":
            _flush()
            key, value, in_value = [], [], False
        elif char == "=" and not in_value:
            in_value = True
        elif in_value:
            value.append(char)
        else:
            key.append(char)
    _flush()
    return attributes


def _parse_resolution(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    width, sep, height = value.lower().partition("x")
    if not sep:
        return None
    try:
        int(width)
        return int(height)
    except ValueError:
        return None


def _parse_bandwidth(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def extract_variants(master_text: str, master_url: str) -> List[QualityVariant]:
    """Return the resolution-tagged variants declared by a master playlist.

    An empty list means a single-rendition manifest, not an error.
    """

    variants: List[QualityVariant] = []
    pending: Optional[Dict[str, str]] = None

    for raw_line in (master_text or "").splitlines():
        line = raw_line.strip()
        if not line:
            continue

        if line.startswith(STREAM_INF_TAG):
            pending = parse_attribute_list(line[len(STREAM_INF_TAG):])
            continue

        if line.startswith("#"):
            # a declaration must be directly followed by its URI
            pending = None
            continue

        if pending is None:
            continue

        height = _parse_resolution(pending.get("RESOLUTION"))
        if height is not None:
            variants.append(
                QualityVariant(
                    vertical_resolution=height,
                    url=urljoin(master_url, line),
                    bandwidth=_parse_bandwidth(pending.get("BANDWIDTH")),
                )
            )
        pending = None

    return variants
