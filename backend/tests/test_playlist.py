"""Tests for the manifest URL scanner and the variant parser."""
from __future__ import annotations

import time

import pytest

from backend.resolver.errors import NotFound
from backend.resolver.playlist import (
    extract_master_manifest_url,
    extract_variants,
    parse_attribute_list,
)


def test_master_url_stops_at_closing_quote() -> None:
    """A double quote closes the URL inside a player config."""

    text = 'player.setup({file: "https://cdn.example/live/master.m3u8", width: 640});'

    assert extract_master_manifest_url(text) == "https://cdn.example/live/master.m3u8"


def test_master_url_keeps_query_string() -> None:
    """Query parameters after the extension stay on the URL."""

    text = "<source src='https://cdn.example/a/index.m3u8?token=xyz&exp=1'>"

    assert extract_master_manifest_url(text) == "https://cdn.example/a/index.m3u8?token=xyz&exp=1"


def test_first_manifest_url_wins() -> None:
    """Document order decides between several manifests."""

    text = (
        '"https://cdn.example/first.m3u8" '
        '"https://cdn.example/second.m3u8"'
    )

    assert extract_master_manifest_url(text) == "https://cdn.example/first.m3u8"


def test_non_manifest_urls_are_skipped() -> None:
    """URLs without a manifest extension are passed over."""

    text = (
        '<link href="https://static.example/app.css">'
        '<script>var src = "http://cdn.example/vod/master.m3u8";</script>'
    )

    assert extract_master_manifest_url(text) == "http://cdn.example/vod/master.m3u8"


def test_escaped_quote_is_not_part_of_url() -> None:
    """JSON-escaped quotes do not leak a backslash into the URL."""

    text = '{"sources": "{\\"file\\":\\"https://cdn.example/x/master.m3u8\\"}"}'

    assert extract_master_manifest_url(text) == "https://cdn.example/x/master.m3u8"


def test_extension_must_end_the_path() -> None:
    """``master.m3u8.bak`` is not a manifest."""

    text = '"https://cdn.example/master.m3u8.bak" "https://cdn.example/real.m3u8"'

    assert extract_master_manifest_url(text) == "https://cdn.example/real.m3u8"


@pytest.mark.parametrize(
    "text",
    [
        "const src = `https://cdn.example/a/master.m3u8`;",
        "hls.loadSource(https://cdn.example/a/master.m3u8)",
        "[https://cdn.example/a/master.m3u8,https://cdn.example/a/poster.jpg]",
        "file=https://cdn.example/a/master.m3u8;autoplay=1",
        "sources: [https://cdn.example/a/master.m3u8]",
    ],
)
def test_manifest_url_closed_by_punctuation(text: str) -> None:
    """Backticks, brackets and list punctuation close an unquoted URL."""

    assert extract_master_manifest_url(text) == "https://cdn.example/a/master.m3u8"


def test_query_string_drops_trailing_punctuation() -> None:
    """A query running into ``)`` or ``;`` loses that trailing character."""

    text = "jwplayer().load(https://cdn.example/a/master.m3u8?sig=1);"

    assert extract_master_manifest_url(text) == "https://cdn.example/a/master.m3u8?sig=1"


def test_comma_separated_urls_are_split() -> None:
    """A manifest listed after another URL is found on its own."""

    text = "https://cdn.example/a/poster.jpg,https://cdn.example/a/master.m3u8"

    assert extract_master_manifest_url(text) == "https://cdn.example/a/master.m3u8"


def test_scheme_prefix_without_separator_is_ignored() -> None:
    """Words starting with ``http`` are not URLs."""

    text = "httpd httpx.m3u8 https://cdn.example/a/master.m3u8"

    assert extract_master_manifest_url(text) == "https://cdn.example/a/master.m3u8"


def test_large_page_is_scanned_in_linear_time() -> None:
    """Thousands of unrelated URLs before the manifest stay cheap to scan."""

    noise = "".join(f'"https://static.example/img/{n}.png" ' for n in range(32000))
    chained = ",".join(f"https://static.example/js/{n}.js" for n in range(8000))
    text = noise + chained + ' "https://cdn.example/hls/master.m3u8"'

    started = time.perf_counter()
    url = extract_master_manifest_url(text)
    elapsed = time.perf_counter() - started

    assert url == "https://cdn.example/hls/master.m3u8"
    assert elapsed < 2.0


def test_master_url_missing_raises_not_found() -> None:
    """Pages without a manifest raise NotFound."""

    with pytest.raises(NotFound):
        extract_master_manifest_url('<video src="https://cdn.example/movie.mp4"></video>')


def test_master_url_empty_text_raises_not_found() -> None:
    """Empty text has no manifest."""

    with pytest.raises(NotFound):
        extract_master_manifest_url("")


def test_attribute_list_honours_quoted_commas() -> None:
    """Commas inside a quoted CODECS value do not split the attribute."""

    attrs = parse_attribute_list('BANDWIDTH=800000,CODECS="avc1.4d401f,mp4a.40.2",RESOLUTION=640x360')

    assert attrs == {
        "BANDWIDTH": "800000",
        "CODECS": "avc1.4d401f,mp4a.40.2",
        "RESOLUTION": "640x360",
    }


def test_two_variants_are_titled_by_height() -> None:
    """Variants are labelled by their vertical resolution."""

    master = (
        "#EXTM3U\n"
        "#EXT-X-STREAM-INF:BANDWIDTH=2800000,RESOLUTION=1280x720\n"
        "720p.m3u8\n"
        "#EXT-X-STREAM-INF:BANDWIDTH=800000,RESOLUTION=640x360\n"
        "360p.m3u8\n"
    )

    variants = extract_variants(master, "https://example.com/a/master.m3u8")

    assert [variant.label for variant in variants] == ["720p", "360p"]
    assert [variant.vertical_resolution for variant in variants] == [720, 360]
    assert [variant.bandwidth for variant in variants] == [2800000, 800000]


def test_relative_variant_resolves_against_master_url() -> None:
    """Relative variant URIs resolve against the master URL."""

    master = "#EXTM3U\n#EXT-X-STREAM-INF:RESOLUTION=1280x720\n720p.m3u8\n"

    variants = extract_variants(master, "https://example.com/a/master.m3u8")

    assert variants[0].url == "https://example.com/a/720p.m3u8"


def test_absolute_and_rooted_variant_references() -> None:
    """Absolute and root-relative variant URIs are both resolved."""

    master = (
        "#EXTM3U\r\n"
        "#EXT-X-STREAM-INF:RESOLUTION=1920x1080\r\n"
        "https://other.example/hd/index.m3u8?sig=1\r\n"
        "#EXT-X-STREAM-INF:RESOLUTION=854x480\r\n"
        "/low/index.m3u8\r\n"
    )

    variants = extract_variants(master, "https://example.com/a/master.m3u8")

    assert [variant.url for variant in variants] == [
        "https://other.example/hd/index.m3u8?sig=1",
        "https://example.com/low/index.m3u8",
    ]


def test_declarations_without_resolution_or_uri_are_skipped() -> None:
    """Declarations lacking a resolution or a URI are dropped."""

    master = (
        "#EXTM3U\n"
        "#EXT-X-STREAM-INF:BANDWIDTH=64000,CODECS=\"mp4a.40.2\"\n"
        "audio.m3u8\n"
        "#EXT-X-STREAM-INF:RESOLUTION=1280x720\n"
        "#EXT-X-ENDLIST\n"
        "\n"
        "#EXT-X-STREAM-INF:RESOLUTION=640x360\n"
        "\n"
        "360p.m3u8\n"
    )

    variants = extract_variants(master, "https://example.com/master.m3u8")

    assert [(variant.label, variant.url) for variant in variants] == [
        ("360p", "https://example.com/360p.m3u8"),
    ]


def test_single_rendition_manifest_has_no_variants() -> None:
    """A media playlist yields no variants."""

    media = "#EXTM3U\n#EXT-X-TARGETDURATION:10\n#EXTINF:10.0,\nseg0.ts\n#EXT-X-ENDLIST\n"

    assert extract_variants(media, "https://example.com/index.m3u8") == []
