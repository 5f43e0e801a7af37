"""Unit tests for M3U export."""

from pathlib import Path

from bilifav.models import ResolvedVideo
from bilifav.services.player import render_m3u, write_m3u

VIDEOS = [
    ResolvedVideo(bvid="BV1", title="First  video", url="https://cdn.test/u1.mp4"),
    ResolvedVideo(bvid="BV2", title="Second\nvideo", url="https://cdn.test/u2.mp4"),
]


class TestRenderM3U:
    """Playlist text rendering."""

    @staticmethod
    def test_entries_in_order() -> None:
        text = render_m3u(VIDEOS)

        assert text.splitlines() == [
            "#EXTM3U",
            "#EXTINF:-1,First video [BV1]",
            "https://cdn.test/u1.mp4",
            "#EXTINF:-1,Second video [BV2]",
            "https://cdn.test/u2.mp4",
        ]

    @staticmethod
    def test_empty_playlist() -> None:
        assert render_m3u([]) == "#EXTM3U\n"


class TestWriteM3U:
    """Playlist file output."""

    @staticmethod
    def test_creates_parent_directories(tmp_path: Path) -> None:
        target = tmp_path / "exports" / "nested" / "fav.m3u"

        written = write_m3u(VIDEOS, target)

        assert written == target
        assert target.read_text(encoding="utf-8") == render_m3u(VIDEOS)
