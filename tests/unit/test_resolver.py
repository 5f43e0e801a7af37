"""Unit tests for the video parsing client.

A payload reporting failure yields None; transport problems raise
ResolutionTransportError.
"""

import httpx
import pytest

from bilifav.clients import VideoResolver
from bilifav.errors import ResolutionTransportError
from bilifav.models import ResolvedVideo
from tests.fakes import FakeUpstream, resolver_payload


class TestResolveSuccess:
    """Successful resolution."""

    @staticmethod
    async def test_returns_resolved_video(video_resolver: VideoResolver, upstream: FakeUpstream) -> None:
        upstream.videos["BV1"] = resolver_payload("A", "https://cdn.test/u1.mp4")

        video = await video_resolver.resolve("BV1")

        assert video == ResolvedVideo(bvid="BV1", title="A", url="https://cdn.test/u1.mp4")

    @staticmethod
    async def test_queries_canonical_video_url(video_resolver: VideoResolver, upstream: FakeUpstream) -> None:
        upstream.videos["BV1xx411c7mD"] = resolver_payload("A", "u1")

        await video_resolver.resolve("BV1xx411c7mD")

        request = upstream.resolver_requests[0]
        assert request.url.params["url"] == "https://www.bilibili.com/video/BV1xx411c7mD"
        assert request.headers["Referer"] == "https://www.bilibili.com/"

    @staticmethod
    def test_video_page_url(video_resolver: VideoResolver) -> None:
        assert video_resolver.video_page_url("BV9") == "https://www.bilibili.com/video/BV9"


class TestResolveUnresolved:
    """Per-item failures reported by the payload return None."""

    @staticmethod
    async def test_non_zero_code(video_resolver: VideoResolver, upstream: FakeUpstream) -> None:
        upstream.videos["BV2"] = resolver_payload("B", "u2", code=201, msg="video unavailable")
        assert await video_resolver.resolve("BV2") is None

    @staticmethod
    @pytest.mark.parametrize(
        "data",
        [
            {"title": "", "video": "u2"},
            {"title": "B", "video": ""},
            {"title": "B"},
            {"video": "u2"},
            {"title": "B", "video": {"url": "u2"}},
            {"title": ["B"], "video": "u2"},
            {"title": "B", "video": 42},
            None,
        ],
    )
    async def test_missing_fields(video_resolver: VideoResolver, upstream: FakeUpstream, data) -> None:
        upstream.videos["BV2"] = {"code": 0, "msg": "ok", "data": data}
        assert await video_resolver.resolve("BV2") is None

    @staticmethod
    async def test_unknown_video(video_resolver: VideoResolver) -> None:
        assert await video_resolver.resolve("BV404") is None


class TestResolveTransportErrors:
    """Transport-level failures raise ResolutionTransportError."""

    @staticmethod
    async def test_http_error_status(video_resolver: VideoResolver, upstream: FakeUpstream) -> None:
        upstream.videos["BV3"] = 502

        with pytest.raises(ResolutionTransportError) as exc_info:
            await video_resolver.resolve("BV3")

        assert exc_info.value.bvid == "BV3"
        assert "502" in exc_info.value.reason

    @staticmethod
    async def test_network_error(video_resolver: VideoResolver, upstream: FakeUpstream) -> None:
        upstream.videos["BV3"] = httpx.ReadTimeout("timed out")

        with pytest.raises(ResolutionTransportError) as exc_info:
            await video_resolver.resolve("BV3")

        assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)

    @staticmethod
    async def test_invalid_json() -> None:
        def html(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html></html>")

        async with httpx.AsyncClient(transport=httpx.MockTransport(html)) as http:
            resolver = VideoResolver(http, url="https://parser.test/jx")
            with pytest.raises(ResolutionTransportError):
                await resolver.resolve("BV1")
