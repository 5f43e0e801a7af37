"""Shared pytest fixtures.

Upstream services are faked with ``httpx.MockTransport`` (see
``tests/fakes.py``); no test reaches the network.
"""

from collections.abc import AsyncGenerator

import httpx
import pytest

from bilifav.clients import FavoritesClient, VideoResolver
from bilifav.services.playlist import FavoritesPageAssembler
from tests.fakes import LISTING_URL, RESOLVER_URL, FakeUpstream


@pytest.fixture(autouse=True, scope="function")
def mock_env_for_tests(monkeypatch: pytest.MonkeyPatch) -> None:
    """Mock env variables for reproducible tests."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("LOG_LEVEL", "INFO")


@pytest.fixture
def upstream() -> FakeUpstream:
    """Fresh fake upstream for one test."""
    return FakeUpstream()


@pytest.fixture
async def http_client(upstream: FakeUpstream) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Async HTTP client wired to the fake upstream."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(upstream)) as client:
        yield client


@pytest.fixture
def favorites_client(http_client: httpx.AsyncClient) -> FavoritesClient:
    """Listing client pointed at the fake upstream."""
    return FavoritesClient(http_client, url=LISTING_URL)


@pytest.fixture
def video_resolver(http_client: httpx.AsyncClient) -> VideoResolver:
    """Parsing client pointed at the fake upstream."""
    return VideoResolver(http_client, url=RESOLVER_URL)


@pytest.fixture
def assembler(
    favorites_client: FavoritesClient,
    video_resolver: VideoResolver,
) -> FavoritesPageAssembler:
    """Unbounded page assembler over the fake upstream."""
    return FavoritesPageAssembler(favorites_client, video_resolver)
