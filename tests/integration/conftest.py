"""Shared fixtures for API integration tests.

Each test gets a fresh app from ``create_app()`` whose assembler
dependency is wired to the fake upstream, so requests travel through
the real routers and middleware without leaving the process.
"""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from bilifav.api.dependencies.upstream import get_assembler
from bilifav.api.main import create_app
from bilifav.services.playlist import FavoritesPageAssembler

# ---------------------------------------------------------------------------
# Auto-mark all tests in this directory as "integration"
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Auto-apply ``@pytest.mark.integration`` to every test collected here."""
    integration_marker = pytest.mark.integration
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(integration_marker)


# ---------------------------------------------------------------------------
# App + client fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def app(assembler: FavoritesPageAssembler) -> FastAPI:
    """App whose assembler talks to the fake upstream."""
    application = create_app()
    application.dependency_overrides[get_assembler] = lambda: assembler
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the test app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
