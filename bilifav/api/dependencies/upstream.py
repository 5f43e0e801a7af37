"""Upstream client dependencies for FastAPI.

Provides a per-request async HTTP client and the page assembler
built on top of it.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

import httpx
from fastapi import Depends

from bilifav.clients import FavoritesClient, VideoResolver
from bilifav.services.playlist import FavoritesPageAssembler
from bilifav.settings import settings

# =============================================================================
# DEPENDENCIES
# =============================================================================


async def get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """FastAPI dependency for an async HTTP client.

    Yields:
        HTTP client, closed after the request.
    """
    async with httpx.AsyncClient(follow_redirects=True) as client:
        yield client


def get_assembler(
    http_client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
) -> FavoritesPageAssembler:
    """Build the page assembler for one request.

    Args:
        http_client: Request-scoped HTTP client.

    Returns:
        Assembler wired to the listing and parsing clients.
    """
    return FavoritesPageAssembler(
        fetcher=FavoritesClient(http_client),
        resolver=VideoResolver(http_client),
        max_concurrency=settings.resolver.max_concurrency,
    )


# Type alias for cleaner endpoint signatures
Assembler = Annotated[FavoritesPageAssembler, Depends(get_assembler)]
