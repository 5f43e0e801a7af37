"""Upstream HTTP clients.

Classes:
    FavoritesClient: Favorites listing API (one page of BV ids).
    VideoResolver: Video parsing service (BV id to playable URL).

Example:
    >>> import httpx
    >>> from bilifav.clients import FavoritesClient
    >>>
    >>> async with httpx.AsyncClient() as http:
    ...     listing = await FavoritesClient(http).fetch("3399027968", 1, 20)
"""

from .favorites import FavoritesClient
from .resolver import VideoResolver

__all__ = [
    "FavoritesClient",
    "VideoResolver",
]
