"""Paginated playlist resolution.

Classes:
    FavoritesPageAssembler: Listing + concurrent resolution of one page.
"""

from .assembler import FavoritesPageAssembler

__all__ = ["FavoritesPageAssembler"]
