"""Upstream source settings.

Exports configuration classes for the Bilibili services:
- Favorites listing API (REST)
- Video parsing service (REST)
"""

from bilifav.settings.sources.bilibili import BilibiliSettings, ResolverSettings

__all__ = [
    "BilibiliSettings",
    "ResolverSettings",
]
