"""Player model: immutable viewer state, transitions and M3U export."""

from .export import render_m3u, write_m3u
from .state import ViewerState
from .viewer import PlaylistViewer

__all__ = [
    "PlaylistViewer",
    "ViewerState",
    "render_m3u",
    "write_m3u",
]
