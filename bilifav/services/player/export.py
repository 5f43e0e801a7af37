"""Extended M3U export of a play order."""

from collections.abc import Iterable
from pathlib import Path

from bilifav.models import ResolvedVideo


def render_m3u(videos: Iterable[ResolvedVideo]) -> str:
    """Render videos as an extended M3U playlist.

    Args:
        videos: Videos in playback order.

    Returns:
        Playlist text, one ``#EXTINF`` entry per video.
    """
    lines = ["#EXTM3U"]
    for video in videos:
        title = " ".join(video.title.split())
        lines.append(f"#EXTINF:-1,{title} [{video.bvid}]")
        lines.append(video.url)
    return "\n".join(lines) + "\n"


def write_m3u(videos: Iterable[ResolvedVideo], path: Path) -> Path:
    """Write an M3U playlist, creating parent directories.

    Args:
        videos: Videos in playback order.
        path: Destination file.

    Returns:
        The written path.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_m3u(videos), encoding="utf-8")
    return path
