"""Player state and its transitions.

ViewerState is an immutable snapshot. Every event (page requested,
page loaded, selection, next, previous, playback ended) is a pure
function from one snapshot to the next.

Page loads carry the generation they were requested under; a load
whose generation is older than the state's is discarded, so a slow
response for an abandoned page never replaces the current one.
"""

from dataclasses import dataclass, replace

from bilifav.models import PageResult, ResolvedVideo, count_pages


@dataclass(frozen=True)
class ViewerState:
    """Snapshot of the player.

    Attributes:
        media_id: Favorites playlist being browsed.
        page: Current page number.
        page_size: Current page size.
        videos: Videos of the loaded page. The same video may appear twice.
        current_index: Position of the selected video in videos, or None.
        generation: Incremented on every page request.
        loading: True between a page request and its load.
        total_items: Upstream total item count.
        has_more: Upstream "more pages" flag.
        error: Message of the last failed load, if any.
    """

    media_id: str | None = None
    page: int = 1
    page_size: int = 10
    videos: tuple[ResolvedVideo, ...] = ()
    current_index: int | None = None
    generation: int = 0
    loading: bool = False
    total_items: int = 0
    has_more: bool = False
    error: str | None = None

    @property
    def current(self) -> ResolvedVideo | None:
        """Selected video, or None."""
        if self.current_index is None:
            return None
        return self.videos[self.current_index]

    @property
    def total_pages(self) -> int:
        """Total page count at the current page size."""
        return count_pages(self.total_items, self.page_size)


# =============================================================================
# PAGINATION EVENTS
# =============================================================================


def page_requested(
    state: ViewerState,
    page: int,
    page_size: int,
    media_id: str | None = None,
) -> ViewerState:
    """Start loading a page; clears the list and the selection."""
    return replace(
        state,
        media_id=media_id if media_id is not None else state.media_id,
        page=page,
        page_size=page_size,
        videos=(),
        current_index=None,
        generation=state.generation + 1,
        loading=True,
        error=None,
    )


def page_loaded(state: ViewerState, result: PageResult, generation: int) -> ViewerState:
    """Apply a loaded page.

    Selects the first video only when nothing is selected yet.
    Stale generations leave the state untouched.
    """
    if generation != state.generation:
        return state

    index = state.current_index
    if index is not None and index >= len(result.videos):
        index = None
    if index is None and result.videos:
        index = 0

    return replace(
        state,
        videos=result.videos,
        current_index=index,
        loading=False,
        total_items=result.total_items,
        has_more=result.has_more,
        error=None,
    )


def page_failed(state: ViewerState, message: str, generation: int) -> ViewerState:
    """Record a failed page load. Stale generations are ignored."""
    if generation != state.generation:
        return state
    return replace(state, loading=False, error=message)


# =============================================================================
# PLAYBACK EVENTS
# =============================================================================


def select(state: ViewerState, bvid: str) -> ViewerState:
    """Select a video of the current page by BV id.

    Unknown ids leave the state unchanged.
    """
    for index, video in enumerate(state.videos):
        if video.bvid == bvid:
            return replace(state, current_index=index)
    return state


def next_video(state: ViewerState) -> ViewerState:
    """Move to the next video, wrapping to the first after the last."""
    if not state.videos:
        return state
    index = state.current_index
    next_index = 0 if index is None else (index + 1) % len(state.videos)
    return replace(state, current_index=next_index)


def previous_video(state: ViewerState) -> ViewerState:
    """Move to the previous video, wrapping to the last before the first."""
    if not state.videos:
        return state
    index = state.current_index
    prev_index = len(state.videos) - 1 if index is None else (index - 1) % len(state.videos)
    return replace(state, current_index=prev_index)


def playback_ended(state: ViewerState) -> ViewerState:
    """The current video finished; advance circularly."""
    return next_video(state)


def play_order(state: ViewerState) -> list[ResolvedVideo]:
    """Videos in the order they play back-to-back from the current one.

    Each video appears once; the sequence ends just before playback
    would wrap around to the starting video.
    """
    if not state.videos:
        return []
    if state.current_index is None:
        state = next_video(state)

    order: list[ResolvedVideo] = []
    for _ in state.videos:
        order.append(state.current)
        state = playback_ended(state)
    return order
