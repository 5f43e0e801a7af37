"""Playlist viewer driving the page assembler.

Holds a ViewerState and feeds it the events produced by user
controls and page loads. Rendering is left to the caller.
"""

from bilifav.models import ResolvedVideo
from bilifav.services.player import state as transitions
from bilifav.services.player.state import ViewerState
from bilifav.services.playlist.assembler import FavoritesPageAssembler
from bilifav.utils.logger import setup_logger

logger = setup_logger("services.player.viewer")


class PlaylistViewer:
    """Stateful front for the player transitions.

    Attributes:
        state: Current immutable snapshot.
    """

    def __init__(
        self,
        assembler: FavoritesPageAssembler,
        media_id: str,
        page_size: int = 10,
    ) -> None:
        """Initialize viewer.

        Args:
            assembler: Page assembler used for every page load.
            media_id: Favorites playlist to browse.
            page_size: Initial page size.
        """
        self._assembler = assembler
        self.state = ViewerState(media_id=media_id, page_size=page_size)

    @property
    def current(self) -> ResolvedVideo | None:
        """Currently selected video."""
        return self.state.current

    # -------------------------------------------------------------------------
    # Pagination
    # -------------------------------------------------------------------------

    async def load(self, page: int, page_size: int | None = None) -> ViewerState:
        """Load a page, discarding the result if a newer load started.

        Args:
            page: Page number.
            page_size: Page size. Keeps the current size if None.

        Returns:
            State after the load.

        Raises:
            FavPlayerError: If the page request is invalid or listing fails.
                Any exception is recorded in the state before it propagates.
        """
        size = page_size if page_size is not None else self.state.page_size
        self.state = transitions.page_requested(self.state, page, size)
        generation = self.state.generation

        try:
            result = await self._assembler.assemble_page(self.state.media_id, page, size)
        except Exception as e:
            self.state = transitions.page_failed(self.state, str(e), generation)
            raise

        if generation != self.state.generation:
            logger.debug(f"Discarding stale load of page {page} (generation {generation})")
        self.state = transitions.page_loaded(self.state, result, generation)
        return self.state

    async def next_page(self) -> ViewerState:
        """Load the following page if the upstream reports more."""
        if not self.state.has_more:
            return self.state
        return await self.load(self.state.page + 1)

    async def previous_page(self) -> ViewerState:
        """Load the preceding page if there is one."""
        if self.state.page <= 1:
            return self.state
        return await self.load(self.state.page - 1)

    async def change_page_size(self, page_size: int) -> ViewerState:
        """Reload from the first page at a new page size."""
        return await self.load(1, page_size)

    # -------------------------------------------------------------------------
    # Playback
    # -------------------------------------------------------------------------

    def select(self, bvid: str) -> ResolvedVideo | None:
        """Select a video by BV id."""
        self.state = transitions.select(self.state, bvid)
        return self.state.current

    def next(self) -> ResolvedVideo | None:
        """Skip to the next video."""
        self.state = transitions.next_video(self.state)
        return self.state.current

    def previous(self) -> ResolvedVideo | None:
        """Go back to the previous video."""
        self.state = transitions.previous_video(self.state)
        return self.state.current

    def on_ended(self) -> ResolvedVideo | None:
        """Handle the end of playback of the current video."""
        self.state = transitions.playback_ended(self.state)
        return self.state.current

    def play_order(self) -> list[ResolvedVideo]:
        """Back-to-back playback sequence from the current video."""
        return transitions.play_order(self.state)
