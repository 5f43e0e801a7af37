"""Exception hierarchy for the favorites player.

Validation and listing errors abort a page request. Resolution
transport errors are per-video and never reach the HTTP caller.
"""


class FavPlayerError(Exception):
    """Base exception for favorites player errors."""

    pass


class InvalidPageRequest(FavPlayerError):
    """Raised when paging parameters are missing or out of range."""

    pass


class UpstreamListingError(FavPlayerError):
    """Raised when the favorites listing call fails.

    Attributes:
        status: HTTP status returned by the listing service, if any.
        code: Non-zero business code from the listing payload, if any.
    """

    def __init__(
        self,
        message: str,
        status: int | None = None,
        code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code


class ResolutionTransportError(FavPlayerError):
    """Raised when the parsing service cannot be reached for one video."""

    def __init__(self, bvid: str, reason: str) -> None:
        super().__init__(f"Resolution request failed for {bvid}: {reason}")
        self.bvid = bvid
        self.reason = reason
