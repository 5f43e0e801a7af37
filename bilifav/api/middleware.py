"""Cross-origin middleware.

Attaches permissive CORS headers to every response and answers
``OPTIONS`` preflight requests with an empty 200.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from bilifav.settings import settings


class CrossOriginMiddleware(BaseHTTPMiddleware):
    """Adds the configured ``Access-Control-*`` headers to all responses."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Short-circuit preflight requests, decorate everything else.

        Args:
            request: Incoming HTTP request.
            call_next: Next middleware/handler in the chain.

        Returns:
            HTTP response carrying cross-origin headers.
        """
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)

        response.headers.update(settings.cors.headers)
        return response
