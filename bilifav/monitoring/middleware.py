"""HTTP metrics for the favorites API.

Requests are labelled by the route template they matched, never by
the raw URL, so unknown paths all share the ``unmatched`` series.
"""

import time

from fastapi import FastAPI
from prometheus_client import Counter, Histogram, make_asgi_app
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

UNMATCHED_ROUTE = "unmatched"

HTTP_REQUESTS_TOTAL = Counter(
    "bilifav_http_requests_total",
    "HTTP requests by method, route template and status",
    ["method", "route", "status"],
)

# Resolved pages fan out to the parsing service, hence the long tail.
HTTP_REQUEST_DURATION = Histogram(
    "bilifav_http_request_duration_seconds",
    "HTTP request latency by method and route template",
    ["method", "route"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0],
)


def route_label(request: Request) -> str:
    """Path template of the route that served request, if any."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_ROUTE


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Counts and times every request except scrapes of /metrics."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path.startswith("/metrics"):
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        # The router fills scope["route"] while call_next runs.
        route = route_label(request)
        HTTP_REQUESTS_TOTAL.labels(request.method, route, str(response.status_code)).inc()
        HTTP_REQUEST_DURATION.labels(request.method, route).observe(elapsed)
        return response


def mount_metrics(app: FastAPI) -> None:
    """Serve the default Prometheus registry under /metrics."""
    app.mount("/metrics", make_asgi_app())
