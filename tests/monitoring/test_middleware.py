"""Tests for Prometheus metrics middleware."""

import pytest
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY

from bilifav.monitoring.middleware import UNMATCHED_ROUTE, PrometheusMiddleware, mount_metrics


def _requests(method: str, route: str, status: str) -> float:
    value = REGISTRY.get_sample_value(
        "bilifav_http_requests_total",
        {"method": method, "route": route, "status": status},
    )
    return value or 0.0


@pytest.fixture
def client() -> TestClient:
    """TestClient for a minimal app behind the metrics middleware."""
    app = FastAPI()
    app.add_middleware(PrometheusMiddleware)
    mount_metrics(app)

    @app.get("/ping")
    def ping():
        return {"status": "ok"}

    @app.get("/ping-error")
    def ping_error():
        return JSONResponse(status_code=500, content={"success": False, "error": "boom"})

    @app.get("/videos/{bvid}")
    def video(bvid: str):
        return {"bv": bvid}

    return TestClient(app)


class TestMetricsEndpoint:
    """GET /metrics"""

    @staticmethod
    def test_serves_prometheus_text(client: TestClient) -> None:
        client.get("/ping")
        response = client.get("/metrics")

        assert response.status_code == 200
        assert "text/plain" in response.headers["content-type"]
        assert "bilifav_http_request_duration_seconds_count" in response.text

    @staticmethod
    def test_scrapes_are_not_counted(client: TestClient) -> None:
        client.get("/metrics")
        body = client.get("/metrics").text

        counted = [line for line in body.splitlines() if line.startswith("bilifav_http_requests_total{")]
        assert all("/metrics" not in line for line in counted)


class TestRouteLabels:
    """Series are keyed by route template."""

    @staticmethod
    def test_status_recorded(client: TestClient) -> None:
        ok_before = _requests("GET", "/ping", "200")
        error_before = _requests("GET", "/ping-error", "500")

        client.get("/ping")
        client.get("/ping-error")

        assert _requests("GET", "/ping", "200") == ok_before + 1
        assert _requests("GET", "/ping-error", "500") == error_before + 1

    @staticmethod
    def test_path_parameters_share_one_series(client: TestClient) -> None:
        before = _requests("GET", "/videos/{bvid}", "200")

        client.get("/videos/BV1")
        client.get("/videos/BV2")

        assert _requests("GET", "/videos/{bvid}", "200") == before + 2
        assert _requests("GET", "/videos/BV1", "200") == 0.0

    @staticmethod
    def test_unknown_paths_share_unmatched_series(client: TestClient) -> None:
        before = _requests("GET", UNMATCHED_ROUTE, "404")

        client.get("/random-a")
        client.get("/random-b/c")

        assert _requests("GET", UNMATCHED_ROUTE, "404") == before + 2
        assert _requests("GET", "/random-a", "404") == 0.0
