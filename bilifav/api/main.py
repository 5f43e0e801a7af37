"""FastAPI application entry point.

Creates and configures the favorites player REST API with
cross-origin headers, Prometheus metrics and OpenAPI documentation.
"""

from fastapi import FastAPI

from bilifav.api.middleware import CrossOriginMiddleware
from bilifav.api.routers import favorites, health
from bilifav.monitoring.middleware import PrometheusMiddleware, mount_metrics
from bilifav.settings import settings

# =============================================================================
# APPLICATION FACTORY
# =============================================================================


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance.
    """
    public_docs = settings.environment != "production"
    app = FastAPI(
        title=settings.api.title,
        version=settings.api.version,
        description="Resolve Bilibili favorites playlists into playable videos",
        docs_url="/docs" if public_docs else None,
        redoc_url="/redoc" if public_docs else None,
        openapi_url="/openapi.json" if public_docs else None,
    )
    app.add_middleware(PrometheusMiddleware)
    # Added last so it wraps every other layer, /metrics included.
    app.add_middleware(CrossOriginMiddleware)
    mount_metrics(app)
    _register_routers(app)
    return app


def _register_routers(app: FastAPI) -> None:
    """Register API routers.

    Args:
        app: FastAPI application instance.
    """
    app.include_router(health.router)
    app.include_router(favorites.router)


app = create_app()


# =============================================================================
# CLI ENTRY POINT
# =============================================================================


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bilifav.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
    )
