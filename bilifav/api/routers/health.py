"""Health endpoint for REST API."""

from fastapi import APIRouter

from bilifav.api.schemas import HealthResponse
from bilifav.settings import settings

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Verify API is running and responsive.",
)
def health_check() -> HealthResponse:
    """Health check endpoint.

    Returns:
        API health status with version.
    """
    return HealthResponse(status="healthy", version=settings.api.version)
