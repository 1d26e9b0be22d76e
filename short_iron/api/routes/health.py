"""Health check endpoints for monitoring application status."""

import time

from fastapi import APIRouter, Depends, status

from short_iron.api import schemas
from short_iron.api.dependencies import get_registry
from short_iron.core.config import settings
from short_iron.services.registry import URLRegistry

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    response_model=schemas.HealthResponse,
    summary="Get system health status",
    response_description="Health status of all system components"
)
def health_check(registry: URLRegistry = Depends(get_registry)):
    """Check health of all system components."""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT.value,
        "timestamp": time.time(),
        "components": {
            "registry": {
                "status": "healthy",
                "mappings": len(registry),
            }
        },
    }


@router.get(
    "/health/live",
    status_code=status.HTTP_200_OK,
    response_model=schemas.LivenessResponse,
    summary="Liveness probe",
    response_description="Application liveness status"
)
async def liveness_probe():
    """Simple check that application is running."""
    return {"alive": True}
