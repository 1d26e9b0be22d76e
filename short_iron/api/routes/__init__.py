"""Routes package initialization.

This module exports the route collection for the application.
"""

from fastapi import APIRouter

from short_iron.api.routes import debug, health, redirect, shortener
from short_iron.core.config import settings

# Create root router
api_router = APIRouter()

# Shortening lives at the root, as in "POST /shorten"
api_router.include_router(shortener.router)

# Include debugging routes under /misc
api_router.include_router(debug.router)

# Include health check routes with API prefix
api_router.include_router(
    health.router,
    prefix=settings.API_PREFIX
)

# Include redirect routes last; "/{short_code}" matches any single segment
api_router.include_router(redirect.router)

__all__ = ["api_router"]
