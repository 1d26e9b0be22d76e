"""API package for the Short Iron application.

This package contains the API layer components including routes,
request/response schemas, and dependency providers.
"""

from short_iron.api.routes import api_router

__all__ = ["api_router"]
