"""API dependencies for FastAPI.

This module provides dependency injection functions for FastAPI endpoints
to access the shared registry instance.
"""

from fastapi import Request

from short_iron.services.registry import URLRegistry


def get_registry(request: Request) -> URLRegistry:
    """Get the registry created together with the application."""
    return request.app.state.registry
