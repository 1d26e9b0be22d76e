"""HTTP middleware for the Short Iron application."""

from short_iron.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
