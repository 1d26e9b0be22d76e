"""Main application module.

This module builds the FastAPI application, includes routes,
and configures middleware and exception handlers.
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from short_iron.api import api_router
from short_iron.core.config import settings
from short_iron.core.logging import setup_logging
from short_iron.middleware.logging import LoggingMiddleware
from short_iron.services.registry import URLRegistry

# Setup logging
logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Run startup and shutdown tasks."""
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT.value}")
    logger.info(f"Debug mode: {settings.DEBUG}")
    yield
    logger.info(
        "Shutting down {app_name}",
        app_name=settings.APP_NAME,
        mappings=len(app.state.registry),
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle validation errors with detailed information."""
    logger.info(f"Request validation error: {exc}")
    return JSONResponse(
        status_code=422,
        content={"detail": "Validation error", "errors": exc.errors()}
    )


async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler to catch and log all unhandled exceptions."""
    error_id = f"error-{time.time()}"
    error_location = f"{request.method} {request.url.path}"

    # Log detailed exception information with traceback
    logger.opt(exception=exc).error(
        "Unhandled exception in {location}",
        location=error_location,
        error_id=error_id,
        url=str(request.url),
        method=request.method,
        path_params=request.path_params,
        client_host=request.client.host if request.client else None
    )

    # Return a 500 response with error information
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error occurred",
            "error_id": error_id,
            "message": str(exc) if settings.DEBUG else "Internal server error"
        }
    )


def create_app(registry: Optional[URLRegistry] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        registry: Registry shared by all handlers; a fresh one is created if omitted

    Returns:
        FastAPI: The configured application
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # One registry per process, handed to every request through app.state
    app.state.registry = registry if registry is not None else URLRegistry()

    if settings.REQUEST_LOGGING_ENABLED:
        app.add_middleware(LoggingMiddleware)
    else:
        logger.info("Request logging is disabled in settings")

    # Include API router
    app.include_router(api_router)

    # Add exception handlers
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    return app


app = create_app()
