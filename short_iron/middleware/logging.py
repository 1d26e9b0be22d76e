"""
Request logging middleware for FastAPI using Loguru.

Every response gets an X-Request-ID header, and one REQUEST-level record
is written per request with its method, path, status and latency.
"""

import time
import uuid

from fastapi import Request, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from short_iron.core.logging import REQUEST_LEVEL


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log one record per request and tag the response with a request ID."""

    async def dispatch(self, request: Request, call_next) -> Response:
        # Reuse an upstream request ID when a proxy supplied one
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        # Start timing the request
        start_time = time.perf_counter()

        with logger.contextualize(request_id=request_id):
            response = await call_next(request)

        # Add request ID to response headers for traceability
        response.headers["X-Request-ID"] = request_id

        process_time_ms = round((time.perf_counter() - start_time) * 1000, 2)

        # Get client IP with forwarded headers consideration
        client_ip = request.client.host if request.client else "unknown"
        if "X-Forwarded-For" in request.headers:
            forwarded_ips = request.headers["X-Forwarded-For"].split(",")
            if forwarded_ips:
                client_ip = forwarded_ips[0].strip()

        logger.log(
            REQUEST_LEVEL,
            "{method} {path} {status_code} {process_time_ms}ms",
            request_id=request_id,
            client_ip=client_ip,
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time_ms=process_time_ms,
        )

        return response
