"""API request and response schemas.

This module contains Pydantic models for API request validation
and response serialization.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ShortenRequest(BaseModel):
    """Request schema for shortening a URL.

    The URL is kept as a plain string; the registry decides what counts as
    a valid absolute URL so that its canonical form is not altered here.
    """
    url: str = Field(..., examples=["https://google.com"])


class LivenessResponse(BaseModel):
    alive: bool = True


class HealthResponse(BaseModel):
    """Response schema for the health check."""
    status: str
    version: str
    environment: str
    timestamp: float
    components: Dict[str, Dict[str, Any]]


class ErrorResponse(BaseModel):
    """Response schema for errors."""
    detail: str
    error_id: Optional[str] = None
