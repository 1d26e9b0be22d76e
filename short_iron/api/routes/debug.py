"""Debugging endpoints exposing the registry contents."""

from typing import Dict

from fastapi import APIRouter, Depends

from short_iron.api.dependencies import get_registry
from short_iron.services.registry import URLRegistry

router = APIRouter(prefix="/misc", tags=["debug"])


@router.get(
    "/debug",
    response_model=Dict[str, str],
    summary="List every known URL",
    response_description="Mapping of long URLs to their short URLs"
)
def debug_mappings(registry: URLRegistry = Depends(get_registry)):
    """Return all known URLs and their short versions."""
    return registry.snapshot()
