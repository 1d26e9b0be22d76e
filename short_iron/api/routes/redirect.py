"""URL redirection endpoint."""

from fastapi import APIRouter, Depends, HTTPException, status
from starlette.responses import RedirectResponse
from loguru import logger

from short_iron.api import schemas
from short_iron.api.dependencies import get_registry
from short_iron.services.registry import URLRegistry

# Create router with tags
router = APIRouter(tags=["redirect"])


@router.get(
    "/{short_code}",
    response_class=RedirectResponse,
    status_code=status.HTTP_303_SEE_OTHER,
    responses={
        404: {"model": schemas.ErrorResponse, "description": "Short URL not registered"}
    }
)
def redirect_to_original_url(
    short_code: str,
    registry: URLRegistry = Depends(get_registry),
):
    """Redirect to the original URL with 303 See Other."""
    url = registry.resolve(short_code)
    short_url = registry.short_url(short_code)

    if url is None:
        logger.info("Short URL isn't registered, no redirect", short_url=short_url)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Short URL '{short_url}' not found"
        )

    logger.info("Redirected to expanded URL", short_url=short_url, expanded_url=url)
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)
