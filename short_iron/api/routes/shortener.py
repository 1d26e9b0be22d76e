"""URL shortening endpoint."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
from loguru import logger

from short_iron.api import schemas
from short_iron.api.dependencies import get_registry
from short_iron.services.exceptions import InvalidURLError
from short_iron.services.registry import URLRegistry

router = APIRouter(tags=["shortener"])


@router.post(
    "/shorten",
    response_class=PlainTextResponse,
    status_code=status.HTTP_200_OK,
    responses={
        200: {"content": {"text/plain": {"example": "short.fe/AbCdEfGhIj"}}},
        400: {"model": schemas.ErrorResponse, "description": "Invalid URL"},
    }
)
def shorten_url(
    url_data: schemas.ShortenRequest,
    registry: URLRegistry = Depends(get_registry),
):
    """
    Shorten a URL.

    Submitting the same URL again returns the short URL issued the first time.
    """
    try:
        canonical_url = registry.validate(url_data.url)
    except InvalidURLError as e:
        logger.info("Rejected URL submission", input=url_data.url, reason=e.reason)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    logger.debug("Submitted URL is valid", url=canonical_url)
    return registry.get_or_create(canonical_url)
