"""Short URL endpoints: creation and redirection.

Validation and lookup failures are answered with status 200 and an
``{"error": ...}`` payload; only store failures produce a 500.
"""

from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import RedirectResponse

from shorturl.api import schemas
from shorturl.api.dependencies import get_redirect_service, get_shortener_service
from shorturl.db.session import get_db
from shorturl.services.exceptions import (
    ShortIdFormatError,
    URLCreationError,
    URLLookupError,
    URLNotFoundError,
    URLValidationError,
)
from shorturl.services.redirect import RedirectService
from shorturl.services.shortener import ShortenerService

router = APIRouter(tags=["shorturl"])


def error_response(message: str, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def read_submitted_url(request: Request) -> Any:
    """Extract the ``url`` field from a JSON or form encoded body."""
    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip().lower() == "application/json":
        try:
            payload = await request.json()
        except ValueError:
            logger.debug("Ignoring malformed JSON body")
            return None
        return payload.get("url") if isinstance(payload, dict) else None

    form = await request.form()
    return form.get("url")


@router.post(
    "/shorturl",
    response_model=schemas.ShortURLResponse,
    responses={
        500: {"model": schemas.ErrorResponse, "description": "Store failure"}
    }
)
async def create_short_url(
    request: Request,
    db: AsyncSession = Depends(get_db),
    shortener_service: ShortenerService = Depends(get_shortener_service),
):
    """Shorten the submitted URL, or return the id it already has."""
    raw_url = await read_submitted_url(request)
    try:
        record = await shortener_service.create_short_url(db=db, raw_url=raw_url)
    except URLValidationError as e:
        logger.info(f"Rejected URL submission: {e}")
        return error_response(schemas.INVALID_URL)
    except URLCreationError:
        logger.exception("Failed to store short URL")
        return error_response(schemas.SERVER_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return schemas.ShortURLResponse(original_url=record.original, short_url=record.short)


@router.get(
    "/shorturl/{short_url}",
    status_code=status.HTTP_301_MOVED_PERMANENTLY,
    response_class=RedirectResponse,
    responses={
        200: {"model": schemas.ErrorResponse, "description": "Wrong format or unknown short id"},
        500: {"model": schemas.ErrorResponse, "description": "Store failure"},
    }
)
async def redirect_short_url(
    short_url: str,
    db: AsyncSession = Depends(get_db),
    redirect_service: RedirectService = Depends(get_redirect_service),
):
    """Redirect to the original URL registered under ``short_url``."""
    try:
        record = await redirect_service.resolve(db, short_url)
    except ShortIdFormatError:
        return error_response(schemas.WRONG_FORMAT)
    except URLNotFoundError:
        return error_response(schemas.NOT_FOUND)
    except URLLookupError:
        logger.exception("Failed to look up short URL")
        return error_response(schemas.SERVER_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return RedirectResponse(url=record.original, status_code=status.HTTP_301_MOVED_PERMANENTLY)
