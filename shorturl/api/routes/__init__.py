"""Routes package initialization.

This module exports the route collection for the application.
"""

from fastapi import APIRouter

from shorturl.api.routes import pages, short_urls
from shorturl.core.config import settings

# Create root router
api_router = APIRouter()

# Homepage and /api/hello carry their full paths
api_router.include_router(pages.router)

# Include short URL routes with API prefix
api_router.include_router(
    short_urls.router,
    prefix=settings.API_PREFIX
)

__all__ = ["api_router"]
