"""API dependencies for FastAPI.

This module provides dependency injection functions for FastAPI endpoints
to access repositories, the URL validator and service instances.
"""

from fastapi import Depends

from shorturl.core.config import settings
from shorturl.repositories.counter_repository import CounterRepository
from shorturl.repositories.url_repository import URLRepository
from shorturl.services.redirect import RedirectService
from shorturl.services.shortener import ShortenerService
from shorturl.services.validator import URLValidator


async def get_url_repository():
    """Get an instance of the URL repository."""
    return URLRepository()


async def get_counter_repository():
    """Get an instance of the counter repository."""
    return CounterRepository()


async def get_url_validator():
    """Get a URL validator configured from settings."""
    return URLValidator(check_dns=settings.URL_DNS_CHECK_ENABLED)


async def get_shortener_service(
    url_repo: URLRepository = Depends(get_url_repository),
    counter_repo: CounterRepository = Depends(get_counter_repository),
    validator: URLValidator = Depends(get_url_validator),
) -> ShortenerService:
    """Get an instance of the URL shortening service."""
    return ShortenerService(
        url_repository=url_repo,
        counter_repository=counter_repo,
        validator=validator,
    )


async def get_redirect_service(
    url_repo: URLRepository = Depends(get_url_repository),
) -> RedirectService:
    """Get an instance of the redirect service."""
    return RedirectService(url_repository=url_repo)
