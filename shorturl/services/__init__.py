"""Service layer for the URL shortener microservice.

This package contains service classes implementing the business logic of the application.
Services orchestrate interactions between repositories and provide domain-specific operations.
"""

from shorturl.services.redirect import RedirectService
from shorturl.services.shortener import ShortenerService
from shorturl.services.validator import URLValidator

__all__ = ["RedirectService", "ShortenerService", "URLValidator"]
