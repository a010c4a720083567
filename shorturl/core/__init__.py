"""Core configuration and logging for the URL shortener microservice."""

from shorturl.core.config import settings

__all__ = ["settings"]
