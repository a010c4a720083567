"""Repository layer for the URL shortener microservice.

This module provides repository classes that abstract database operations
and implement the Repository pattern for clean separation of concerns.
"""

from shorturl.repositories.base import (
    BaseRepository,
    RepositoryError,
    DuplicateEntityError
)
from shorturl.repositories.url_repository import URLRepository
from shorturl.repositories.counter_repository import CounterRepository

__all__ = [
    # Base classes and exceptions
    "BaseRepository",
    "RepositoryError",
    "DuplicateEntityError",

    # Concrete repositories
    "URLRepository",
    "CounterRepository",
]
