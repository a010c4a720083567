"""URL shortening service for the URL shortener microservice.

This module contains the ShortenerService class which validates submitted
URLs and assigns them sequential short ids.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from shorturl.core.config import settings
from shorturl.db.session import db_transaction
from shorturl.models.url import UrlRecord, UrlRecordCreate
from shorturl.repositories.base import RepositoryError
from shorturl.repositories.counter_repository import CounterRepository
from shorturl.repositories.url_repository import URLRepository
from shorturl.services.exceptions import URLCreationError
from shorturl.services.validator import URLValidator

logger = logging.getLogger(__name__)


class ShortenerService:
    """
    Service for URL shortening business logic.

    Submitting the same exact URL string twice returns the record created
    the first time; any other valid URL gets the next value of the short id
    counter.
    """

    def __init__(
        self,
        url_repository: URLRepository,
        counter_repository: CounterRepository,
        validator: URLValidator,
        counter_name: str = settings.SHORT_ID_COUNTER_NAME,
    ):
        """
        Initialize the URL shortening service.

        Args:
            url_repository: Repository for URL record access
            counter_repository: Repository handing out short ids
            validator: Validator applied to every submitted URL
            counter_name: Name of the counter short ids are drawn from
        """
        self.url_repository = url_repository
        self.counter_repository = counter_repository
        self.validator = validator
        self.counter_name = counter_name

    async def create_short_url(self, db: AsyncSession, raw_url: str) -> UrlRecord:
        """
        Validate ``raw_url`` and return its record, creating one if needed.

        Args:
            db: Database session
            raw_url: URL exactly as submitted by the client

        Returns:
            UrlRecord: The existing or newly created record

        Raises:
            InvalidInputError: If no URL was supplied
            InvalidURLError: If the URL is malformed or its host does not resolve
            URLCreationError: If the store fails
        """
        await self.validator.validate(raw_url)
        return await self._get_or_create(db=db, original=raw_url)

    @db_transaction(db_param_name="db")
    async def _get_or_create(self, db: AsyncSession, original: str) -> UrlRecord:
        try:
            existing = await self.url_repository.get_by_original(db, original)
            if existing is not None:
                logger.debug(f"URL already shortened as {existing.short}")
                return existing

            short = await self.counter_repository.next_value(db, self.counter_name)
            record = await self.url_repository.create_record(
                db, UrlRecordCreate(original=original, short=short)
            )
            logger.info(f"Assigned short id {record.short}")
            return record
        except RepositoryError as e:
            logger.error(f"Error creating short URL: {e}")
            raise URLCreationError(f"Failed to create short URL: {e}") from e

    @db_transaction(db_param_name="db")
    async def sync_counter(self, db: AsyncSession) -> int:
        """
        Align the short id counter with the records already stored.

        Returns:
            The counter value, i.e. the last short id handed out
        """
        highest = await self.url_repository.get_max_short(db)
        return await self.counter_repository.ensure_at_least(db, self.counter_name, highest)
