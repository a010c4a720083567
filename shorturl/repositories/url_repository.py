"""URL record repository.

Provides the lookups the shortening and redirect services need: by exact
original URL, by short id, and the highest short id assigned so far.
"""

from typing import Any, Dict, Optional, Union

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from shorturl.models.url import UrlRecord, UrlRecordCreate
from shorturl.repositories.base import BaseRepository, RepositoryError, DuplicateEntityError


class URLRepository(BaseRepository[UrlRecord, UrlRecordCreate]):
    """Repository for UrlRecord database operations."""

    def __init__(self):
        super().__init__(UrlRecord)

    async def create_record(
        self,
        db: AsyncSession,
        data: Union[UrlRecordCreate, Dict[str, Any]]
    ) -> UrlRecord:
        """
        Insert a new URL record.

        Args:
            db: Database session
            data: Record data (either as a UrlRecordCreate model or dictionary)

        Returns:
            The created UrlRecord

        Raises:
            DuplicateEntityError: If the short id is already taken
            RepositoryError: On other database errors
        """
        try:
            return await self.create(db, data)
        except RepositoryError as e:
            if isinstance(e.__cause__, IntegrityError):
                short = data.short if isinstance(data, UrlRecordCreate) else data.get("short")
                raise DuplicateEntityError(self.model_type, "short", short) from e
            raise

    async def get_by_original(self, db: AsyncSession, original: str) -> Optional[UrlRecord]:
        """Find a record by its exact original URL string."""
        return await self.find_one(db, original=original)

    async def get_by_short(self, db: AsyncSession, short: int) -> Optional[UrlRecord]:
        """Find a record by its short id."""
        return await self.find_one(db, short=short)

    async def get_max_short(self, db: AsyncSession) -> int:
        """
        Return the highest short id stored, or 0 when there are no records.

        Raises:
            RepositoryError: On database errors
        """
        try:
            result = await db.execute(select(func.max(self.model_type.short)))
            return result.scalar_one_or_none() or 0
        except SQLAlchemyError as e:
            raise RepositoryError(f"Error reading highest short id: {e}") from e
