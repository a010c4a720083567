"""Counter repository.

Hands out sequential values from the ``counters`` table. The increment is a
single UPDATE evaluated by the database, so two transactions can never read
the same value: the second one blocks on the row lock until the first ends.
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from shorturl.models.counter import Counter
from shorturl.repositories.base import BaseRepository, RepositoryError

logger = logging.getLogger(__name__)


class CounterRepository(BaseRepository[Counter, Counter]):
    """Repository for named sequence counters."""

    def __init__(self):
        super().__init__(Counter)

    async def next_value(self, db: AsyncSession, name: str) -> int:
        """
        Increment the named counter and return its new value.

        A missing counter is created with value 1. The increment is only
        durable once the caller's transaction commits.

        Raises:
            RepositoryError: On database errors
        """
        try:
            stmt = (
                update(Counter)
                .where(Counter.name == name)
                .values(value=Counter.value + 1)
                .execution_options(synchronize_session=False)
            )
            result = await db.execute(stmt)
            if result.rowcount == 0:
                logger.info(f"Counter '{name}' does not exist yet, starting at 1")
                db.add(Counter(name=name, value=1))
                await db.flush()
                return 1

            value = await db.execute(select(Counter.value).where(Counter.name == name))
            return value.scalar_one()
        except SQLAlchemyError as e:
            logger.error(f"Error incrementing counter '{name}': {e}")
            raise RepositoryError(f"Database error incrementing counter: {e}") from e

    async def ensure_at_least(self, db: AsyncSession, name: str, floor: int) -> int:
        """
        Make sure the named counter exists and is not below ``floor``.

        Used at startup so ids continue after records that were written
        before the counter existed.

        Returns:
            The counter value after the adjustment
        """
        try:
            # Increments bypass the identity map, so reload the row
            counter = await db.get(Counter, name, populate_existing=True, with_for_update=True)
            if counter is None:
                counter = Counter(name=name, value=floor)
                db.add(counter)
            elif counter.value < floor:
                logger.warning(f"Counter '{name}' was behind stored records, moving {counter.value} -> {floor}")
                counter.value = floor
            await db.flush()
            return counter.value
        except SQLAlchemyError as e:
            logger.error(f"Error initializing counter '{name}': {e}")
            raise RepositoryError(f"Database error initializing counter: {e}") from e
