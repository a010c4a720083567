"""Basic tests to verify test DB setup."""

import pytest
from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from shorturl.db.base import init_db
from shorturl.models.url import UrlRecord


@pytest.mark.asyncio
async def test_tables_exist(test_engine):
    """Verify both tables are created in the test database."""
    async with test_engine.connect() as conn:
        result = await conn.execute(text("SELECT name FROM sqlite_master WHERE type='table'"))
        tables = [row[0] for row in result.fetchall()]

    assert "url_records" in tables
    assert "counters" in tables


@pytest.mark.asyncio
async def test_create_record(test_db):
    """Verify a record round-trips through the database."""
    test_db.add(UrlRecord(original="https://example.com", short=1))
    await test_db.commit()

    result = await test_db.execute(select(UrlRecord).where(UrlRecord.short == 1))
    record = result.scalars().first()

    assert record is not None
    assert record.original == "https://example.com"
    assert record.created_at is not None


@pytest.mark.asyncio
async def test_short_is_unique(test_db):
    """The short column carries a unique index."""
    result = await test_db.execute(text("PRAGMA index_list('url_records')"))
    unique_indexes = [row[1] for row in result.fetchall() if row[2]]
    assert unique_indexes

    columns = []
    for name in unique_indexes:
        info = await test_db.execute(text(f"PRAGMA index_info('{name}')"))
        columns.extend(row[2] for row in info.fetchall())
    assert "short" in columns


@pytest.mark.asyncio
async def test_init_db_creates_schema():
    """init_db creates the tables on an empty database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    try:
        await init_db(bind=engine)
        await init_db(bind=engine)

        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT name FROM sqlite_master WHERE type='table'"))
            tables = {row[0] for row in result.fetchall()}
    finally:
        await engine.dispose()

    assert {"url_records", "counters"} <= tables


def test_created_at_is_timezone_aware():
    """New records are stamped with an aware UTC timestamp."""
    record = UrlRecord(original="https://example.com", short=1)

    assert record.created_at.tzinfo is not None
    assert record.created_at.utcoffset().total_seconds() == 0
