"""Database base configuration for SQLAlchemy with SQLModel.

This module provides base database configuration for async SQLAlchemy with SQLModel.
It includes:
- Engine configuration
- Session factory
- Schema initialization used at startup
"""

from typing import AsyncGenerator, Dict
import logging
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool
from sqlalchemy.sql import text
from sqlmodel import SQLModel

from shorturl.core.config import settings

logger = logging.getLogger(__name__)

# Pool settings only apply to server databases; SQLite picks its own pool
POOL_CONFIG: Dict = {
    "pool_size": settings.DB_POOL_SIZE,
    "max_overflow": settings.DB_POOL_MAX_OVERFLOW,
    "pool_timeout": settings.DB_POOL_TIMEOUT,
    "pool_recycle": settings.DB_POOL_RECYCLE,
    "pool_pre_ping": True,
}


def get_engine_config() -> Dict:
    """Get the engine configuration for the current environment and backend.

    Returns:
        Dict: Engine configuration parameters.
    """
    if settings.ENVIRONMENT.value == "testing":
        return {"echo": False, "poolclass": NullPool}
    config = {"echo": settings.DB_ECHO}
    if not settings.is_sqlite:
        config.update(POOL_CONFIG)
    return config


def get_engine() -> AsyncEngine:
    """Create and configure an async SQLAlchemy engine.

    Returns:
        AsyncEngine: Configured SQLAlchemy async engine instance.
    """
    engine_url = settings.DATABASE_URL
    logger.info(f"Creating database engine for {engine_url.split('://', 1)[0]}")
    return create_async_engine(engine_url, **get_engine_config())


# Shared async engine instance
engine = get_engine()

# Async session factory
async_session_factory = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


@asynccontextmanager
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Get async session with proper cleanup.

    Yields:
        AsyncSession: SQLAlchemy async session
    """
    session = async_session_factory()
    try:
        yield session
    finally:
        await session.close()


async def init_db(bind: AsyncEngine = engine) -> None:
    """Verify connectivity and create any missing tables.

    Raises whatever the driver raises when the database is unreachable;
    callers at startup treat that as fatal.
    """
    # Register table models with the metadata before create_all
    from shorturl import models  # noqa: F401

    async with bind.begin() as conn:
        await conn.execute(text("SELECT 1"))
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database schema is ready")


async def dispose_engine() -> None:
    await engine.dispose()
