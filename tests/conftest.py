"""Test fixtures for the URL shortener microservice."""

import os

# Settings are read at import time, so the test environment goes first
os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_TO_FILE"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["URL_DNS_CHECK_ENABLED"] = "true"

import socket
from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from shorturl.api.dependencies import get_url_validator
from shorturl.db.session import get_db
from shorturl.main import app as main_app
from shorturl.repositories.counter_repository import CounterRepository
from shorturl.repositories.url_repository import URLRepository
from shorturl.services.redirect import RedirectService
from shorturl.services.shortener import ShortenerService
from shorturl.services.validator import URLValidator
# Import models to ensure they're registered with SQLModel metadata
from shorturl.models import Counter, UrlRecord  # noqa: F401


# Test database URL - using SQLite in-memory
TEST_SQLALCHEMY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


async def fake_resolver(hostname: str):
    """Resolve every host except those under the reserved .invalid TLD."""
    if hostname.endswith(".invalid"):
        raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")
    return [(socket.AF_INET, socket.SOCK_STREAM, 6, "", ("93.184.215.14", 0))]


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory SQLite database for each test."""
    engine = create_async_engine(
        TEST_SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_db(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session bound to the test engine."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

    async with async_session() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def url_validator() -> URLValidator:
    """Validator that resolves hosts without touching the network."""
    return URLValidator(resolver=fake_resolver)


@pytest.fixture
def url_repository() -> URLRepository:
    return URLRepository()


@pytest.fixture
def counter_repository() -> CounterRepository:
    return CounterRepository()


@pytest.fixture
def shortener_service(url_repository, counter_repository, url_validator) -> ShortenerService:
    return ShortenerService(
        url_repository=url_repository,
        counter_repository=counter_repository,
        validator=url_validator,
    )


@pytest.fixture
def redirect_service(url_repository) -> RedirectService:
    return RedirectService(url_repository=url_repository)


@pytest.fixture
def override_get_db(test_db):
    """Override the get_db dependency for testing."""
    async def _override_get_db():
        yield test_db

    return _override_get_db


@pytest.fixture
def test_app(override_get_db, url_validator) -> FastAPI:
    """FastAPI app with the test session and offline validator injected."""
    app = main_app
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_url_validator] = lambda: url_validator
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(test_app) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client talking to the app in-process. Startup events do not run."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as test_client:
        yield test_client
