"""Main application module.

This module initializes the FastAPI application, includes routes,
and configures middleware, static files and exception handlers.
"""

import sys
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from shorturl.api import api_router
from shorturl.api.schemas import SERVER_ERROR
from shorturl.core.config import settings
from shorturl.core.logging import setup_logging
from shorturl.db.base import dispose_engine, get_session, init_db
from shorturl.middleware.logging import add_logging_middleware
from shorturl.repositories.counter_repository import CounterRepository
from shorturl.repositories.url_repository import URLRepository
from shorturl.services.shortener import ShortenerService
from shorturl.services.validator import URLValidator

# Setup logging
logger = setup_logging()

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

if settings.REQUEST_LOGGING_ENABLED:
    add_logging_middleware(app)

# Static assets
app.mount("/public", StaticFiles(directory=settings.STATIC_DIR), name="public")

# Include API router
app.include_router(api_router)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log unhandled exceptions and answer with the generic server error."""
    error_id = f"error-{time.time()}"
    logger.bind(
        error_id=error_id,
        path_params=request.path_params,
        client_host=request.client.host if request.client else None,
    ).opt(exception=exc).error("Unhandled exception in {} {}", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": SERVER_ERROR})


async def prepare_database() -> int:
    """Create the schema and align the short id counter with stored records."""
    await init_db()
    shortener = ShortenerService(
        url_repository=URLRepository(),
        counter_repository=CounterRepository(),
        validator=URLValidator(check_dns=False),
    )
    async with get_session() as db:
        return await shortener.sync_counter(db=db)


@app.on_event("startup")
async def startup_event():
    """Run startup tasks. Failing to reach the database is fatal."""
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT.value}")

    try:
        last_short = await prepare_database()
    except Exception as e:
        logger.critical(f"Failed to connect to database: {e}")
        sys.exit(1)
    logger.info(f"Database connection established, last short id is {last_short}")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info(f"Shutting down {settings.APP_NAME}")
    await dispose_engine()
