"""Database module for the URL shortener microservice."""
from shorturl.db.base import engine, get_engine, get_session, init_db, dispose_engine
from shorturl.db.session import get_db, db_transaction

__all__ = [
    "engine",
    "get_engine",
    "get_session",
    "init_db",
    "dispose_engine",
    "get_db",
    "db_transaction",
]
