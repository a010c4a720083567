"""
Data models for the URL shortener microservice.

This module imports and exports all SQLModel models used in the application.
"""

# First import SQLModel itself to ensure metadata is initialized
from sqlmodel import SQLModel

from shorturl.models.url import UrlRecord, UrlRecordBase, UrlRecordCreate
from shorturl.models.counter import Counter

__all__ = [
    "Counter",
    "UrlRecord",
    "UrlRecordBase",
    "UrlRecordCreate",
]
