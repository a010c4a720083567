"""URL record data models.

This module defines the UrlRecord model mapping a submitted URL to its
sequential short id.
"""
from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel


class UrlRecordBase(SQLModel):
    """Base model for URL record data."""

    original: str = Field(
        description="The submitted URL, stored exactly as given"
    )
    short: int = Field(
        description="Sequential short id, starting at 1",
        unique=True,
    )


class UrlRecord(UrlRecordBase, table=True):
    """
    URL record stored in the database.

    Records are insert-only: created on the first successful submission of
    an exact URL string and never updated or deleted afterwards.
    """

    __tablename__ = "url_records"

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Timestamp when this record was created"
    )


class UrlRecordCreate(UrlRecordBase):
    """Schema for creating a new URL record."""
    pass
