"""Test utilities for URL shortener tests."""

import random
import string
from typing import Optional

from shorturl.models.url import UrlRecord


def random_string(length: int = 10) -> str:
    """Generate a random alphanumeric string."""
    return ''.join(random.choice(string.ascii_letters + string.digits) for _ in range(length))


def random_url() -> str:
    """Generate a random URL for testing."""
    domain = f"{random_string(8).lower()}.com"
    path = random_string(12)
    return f"https://{domain}/{path}"


async def create_test_record(
    db,
    short: int,
    original: Optional[str] = None,
) -> UrlRecord:
    """Create and flush a UrlRecord directly, bypassing the counter."""
    record = UrlRecord(original=original or random_url(), short=short)
    db.add(record)
    await db.flush()
    await db.refresh(record)
    return record
