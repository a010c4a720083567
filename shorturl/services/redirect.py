"""Redirect service: resolves a short id to the stored original URL."""

import logging
import math
import re
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from shorturl.models.url import UrlRecord
from shorturl.repositories.base import RepositoryError
from shorturl.repositories.url_repository import URLRepository
from shorturl.services.exceptions import (
    ShortIdFormatError,
    URLLookupError,
    URLNotFoundError,
)

logger = logging.getLogger(__name__)

# Decimal (with fraction and exponent), signed Infinity, or unsigned 0x/0o/0b literals
NUMBER_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?Infinity"
    r"|0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+"
)
RADIX_PREFIXES = {"x": 16, "o": 8, "b": 2}

# Short ids live in a signed 64-bit column and start at 1
MIN_SHORT_ID = 1
MAX_SHORT_ID = 2**63 - 1


def parse_short_id(value: str) -> Optional[int]:
    """
    Parse a short id path segment.

    Any numeric literal is accepted: decimal with optional sign, fraction
    and exponent, ``Infinity``, or a hex/octal/binary literal. Surrounding
    whitespace is ignored and a blank segment reads as zero. Decimal values
    with a fraction or exponent go through a float, so ``1.0`` and ``1e0``
    both name id 1.

    Returns:
        The id, or None when the value is numeric but cannot name a record
        (fractional, infinite, zero, negative or beyond the id column)

    Raises:
        ShortIdFormatError: If the value is not numeric
    """
    if not isinstance(value, str):
        raise ShortIdFormatError(f"Short id {value!r} is not a number")
    text = value.strip()
    if not text:
        return None
    if not NUMBER_PATTERN.fullmatch(text):
        raise ShortIdFormatError(f"Short id {value!r} is not a number")

    if text[0] == "0" and len(text) > 1 and text[1].lower() in RADIX_PREFIXES:
        number = int(text[2:], RADIX_PREFIXES[text[1].lower()])
    elif text.lstrip("+-").isdigit():
        # int() refuses very long decimal strings
        if len(text.lstrip("+-").lstrip("0")) > len(str(MAX_SHORT_ID)):
            return None
        number = int(text)
    else:
        parsed = float(text)
        if not math.isfinite(parsed) or not parsed.is_integer():
            return None
        number = int(parsed)

    if not MIN_SHORT_ID <= number <= MAX_SHORT_ID:
        return None
    return number


class RedirectService:
    """Looks up URL records by short id."""

    def __init__(self, url_repository: URLRepository):
        self.url_repository = url_repository

    async def resolve(self, db: AsyncSession, short_id: str) -> UrlRecord:
        """
        Find the record a short id points to.

        Args:
            db: Database session
            short_id: The raw path segment

        Returns:
            UrlRecord: The matching record

        Raises:
            ShortIdFormatError: If ``short_id`` is not numeric
            URLNotFoundError: If no record has this short id, or the id
                cannot name a record at all
            URLLookupError: If the store fails
        """
        short = parse_short_id(short_id)
        if short is None:
            raise URLNotFoundError(f"Short id {short_id!r} names no record")

        try:
            record = await self.url_repository.get_by_short(db, short)
        except RepositoryError as e:
            logger.error(f"Error retrieving URL by short id: {e}")
            raise URLLookupError(f"Failed to retrieve URL with short id {short}") from e

        if record is None:
            raise URLNotFoundError(f"No URL with short id {short}")
        return record
