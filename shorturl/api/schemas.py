"""API request and response schemas.

This module contains Pydantic models for response serialization.
"""

from pydantic import BaseModel


class ShortURLResponse(BaseModel):
    """Response schema for a shortened URL."""
    original_url: str
    short_url: int


class ErrorResponse(BaseModel):
    """Error payload. Validation and lookup failures use it with status 200."""
    error: str


class GreetingResponse(BaseModel):
    greeting: str


# Client-facing error messages
INVALID_URL = "invalid url"
WRONG_FORMAT = "Wrong format"
NOT_FOUND = "No short URL found for the given input"
SERVER_ERROR = "Server error"
