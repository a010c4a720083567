"""Exceptions for the URL shortener service layer.

This module contains the exception hierarchy for the service layer,
providing domain-specific exceptions that abstract underlying implementation details.
"""


class ServiceError(Exception):
    """Base exception for all service-level errors."""
    pass


class URLError(ServiceError):
    """Base exception for URL-related errors."""
    pass


class URLValidationError(URLError):
    """URL failed validation checks."""
    pass


class InvalidInputError(URLValidationError):
    """No URL was supplied."""
    pass


class InvalidURLError(URLValidationError):
    """The URL is malformed, uses an unsupported scheme, or its host does not resolve."""
    pass


class ShortIdFormatError(URLError):
    """The short id is not a decimal integer."""
    pass


class URLNotFoundError(URLError):
    """No URL record exists for the given short id."""
    pass


class URLCreationError(URLError):
    """Storing a new URL record failed."""
    pass


class URLLookupError(URLError):
    """Reading URL records from the store failed."""
    pass
