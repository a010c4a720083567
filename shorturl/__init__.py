"""URL shortener microservice."""

__version__ = "0.1.0"
