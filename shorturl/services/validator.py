"""URL validation for submitted long URLs.

A URL is accepted when it parses, uses http or https, has a host, and that
host resolves through DNS.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional
from urllib.parse import SplitResult, urlsplit

from shorturl.services.exceptions import InvalidInputError, InvalidURLError

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = frozenset({"http", "https"})

Resolver = Callable[[str], Awaitable[Any]]


async def resolve_host(hostname: str) -> Any:
    """Resolve ``hostname`` on the running loop's resolver.

    Raises:
        socket.gaierror: If the name does not resolve
    """
    loop = asyncio.get_running_loop()
    return await loop.getaddrinfo(hostname, None)


class URLValidator:
    """
    Validates raw URL strings.

    Args:
        resolver: Coroutine function used to resolve host names. Defaults
            to the event loop's ``getaddrinfo``.
        check_dns: When False the host is not resolved.
    """

    def __init__(self, resolver: Optional[Resolver] = None, check_dns: bool = True):
        self.resolver = resolver or resolve_host
        self.check_dns = check_dns

    def parse(self, raw_url: Any) -> SplitResult:
        """
        Check presence and syntax of ``raw_url``.

        Raises:
            InvalidInputError: If the value is missing or blank
            InvalidURLError: If it is not an absolute http(s) URL with a host
        """
        if not isinstance(raw_url, str) or not raw_url.strip():
            raise InvalidInputError("No URL supplied")

        try:
            parts = urlsplit(raw_url.strip())
            # Accessing the port validates it
            parts.port
        except ValueError as e:
            raise InvalidURLError(f"Malformed URL {raw_url!r}: {e}") from e

        if parts.scheme not in ALLOWED_SCHEMES:
            raise InvalidURLError(f"Unsupported scheme in {raw_url!r}")
        if not parts.hostname:
            raise InvalidURLError(f"No host in {raw_url!r}")
        return parts

    async def validate(self, raw_url: Any) -> SplitResult:
        """
        Fully validate ``raw_url``, including DNS resolution of its host.

        Returns:
            The parsed URL

        Raises:
            InvalidInputError: If the value is missing or blank
            InvalidURLError: If the URL is malformed or its host does not resolve
        """
        parts = self.parse(raw_url)
        if self.check_dns:
            try:
                await self.resolver(parts.hostname)
            except (OSError, UnicodeError) as e:
                logger.info(f"Host {parts.hostname!r} did not resolve: {e}")
                raise InvalidURLError(f"Host {parts.hostname!r} does not resolve") from e
        return parts
