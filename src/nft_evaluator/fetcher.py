"""
Metadata retrieval.

The evaluator never talks to the network directly: it hands a resolved URL
to a ``Transport``. ``HTTPTransport`` is the default, anything with an async
``fetch(url) -> str`` can be injected instead.
"""

import logging
from typing import Optional, Protocol
import httpx

from .exceptions import FetchFailure

logger = logging.getLogger(__name__)


class Transport(Protocol):
    async def fetch(self, url: str) -> str:
        """Return the body at url as text, raising FetchFailure if it cannot be reached"""
        ...


class HTTPTransport:
    def __init__(self, timeout: float = 30.0, user_agent: Optional[str] = None, client: Optional[httpx.AsyncClient] = None):
        self.timeout = timeout
        self.headers = {"User-Agent": user_agent} if user_agent else {}
        self.client = client  # shared client, otherwise one is opened per fetch

    async def fetch(self, url: str) -> str:
        try:
            if self.client is not None:
                response = await self.client.get(url, headers=self.headers)
            else:
                async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
                    response = await client.get(url, headers=self.headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Request to {url} failed: {e!r}")
            raise FetchFailure(url, str(e) or e.__class__.__name__) from e

        # error pages are returned as-is, they simply won't parse as metadata
        if response.is_error:
            logger.warning(f"{url} returned status {response.status_code}")
        return response.text


class MetadataFetcher:
    def __init__(self, transport: Transport):
        self.transport = transport

    async def fetch_text(self, url: Optional[str]) -> Optional[str]:
        """
        Fetch raw metadata text from a resolved URL.

        Returns None, without touching the network, when there is nothing
        fetchable: no URL, or one without a single scheme separator.

        Raises:
            FetchFailure: if the transport cannot reach the URL
        """
        if not url or len(url.split("://")) != 2:
            logger.debug(f"Nothing to fetch for {url!r}")
            return None
        return await self.transport.fetch(url)
