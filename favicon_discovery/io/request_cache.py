"""Per-invocation memoization of HTTP fetches"""

import asyncio
import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class RequestCache:
    """Fetch each URL at most once for the lifetime of this cache.

    The cache is owned by a single discovery run and discarded afterwards. A
    transport failure is stored as `None` so the URL is not requested again.
    Concurrent callers asking for the same URL wait on a per-URL lock, and only
    the first one performs the request.
    """

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self.http_client = http_client
        self._responses: dict[str, Optional[httpx.Response]] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    def __contains__(self, url: str) -> bool:
        return url in self._responses

    def __len__(self) -> int:
        return len(self._responses)

    async def get(self, url: str) -> Optional[httpx.Response]:
        """Return the response for `url`, fetching it on first use.

        Returns None if the request failed at the transport level.
        """
        if url in self._responses:
            return self._responses[url]

        lock = self._locks.setdefault(url, asyncio.Lock())
        async with lock:
            # Another caller may have completed the fetch while we waited
            if url not in self._responses:
                self._responses[url] = await self._fetch(url)

        return self._responses[url]

    async def _fetch(self, url: str) -> Optional[httpx.Response]:
        try:
            return await self.http_client.get(url)
        except Exception as e:
            logger.debug(f"Failed to fetch URL {url}: {e}")
            return None
