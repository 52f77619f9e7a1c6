"""Discover, verify and rank the favicons of a web page"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, Sequence

import httpx

from favicon_discovery.exceptions import PageFetchError
from favicon_discovery.favicon import DimensionResolver, FaviconExtractor, FaviconVerifier
from favicon_discovery.favicon import rank_icons
from favicon_discovery.io import RequestCache
from favicon_discovery.models import Icon
from favicon_discovery.scrapers import FaviconScraper
from favicon_discovery.utils.http_client import create_http_client
from favicon_discovery.utils.urls import get_base_url

logger = logging.getLogger(__name__)


class FaviconFinder:
    """Run the favicon discovery pipeline for a page.

    Each call to `get_all` or `get_best` is an independent run with its own
    request cache. If no HTTP client is given, one is created from the `http`
    settings for every run and closed when the run ends.
    """

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        favicon_scraper: Optional[FaviconScraper] = None,
    ) -> None:
        self.http_client = http_client
        self.favicon_scraper = favicon_scraper or FaviconScraper()

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self.http_client is not None:
            yield self.http_client
            return

        async with create_http_client() as client:
            yield client

    async def get_all(
        self,
        url: str,
        body: Optional[str] = None,
        suffixes: Optional[Sequence[str]] = None,
    ) -> list[Icon]:
        """Return every verified favicon of the page at `url`, best first.

        Args:
            url: The page URL, used to resolve relative hrefs and locate `/favicon.ico`
            body: The page HTML. Fetched from `url` when not given.
            suffixes: If given, only icons whose URL ends in one of these
                dot-delimited suffixes (e.g. `["png", "svg"]`) are returned.

        Returns:
            The ranked icons, possibly empty.

        Raises:
            InvalidPageUrlError: If `url` is missing a scheme or a host.
            PageFetchError: If `body` is not given and the page cannot be fetched.
        """
        url = url.strip()
        base_url = get_base_url(url)

        async with self._client() as client:
            cache = RequestCache(client)

            if body is None:
                body = await self._fetch_body(url, cache)

            page = self.favicon_scraper.parse(body)
            extractor = FaviconExtractor(self.favicon_scraper, FaviconVerifier(cache))
            icon_urls = await extractor.extract_favicons(page, base_url, suffixes)

            resolver = DimensionResolver(cache)
            icons = await asyncio.gather(*(resolver.resolve(icon_url) for icon_url in icon_urls))

        return rank_icons(icon for icon in icons if icon is not None)

    async def get_best(
        self,
        url: str,
        body: Optional[str] = None,
        suffixes: Optional[Sequence[str]] = None,
    ) -> Optional[Icon]:
        """Return the best favicon of the page at `url`, or None if there is none."""
        icons = await self.get_all(url, body=body, suffixes=suffixes)
        return icons[0] if icons else None

    @staticmethod
    async def _fetch_body(url: str, cache: RequestCache) -> str:
        response = await cache.get(url)
        if response is None:
            logger.warning(f"Failed to fetch page body from {url}")
            raise PageFetchError(url)
        return response.text


async def get_all(
    url: str,
    body: Optional[str] = None,
    suffixes: Optional[Sequence[str]] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> list[Icon]:
    """Return every verified favicon of the page at `url`, best first."""
    return await FaviconFinder(http_client).get_all(url, body=body, suffixes=suffixes)


async def get_best(
    url: str,
    body: Optional[str] = None,
    suffixes: Optional[Sequence[str]] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> Optional[Icon]:
    """Return the best favicon of the page at `url`, or None if there is none."""
    return await FaviconFinder(http_client).get_best(url, body=body, suffixes=suffixes)
