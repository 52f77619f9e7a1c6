"""Favicon extractor for collecting verified favicon URLs from a page"""

import asyncio
import logging
from typing import Optional, Sequence

from bs4 import BeautifulSoup

from favicon_discovery.favicon.favicon_verifier import FaviconVerifier
from favicon_discovery.scrapers import FaviconScraper
from favicon_discovery.utils.urls import default_favicon_url, resolve_icon_url, url_suffix

logger = logging.getLogger(__name__)


class FaviconExtractor:
    """Collect candidate URLs from icon link tags and the default location, keeping
    only those that verify as images.
    """

    def __init__(self, favicon_scraper: FaviconScraper, favicon_verifier: FaviconVerifier) -> None:
        self.favicon_scraper = favicon_scraper
        self.favicon_verifier = favicon_verifier

    def collect_candidates(self, page: BeautifulSoup, base_url: str) -> list[str]:
        """Resolve icon link hrefs and append the default `/favicon.ico` location.

        Duplicates are removed, keeping the first occurrence.
        """
        candidates = [
            resolve_icon_url(href, base_url)
            for href in self.favicon_scraper.scrape_icon_hrefs(page)
        ]
        candidates.append(default_favicon_url(base_url))
        return list(dict.fromkeys(candidates))

    async def extract_favicons(
        self,
        page: BeautifulSoup,
        base_url: str,
        suffixes: Optional[Sequence[str]] = None,
    ) -> list[str]:
        """Return the deduplicated, verified and suffix filtered candidate URLs."""
        candidates = self.collect_candidates(page, base_url)

        results = await asyncio.gather(
            *(self.favicon_verifier.verify_image(url) for url in candidates)
        )
        verified = [url for url, ok in zip(candidates, results) if ok]

        if suffixes is not None:
            verified = filter_by_suffix(verified, suffixes)

        logger.debug(
            f"Verified {len(verified)} of {len(candidates)} favicon candidates for {base_url}"
        )
        return verified


def filter_by_suffix(urls: Sequence[str], suffixes: Sequence[str]) -> list[str]:
    """Keep URLs whose last dot-delimited segment is one of `suffixes`."""
    allowed = set(suffixes)
    return [url for url in urls if url_suffix(url) in allowed]
