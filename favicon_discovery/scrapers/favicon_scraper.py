"""Favicon scraper for extracting icon references from page markup"""

import logging

from bs4 import BeautifulSoup

from favicon_discovery.constants import ICON_LINK_RELS, PARSER

logger = logging.getLogger(__name__)


class FaviconScraper:
    """Scraper for extracting icon hrefs from link tags."""

    def __init__(self, rels: tuple[str, ...] = ICON_LINK_RELS) -> None:
        self.rels = rels

    @staticmethod
    def parse(body: str) -> BeautifulSoup:
        """Parse a page body into a BeautifulSoup document."""
        return BeautifulSoup(body, PARSER)

    def scrape_icon_hrefs(self, page: BeautifulSoup) -> list[str]:
        """Return the raw href of every icon link tag, grouped by relation in scan order.

        Tags without an href attribute are skipped.
        """
        hrefs: list[str] = []
        for rel in self.rels:
            for link in page.select(f"link[rel='{rel}'][href]"):
                href = link.get("href")
                if isinstance(href, str):
                    hrefs.append(href)
        logger.debug(f"Found {len(hrefs)} icon link tags")
        return hrefs
