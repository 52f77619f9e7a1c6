# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Unit tests for favicon_scraper module."""

from bs4 import BeautifulSoup

from favicon_discovery.scrapers import FaviconScraper


class TestFaviconScraperScrapeIconHrefs:
    """Tests for FaviconScraper.scrape_icon_hrefs method."""

    def test_scrape_icon_links(self):
        """Test scraping hrefs of icon and shortcut icon link tags."""
        html = """
        <html>
            <head>
                <link rel="shortcut icon" href="/shortcut.ico">
                <link rel="icon" href="/favicon.png">
                <link rel="icon" type="image/svg+xml" href="/logo.svg">
            </head>
        </html>
        """
        page = FaviconScraper.parse(html)

        # All `icon` tags come before `shortcut icon` tags
        assert FaviconScraper().scrape_icon_hrefs(page) == [
            "/favicon.png",
            "/logo.svg",
            "/shortcut.ico",
        ]

    def test_ignores_other_relations(self):
        """Test that only the recognized relations are scraped."""
        html = """
        <html>
            <head>
                <link rel="apple-touch-icon" href="/apple-touch-icon.png">
                <link rel="mask-icon" href="/mask.svg">
                <link rel="manifest" href="/manifest.json">
                <link rel="stylesheet" href="/style.css">
            </head>
        </html>
        """
        page = FaviconScraper.parse(html)

        assert FaviconScraper().scrape_icon_hrefs(page) == []

    def test_skips_tags_without_href(self):
        """Test that link tags missing an href are skipped."""
        page = FaviconScraper.parse('<link rel="icon"><link rel="icon" href="/a.png">')

        assert FaviconScraper().scrape_icon_hrefs(page) == ["/a.png"]

    def test_finds_tags_outside_head(self):
        """Test that icon links in the body are found too."""
        page = FaviconScraper.parse('<html><body><link rel="icon" href="/b.png"></body></html>')

        assert FaviconScraper().scrape_icon_hrefs(page) == ["/b.png"]

    def test_scrape_empty_page(self):
        """Test scraping page with no favicon information."""
        page = FaviconScraper.parse("<html><head></head><body></body></html>")

        assert FaviconScraper().scrape_icon_hrefs(page) == []

    def test_custom_relations(self):
        """Test that the scanned relations can be configured."""
        page = FaviconScraper.parse('<link rel="apple-touch-icon" href="/touch.png">')

        assert FaviconScraper(rels=("apple-touch-icon",)).scrape_icon_hrefs(page) == [
            "/touch.png"
        ]


def test_parse_returns_soup():
    """Test that parse builds a BeautifulSoup document."""
    assert isinstance(FaviconScraper.parse("<html></html>"), BeautifulSoup)
