"""Scrapers for favicon discovery"""

from favicon_discovery.scrapers.favicon_scraper import FaviconScraper

__all__ = ["FaviconScraper"]
