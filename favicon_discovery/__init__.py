"""Discover, verify and rank the favicons of a web page."""

from favicon_discovery.exceptions import (
    FaviconDiscoveryError,
    InvalidPageUrlError,
    PageFetchError,
)
from favicon_discovery.finder import FaviconFinder, get_all, get_best
from favicon_discovery.models import Icon, IconKind

__all__ = [
    "FaviconDiscoveryError",
    "FaviconFinder",
    "Icon",
    "IconKind",
    "InvalidPageUrlError",
    "PageFetchError",
    "get_all",
    "get_best",
]
