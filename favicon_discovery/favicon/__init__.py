"""Favicon verification, dimension resolution and ranking"""

from favicon_discovery.favicon.favicon_dimensions import DimensionResolver
from favicon_discovery.favicon.favicon_extractor import FaviconExtractor
from favicon_discovery.favicon.favicon_selector import compare_icons, rank_icons
from favicon_discovery.favicon.favicon_verifier import FaviconVerifier

__all__ = [
    "DimensionResolver",
    "FaviconExtractor",
    "FaviconVerifier",
    "compare_icons",
    "rank_icons",
]
