"""Favicon verifier for confirming a candidate is a genuine image resource"""

import logging
from typing import Optional

import httpx

from favicon_discovery.constants import LEGACY_ICON_SIGNATURES, MIN_LEGACY_ICON_LENGTH
from favicon_discovery.io import RequestCache
from favicon_discovery.models import IconKind

logger = logging.getLogger(__name__)


class FaviconVerifier:
    """Check that a candidate URL serves a non-empty image with a 200 response."""

    def __init__(self, cache: RequestCache) -> None:
        self.cache = cache

    async def verify_image(self, url: str) -> bool:
        """Fetch the candidate through the request cache and verify it. Never raises."""
        response = await self.cache.get(url)
        if response is None:
            logger.debug(f"Dropping {url}: request failed")
            return False

        if response.status_code != 200:
            logger.debug(f"Dropping {url}: status {response.status_code}")
            return False

        content_type = response.headers.get("content-type")
        if content_type is None or "image" not in content_type:
            logger.debug(f"Dropping {url}: content type {content_type}")
            return False

        if not self.has_content(response):
            logger.debug(f"Dropping {url}: empty content")
            return False

        # Take extra care with ico's since they might be constructed manually
        if IconKind.from_url(url) is IconKind.LEGACY_ICON:
            if not self.verify_legacy_icon(response.content):
                logger.debug(f"Dropping {url}: invalid ico signature")
                return False

        return True

    @staticmethod
    def has_content(response: httpx.Response) -> bool:
        """Check the declared content length, or the body when none is declared."""
        content_length: Optional[str] = response.headers.get("content-length")
        if content_length is None:
            return len(response.content) > 0
        try:
            return int(content_length) > 0
        except ValueError:
            return False

    @staticmethod
    def verify_legacy_icon(content: bytes) -> bool:
        """Check that an `.ico` body starts with an ICO or a PNG signature."""
        if len(content) < MIN_LEGACY_ICON_LENGTH:
            return False
        return any(
            FaviconVerifier.verify_signature(content, signature)
            for signature in LEGACY_ICON_SIGNATURES
        )

    @staticmethod
    def verify_signature(content: bytes, signature: bytes) -> bool:
        """Check that `content` starts with exactly the bytes of `signature`."""
        return content[: len(signature)] == signature
