"""Dimension resolution for verified favicon candidates"""

import logging
from typing import Optional

from favicon_discovery.constants import DEFAULT_ICO_SIZE
from favicon_discovery.io import RequestCache
from favicon_discovery.models import Icon, IconKind, Image

logger = logging.getLogger(__name__)


class DimensionResolver:
    """Annotate verified candidate URLs with their pixel dimensions.

    Vector graphics get no dimensions, `.ico` files get a fixed default size and
    every other format has its header decoded with Pillow.
    """

    def __init__(self, cache: RequestCache) -> None:
        self.cache = cache

    async def resolve(self, url: str) -> Optional[Icon]:
        """Return the icon for `url`, or None if its image cannot be decoded."""
        match IconKind.from_url(url):
            case IconKind.VECTOR:
                return Icon(url=url)
            case IconKind.LEGACY_ICON:
                width, height = DEFAULT_ICO_SIZE
                return Icon(url=url, width=width, height=height)
            case IconKind.RASTER:
                return await self._resolve_raster(url)

    async def _resolve_raster(self, url: str) -> Optional[Icon]:
        response = await self.cache.get(url)
        if response is None:
            return None

        image = Image(content=response.content)
        try:
            width, height = image.get_dimensions()
        except Exception as e:
            logger.debug(f"Dropping {url}: failed to decode image: {e}")
            return None

        return Icon(url=url, width=width, height=height)
