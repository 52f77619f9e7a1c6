"""Data models for favicon discovery"""

from enum import Enum
from io import BytesIO

from PIL import Image as PILImage
from pydantic import BaseModel, ConfigDict, Field

from favicon_discovery.constants import LEGACY_ICON_SUFFIX, VECTOR_SUFFIX


class IconKind(str, Enum):
    """Format family of an icon, decided by the suffix of its URL."""

    VECTOR = "vector"
    LEGACY_ICON = "legacy_icon"
    RASTER = "raster"

    @classmethod
    def from_url(cls, url: str) -> "IconKind":
        """Classify an icon URL. Suffix matching is exact and case-sensitive."""
        if url.endswith(VECTOR_SUFFIX):
            return cls.VECTOR
        if url.endswith(LEGACY_ICON_SUFFIX):
            return cls.LEGACY_ICON
        return cls.RASTER


class Icon(BaseModel):
    """A verified favicon candidate with its pixel dimensions.

    Dimensions are 0 for vector graphics, which have no intrinsic pixel size.
    See `favicon_selector.rank_icons` for how icons are ordered.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)

    @property
    def kind(self) -> IconKind:
        """Return the format family of this icon."""
        return IconKind.from_url(self.url)

    @property
    def area(self) -> int:
        """Return the pixel area of this icon."""
        return self.width * self.height

    def __str__(self) -> str:
        return f"{{Url: {self.url}, width: {self.width}, height: {self.height}}}"


class Image(BaseModel):
    """Data model for Image contents."""

    content: bytes

    def get_dimensions(self) -> tuple[int, int]:
        """Get image dimensions and properly close the file"""
        with PILImage.open(BytesIO(self.content)) as img:
            return img.size
