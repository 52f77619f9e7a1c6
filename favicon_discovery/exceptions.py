"""favicon-discovery specific exceptions."""


class FaviconDiscoveryError(Exception):
    """Base class for errors surfaced to callers of the discovery pipeline."""


class InvalidPageUrlError(FaviconDiscoveryError):
    """Raised when a page URL is missing a scheme or a host."""

    pass


class PageFetchError(FaviconDiscoveryError):
    """Raised when the page body could not be fetched."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Failed to fetch page body from {url}")
        self.url = url
