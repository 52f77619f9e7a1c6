"""URL manipulation utilities for favicon discovery"""

from urllib.parse import urlsplit

from favicon_discovery.constants import DEFAULT_FAVICON_PATH
from favicon_discovery.exceptions import InvalidPageUrlError


def get_base_url(url: str) -> str:
    """Extract base URL (e.g., "https://example.com" from "https://example.com/path").

    Raises:
        InvalidPageUrlError: If the URL is missing a scheme or a host, or has an invalid port.
    """
    parsed_url = urlsplit(url.strip())
    host = parsed_url.hostname
    if not parsed_url.scheme or not host:
        raise InvalidPageUrlError(f"Page URL must be absolute: {url!r}")

    try:
        port = parsed_url.port
    except ValueError as e:
        raise InvalidPageUrlError(f"Page URL has an invalid port: {url!r}") from e

    # Credentials are dropped and the host is lowercased; IPv6 literals keep their brackets.
    if ":" in host:
        host = f"[{host}]"
    if port is not None:
        host = f"{host}:{port}"
    return f"{parsed_url.scheme}://{host}"


def resolve_icon_url(href: str, base_url: str) -> str:
    """Turn an icon href found in markup into an absolute URL without a query string.

    Rules are applied in order:
      - protocol-relative hrefs (`//cdn.example.com/a.png`) get the page's scheme
      - absolute paths (`/a.png`) get the page's scheme and host
      - anything else not starting with `http` is treated as relative to the host root
      - everything from the first `?` onward is dropped

    Malformed hrefs yield malformed URLs, which fail verification later on.

    Args:
        href: The raw href attribute value
        base_url: The page's `scheme://host`, as returned by `get_base_url`

    Returns:
        The resolved icon URL
    """
    scheme = base_url.split("://", 1)[0]
    icon_url = href.strip()

    if icon_url.startswith("//"):
        icon_url = f"{scheme}:{icon_url}"
    elif icon_url.startswith("/"):
        icon_url = f"{base_url}{icon_url}"
    elif not icon_url.startswith("http"):
        icon_url = f"{base_url}/{icon_url}"

    return icon_url.split("?", 1)[0]


def default_favicon_url(base_url: str) -> str:
    """Return the conventional `/favicon.ico` location for a site."""
    return f"{base_url}{DEFAULT_FAVICON_PATH}"


def url_suffix(url: str) -> str:
    """Return the last dot-delimited segment of a URL (e.g. "png")."""
    return url.rsplit(".", 1)[-1]
