"""Constants for favicon discovery"""

# Relations of the link tags that declare an icon, in the order they are scanned
ICON_LINK_RELS: tuple[str, ...] = ("icon", "shortcut icon")

# Conventional location of a site's icon, relative to the host root
DEFAULT_FAVICON_PATH: str = "/favicon.ico"

PARSER: str = "html.parser"

# Signatures from https://en.wikipedia.org/wiki/List_of_file_signatures
ICO_SIGNATURE: bytes = bytes([0x00, 0x00, 0x01, 0x00])
PNG_SIGNATURE: bytes = bytes([0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A])

# Signatures accepted for a `.ico` resource. Many sites serve a PNG under that name.
LEGACY_ICON_SIGNATURES: tuple[bytes, ...] = (ICO_SIGNATURE, PNG_SIGNATURE)

# Shortest body that can hold an accepted signature
MIN_LEGACY_ICON_LENGTH: int = 4

VECTOR_SUFFIX: str = ".svg"
LEGACY_ICON_SUFFIX: str = ".ico"

# Pillow is not used to decode `.ico` files, assume the standard size instead
DEFAULT_ICO_SIZE: tuple[int, int] = (16, 16)

# HTTP request configuration
REQUEST_HEADERS: dict[str, str] = {
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8"
    ),
    "Accept-Language": "en-GB,en-US;q=0.9,en;q=0.8",
}
