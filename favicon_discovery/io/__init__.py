"""I/O helpers for favicon discovery"""

from favicon_discovery.io.request_cache import RequestCache

__all__ = ["RequestCache"]
