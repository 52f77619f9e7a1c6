# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Module for test configurations shared by the unit and integration tests."""

import os
from collections import Counter
from io import BytesIO
from logging import LogRecord
from typing import Callable, Mapping

import httpx
import pytest
from PIL import Image as PILImage

os.environ.setdefault("FAVICON_DISCOVERY_ENV", "testing")

# A route is either the response to serve or an exception to raise for the URL
Route = tuple[int, dict[str, str], bytes] | Exception

FilterCaplogFixture = Callable[[list[LogRecord], str], list[LogRecord]]


class FakeWeb:
    """Serve canned responses for URLs through `httpx.MockTransport` and count requests.

    URLs without a route fail with a connection error.
    """

    def __init__(self, routes: Mapping[str, Route]) -> None:
        self.routes = dict(routes)
        self.requests: Counter[str] = Counter()

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests[url] += 1
        route = self.routes.get(url)
        if route is None:
            raise httpx.ConnectError(f"No route to {url}", request=request)
        if isinstance(route, Exception):
            raise route
        status, headers, content = route
        return httpx.Response(status, headers=headers, content=content)

    def client(self) -> httpx.AsyncClient:
        """Create an async client backed by this fake web."""
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture(scope="session", name="filter_caplog")
def fixture_filter_caplog() -> FilterCaplogFixture:
    """Return a function that will filter pytest captured log records for a given logger
    name
    """

    def filter_caplog(records: list[LogRecord], logger_name: str) -> list[LogRecord]:
        """Filter pytest captured log records for a given logger name"""
        return [record for record in records if record.name == logger_name]

    return filter_caplog


@pytest.fixture(name="fake_web")
def fixture_fake_web() -> Callable[[Mapping[str, Route]], FakeWeb]:
    """Return a function that builds a `FakeWeb` from a mapping of URL to route."""
    return FakeWeb


@pytest.fixture(scope="session", name="png_bytes")
def fixture_png_bytes() -> Callable[[int, int], bytes]:
    """Return a function that encodes a blank PNG image of the given size."""

    def png_bytes(width: int, height: int) -> bytes:
        buffer = BytesIO()
        PILImage.new("RGBA", (width, height)).save(buffer, format="PNG")
        return buffer.getvalue()

    return png_bytes


@pytest.fixture(scope="session", name="ico_bytes")
def fixture_ico_bytes() -> bytes:
    """Return a minimal body starting with the ICO signature."""
    return bytes([0x00, 0x00, 0x01, 0x00]) + b"\x01\x00" + b"\x00" * 32


@pytest.fixture(scope="session", name="svg_bytes")
def fixture_svg_bytes() -> bytes:
    """Return a minimal SVG document."""
    return b'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16"></svg>'
