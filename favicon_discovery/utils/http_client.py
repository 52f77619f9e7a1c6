"""A helper to create asynchronous HTTP client (via `httpx.AsyncClient`)
with common configurations.
"""

from httpx import AsyncClient, Limits, Timeout

from favicon_discovery.configs import settings
from favicon_discovery.constants import REQUEST_HEADERS


def create_http_client(
    max_connections: int | None = None,
    connect_timeout: float | None = None,
    request_timeout: float | None = None,
    follow_redirects: bool | None = None,
    user_agent: str | None = None,
) -> AsyncClient:
    """Create a new `httpx.AsyncClient` with common configurations.

    Any argument left as `None` is read from the `http` settings.

    Args:
      - `max_connections` {int}: Max connections of the connection pool.
      - `connect_timeout` {float}: The timeout for establishing a connection to the host.
      - `request_timeout` {float}: The timeout for handling a request to the host.
      - `follow_redirects` {bool}: Whether redirect responses are followed.
      - `user_agent` {str}: The `User-Agent` header sent with every request.
    Returns:
      - {AsyncClient}: An async HTTP client.
    """
    http_settings = settings.http
    headers = {
        **REQUEST_HEADERS,
        "User-Agent": user_agent if user_agent is not None else http_settings.user_agent,
    }
    return AsyncClient(
        limits=Limits(
            max_connections=(
                max_connections if max_connections is not None else http_settings.max_connections
            )
        ),
        timeout=Timeout(
            request_timeout if request_timeout is not None else http_settings.timeout_sec,
            connect=(
                connect_timeout
                if connect_timeout is not None
                else http_settings.connect_timeout_sec
            ),
        ),
        follow_redirects=(
            follow_redirects if follow_redirects is not None else http_settings.follow_redirects
        ),
        headers=headers,
    )
