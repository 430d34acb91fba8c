"""
Upstream client - thin async wrapper around one shared httpx.AsyncClient.

One instance is created at application startup and reused by every request
so that connections (plain and TLS) are pooled.
"""

import logging
from typing import Optional

import httpx

from ..config import AppConfig
from ..exceptions import DecodeError, NetworkError, RequestBuildError, UpstreamStatusError

logger = logging.getLogger(__name__)


def build_async_client(timeout: Optional[float] = None,
                       transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """
    Create the shared httpx.AsyncClient.

    Args:
        timeout: Seconds per upstream call; None disables timeouts entirely
        transport: Optional transport (tests pass an httpx.MockTransport)

    Returns:
        Configured AsyncClient
    """
    headers = {
        "User-Agent": AppConfig.USER_AGENT,
        "Accept": "application/json",
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        headers=headers,
        transport=transport,
    )


class UpstreamClient:
    """
    Issues outbound GET requests.

    Responsibilities:
    - Reuse the shared AsyncClient (safe for concurrent use)
    - Translate httpx failures into the UpstreamError hierarchy
    - Reject non-2xx answers
    """

    def __init__(self, http_client: httpx.AsyncClient):
        self._http = http_client

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http

    async def get(self, url: str, upstream: str = "unknown") -> httpx.Response:
        """
        GET an absolute URL and return the fully read response.

        Args:
            url: Absolute http(s) URL
            upstream: Upstream name used in errors and logs

        Returns:
            httpx.Response with its body already read

        Raises:
            RequestBuildError: URL is malformed or has no usable scheme
            NetworkError: Connection, DNS or timeout failure
            DecodeError: Body cannot be read with its declared content encoding
            UpstreamStatusError: Upstream answered with a non-2xx status
        """
        try:
            request = self._http.build_request("GET", url)
        except httpx.InvalidURL as e:
            raise RequestBuildError(f"invalid URL: {e}", upstream=upstream, url=url) from e
        if request.url.scheme not in ("http", "https") or not request.url.host:
            raise RequestBuildError("URL must be absolute http(s) with a host", upstream=upstream, url=url)
        if request.url.port is not None and not 1 <= request.url.port <= 65535:
            raise RequestBuildError(f"port {request.url.port} out of range", upstream=upstream, url=url)

        logger.debug(f"GET {url} ({upstream})")
        try:
            response = await self._http.send(request)
        except httpx.UnsupportedProtocol as e:
            raise RequestBuildError(str(e), upstream=upstream, url=url) from e
        except httpx.DecodingError as e:
            raise DecodeError(f"cannot read body: {e}", upstream=upstream, url=url) from e
        except httpx.RequestError as e:
            raise NetworkError(f"{type(e).__name__}: {e}", upstream=upstream, url=url) from e

        logger.debug(f"GET {url} -> {response.status_code} ({len(response.content)} bytes)")

        if not response.is_success:
            raise UpstreamStatusError(response.status_code, upstream=upstream, url=url)

        return response

    async def aclose(self) -> None:
        """Close pooled connections"""
        await self._http.aclose()
