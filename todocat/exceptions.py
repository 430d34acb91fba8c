"""
Upstream error hierarchy.

Every failure while talking to (or decoding the answer of) an upstream
service is an UpstreamError. The web layer maps them all to 502.
"""

from typing import Optional


class UpstreamError(Exception):
    """
    Base exception for upstream failures.

    Attributes:
        message: Human readable description
        upstream: Which upstream failed ('todo' or 'cats')
        url: URL that was requested, if known
    """

    status_code = 502
    kind = "upstream"

    def __init__(self, message: str, upstream: str = "unknown", url: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.upstream = upstream
        self.url = url

    def __str__(self) -> str:
        return f"{self.kind} error from {self.upstream}: {self.message}"


class NetworkError(UpstreamError):
    """Connection refused, DNS failure or timeout"""
    kind = "network"


class DecodeError(UpstreamError):
    """Body is not valid JSON or lacks the required field"""
    kind = "decode"


class UpstreamStatusError(UpstreamError):
    """Upstream answered with a non-2xx status"""
    kind = "status"

    def __init__(self, upstream_status: int, upstream: str = "unknown", url: Optional[str] = None):
        super().__init__(f"unexpected status {upstream_status}", upstream=upstream, url=url)
        self.upstream_status = upstream_status


class RequestBuildError(UpstreamError):
    """Outbound request could not be built (malformed URL)"""
    kind = "request"


__all__ = [
    'UpstreamError',
    'NetworkError',
    'DecodeError',
    'UpstreamStatusError',
    'RequestBuildError',
]
