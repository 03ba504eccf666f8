"""Exceptions raised by the NASA API client."""
from __future__ import annotations

from typing import Any, Optional


class NASAAPIError(RuntimeError):
    """Base class for every error raised by this package."""


class ConfigError(NASAAPIError):
    """Raised when the client is constructed with invalid configuration."""


class ValidationError(NASAAPIError, ValueError):
    """Raised when an endpoint argument fails a type check before any request is sent."""


class NetworkError(NASAAPIError):
    """Raised when the HTTP transport fails (DNS, refused connection, timeout)."""


class DecodeError(NASAAPIError):
    """Raised when a response body cannot be decoded as JSON."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RemoteError(NASAAPIError):
    """Raised when the remote service answers with a non-2xx status."""

    def __init__(self, status_code: int, url: str, payload: Any = None) -> None:
        super().__init__(f"NASA API error {status_code} for {url}: {payload}")
        self.status_code = status_code
        self.url = url
        self.payload = payload
