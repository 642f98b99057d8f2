"""
Custom exceptions for the Twitch SDK.
Provides meaningful error classes for client consumers.

Every failure raised by the SDK derives from TwitchAPIError, so callers can
catch the whole family with a single except clause. None of them is fatal:
each one is recoverable at the call site.
"""

from typing import Any, Optional


class TwitchAPIError(Exception):
    """
    Base exception for all SDK-level API failures.

    Args:
        message (str): Short explanation of the error.
        details (Any | None): Optional structured details (e.g., upstream error body).
    """

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class AuthError(TwitchAPIError):
    """Credential or token failure (bad client secret, rejected token, ...)."""


class RateLimitError(TwitchAPIError):
    """
    Raised when Helix keeps answering 429 after the single allowed retry.

    Args:
        message (str): Short explanation of the error.
        endpoint (str | None): Path of the request that was throttled.
        reset_at (float | None): UNIX timestamp at which the bucket refills.
    """

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        reset_at: Optional[float] = None,
        details: Optional[Any] = None,
    ):
        super().__init__(message, details=details)
        self.endpoint = endpoint
        self.reset_at = reset_at


class TransportError(TwitchAPIError):
    """Network-level failure: connection refused, DNS, timeout, ..."""

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        details: Optional[Any] = None,
    ):
        super().__init__(message, details=details)
        self.endpoint = endpoint


class ApiError(TwitchAPIError):
    """
    Upstream answered with a non-success status the SDK does not recover from.

    Args:
        status_code (int): HTTP status returned by Helix.
        body (str): Raw response body (kept verbatim for diagnostics).
        endpoint (str | None): Path of the failing request.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str = "",
        endpoint: Optional[str] = None,
        details: Optional[Any] = None,
    ):
        super().__init__(message, details=details)
        self.status_code = status_code
        self.body = body
        self.endpoint = endpoint


class DecodeError(TwitchAPIError):
    """Response body is not JSON, or its shape does not match the expected model."""

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        body_snippet: str = "",
        details: Optional[Any] = None,
    ):
        super().__init__(message, details=details)
        self.endpoint = endpoint
        self.body_snippet = body_snippet


class InvalidRequestError(TwitchAPIError, ValueError):
    """Caller input rejected by an endpoint function before any I/O happens."""
