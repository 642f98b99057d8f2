"""
Logging middleware for Twitch SDK.

This module provides LoggingMiddleware, a built-in middleware that logs
all HTTP requests and responses with timing information. Useful for
debugging, monitoring, and understanding SDK behavior.

Credentials never reach the log: the Authorization header is redacted.
"""

import logging
import time
from contextvars import ContextVar
from typing import Optional

from twitch_sdk.ratelimit import REMAINING_HEADER
from twitch_sdk.transport.base import UnifiedResponse

logger = logging.getLogger("twitch_sdk.middleware.logging")

REDACTED_HEADERS = {"authorization"}

# Per-task start time, so concurrent requests do not clobber each other
_start_time: ContextVar[Optional[float]] = ContextVar("twitch_sdk_request_start", default=None)


def redact(headers: dict) -> dict:
    return {
        name: ("***" if name.lower() in REDACTED_HEADERS else value)
        for name, value in headers.items()
    }


class LoggingMiddleware:
    """
    Middleware for logging HTTP requests and responses in TwitchClient.
    Uses standard Python logging.
    """

    def __init__(self, level: int = logging.INFO):
        self.level = level

    async def on_request(
        self,
        method: str,
        url: str,
        headers: dict,
        params,
        json,
        data,
    ):
        _start_time.set(time.monotonic())
        logger.log(
            self.level,
            f"Request: {method} {url} | headers={redact(headers)} | params={params}",
        )

    async def on_response(self, response: UnifiedResponse):
        start = _start_time.get()
        elapsed = (time.monotonic() - start) if start is not None else None
        remaining = response.headers.get(REMAINING_HEADER)
        logger.log(
            self.level,
            f"Response: {response.status_code}"
            + (f" | elapsed={elapsed:.3f}s" if elapsed is not None else "")
            + (f" | ratelimit-remaining={remaining}" if remaining is not None else ""),
        )
