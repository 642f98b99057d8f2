"""
Middleware interface for TwitchClient.

This module defines the `Middleware` protocol used in Twitch SDK.
It allows users to hook into the request/response lifecycle of all Helix calls
performed by the `RequestExecutor`.

Any class that implements this interface can be passed to the client as a middleware.

Current implementations:
- Logging (see: LoggingMiddleware) - logs requests/responses with timing

Hooks run once per attempt: a request retried after a 401 or 429 goes through
`on_request` and `on_response` again.
"""

from typing import Any
from typing import Protocol

from twitch_sdk.transport.base import UnifiedResponse


class Middleware(Protocol):
    async def on_request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        params: Any,
        json: Any,
        data: Any,
    ) -> None:
        """
        Called before the HTTP request is executed.

        This can be used to:
        - Log request details (current: LoggingMiddleware)
        - Add or modify headers
        - Cancel or abort execution (by raising)

        Args:
            method (str): HTTP method, e.g., 'GET', 'POST'
            url (str): Full URL of the request
            headers (dict): Request headers (modifiable)
            params: Query parameters as (key, value) pairs
            json (Any): JSON body payload
            data (Any): Alternative body (e.g., for form-data)
        """

    async def on_response(self, response: UnifiedResponse) -> None:
        """
        Called after the HTTP response is received (but before it's parsed).

        Args:
            response (UnifiedResponse): Unified response object from transport layer
        """
