import json as jsonlib
from typing import Any
from typing import Mapping

import httpx

from twitch_sdk.exceptions import DecodeError


class UnifiedResponse:
    """
    Unified response wrapper that handles differences between HTTP clients.
    Provides consistent async interface regardless of the underlying transport.

    Backends read the body completely before building this object, so it stays
    usable after the underlying connection is released.
    """

    def __init__(
        self,
        status_code: int,
        text: str = "",
        headers: Mapping[str, str] | list[tuple[str, str]] | None = None,
        url: str = "",
    ):
        self.status_code = status_code
        self.text = text
        # httpx.Headers gives case-insensitive lookups for every backend
        self.headers = httpx.Headers(headers or {})
        self.url = url

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    async def json(self) -> Any:
        """
        Parse the body as JSON.

        Raises:
            DecodeError: If the body is not valid JSON.
        """
        try:
            return jsonlib.loads(self.text)
        except ValueError as err:
            raise DecodeError(
                f"Response body is not valid JSON: {err}",
                endpoint=self.url or None,
                body_snippet=self.text[:200],
            ) from err

    def __repr__(self) -> str:
        return f"<UnifiedResponse [{self.status_code}] {self.url}>"


class BaseTransport:
    """
    Abstract transport layer interface for Twitch SDK.
    All HTTP client backends should inherit from this class.

    Supported transports:
    - httpx: Native async HTTP client
    - aiohttp: Native async HTTP client
    - requests: Sync HTTP client wrapped in async interface

    Implementations must raise TransportError for network-level failures and
    return a UnifiedResponse for every HTTP answer, whatever its status.
    """

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        params: Any = None,
        json: Any = None,
        data: Any = None,
        timeout: float | None = None,
    ) -> UnifiedResponse:
        """
        Async request method for all transports.
        Override this method in transport implementations.
        """
        raise NotImplementedError(
            "Transport implementations must override this method."
        )

    async def close(self) -> None:
        """Release pooled connections. Safe to call more than once."""
