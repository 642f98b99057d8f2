"""
Aiohttp transport implementation for Twitch SDK.

This module provides AiohttpTransport, an alternative async HTTP client for the SDK.
Aiohttp is a mature async HTTP client with connection pooling and comprehensive
timeout handling.
"""

import asyncio
from typing import Any

import aiohttp

from twitch_sdk.exceptions import TransportError

from .base import BaseTransport
from .base import UnifiedResponse


class AiohttpTransport(BaseTransport):
    """
    Async transport implementation using aiohttp.ClientSession.
    """

    def __init__(self, timeout: float = 30.0):
        self._timeout = timeout
        self._session: aiohttp.ClientSession | None = None

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
        # Create session if not exists
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout)
            )

        timeout_obj = aiohttp.ClientTimeout(total=timeout or self._timeout)
        try:
            async with self._session.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                json=json,
                data=data,
                timeout=timeout_obj,
            ) as response:
                text = await response.text()
                return UnifiedResponse(
                    response.status,
                    text=text,
                    headers=list(response.headers.items()),
                    url=url,
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            raise TransportError(
                f"{method} {url} failed: {err.__class__.__name__}: {err}",
                endpoint=url,
            ) from err

    async def close(self):
        if self._session:
            await self._session.close()
