from typing import Any

import httpx

from twitch_sdk.exceptions import TransportError

from .base import BaseTransport
from .base import UnifiedResponse


class HttpxTransport(BaseTransport):
    """
    Async transport implementation using httpx.AsyncClient.
    """

    def __init__(self, timeout: float = 30.0, client: httpx.AsyncClient | None = None):
        self._timeout = timeout
        self._client = client or httpx.AsyncClient(timeout=self._timeout)

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
        try:
            response = await self._client.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                json=json,
                data=data,
                timeout=timeout or self._timeout,
            )
        except httpx.HTTPError as err:
            raise TransportError(
                f"{method} {url} failed: {err.__class__.__name__}: {err}",
                endpoint=url,
            ) from err
        return UnifiedResponse(
            response.status_code,
            text=response.text,
            headers=response.headers.multi_items(),
            url=url,
        )

    async def close(self):
        await self._client.aclose()
