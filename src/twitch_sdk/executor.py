"""
Request execution for the Helix API.

RequestExecutor turns a RequestDescriptor into an HTTP call:

- attaches `Authorization: Bearer <token>` and `Client-Id` headers
- recovers a single 401 by refreshing the token and retrying once
- recovers a single 429 by waiting for the bucket to refill and retrying once
- keeps the shared rate-limit state current after every response

Everything else (network failures, other non-2xx statuses, a second 401 or
429) propagates to the caller as a typed TwitchAPIError. Attempt counts are
explicit so the single-retry bounds stay easy to audit.
"""

import logging
from typing import Optional

from twitch_sdk.auth import AuthManager
from twitch_sdk.config import TwitchAPISettings
from twitch_sdk.decoding import error_message
from twitch_sdk.exceptions import ApiError
from twitch_sdk.exceptions import AuthError
from twitch_sdk.exceptions import RateLimitError
from twitch_sdk.middleware import Middleware
from twitch_sdk.ratelimit import RateLimiter
from twitch_sdk.request import RequestDescriptor
from twitch_sdk.transport.base import BaseTransport
from twitch_sdk.transport.base import UnifiedResponse

logger = logging.getLogger("twitch_sdk.executor")

MAX_AUTH_RETRIES = 1
MAX_RATE_LIMIT_RETRIES = 1


class RequestExecutor:
    """
    Issues Helix requests on behalf of the endpoint layer.

    Args:
        settings (TwitchAPISettings): Base URL and timeout.
        transport (BaseTransport): HTTP backend.
        auth (AuthManager): Source of bearer tokens, shared with the client.
        rate_limiter (RateLimiter | None): Shared rate-limit state.
        middlewares (list[Middleware] | None): Request/response hooks.
    """

    def __init__(
        self,
        settings: TwitchAPISettings,
        transport: BaseTransport,
        auth: AuthManager,
        rate_limiter: Optional[RateLimiter] = None,
        middlewares: Optional[list[Middleware]] = None,
    ):
        self.settings = settings
        self.transport = transport
        self.auth = auth
        self.rate_limiter = rate_limiter or RateLimiter(max_wait=settings.max_rate_limit_wait)
        self.middlewares = middlewares or []

    def url_for(self, path: str) -> str:
        return f"{self.settings.base_url.rstrip('/')}/{path.lstrip('/')}"

    def _headers(self, token: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {token}",
            "Client-Id": self.auth.client_id,
        }

    async def _send(self, request: RequestDescriptor, url: str, token: str) -> UnifiedResponse:
        headers = self._headers(token)
        params = list(request.params) or None

        # === MIDDLEWARE: before request ===
        for mw in self.middlewares:
            await mw.on_request(
                method=request.method,
                url=url,
                headers=headers,
                params=params,
                json=request.body,
                data=None,
            )

        response = await self.transport.request(
            method=request.method,
            url=url,
            headers=headers,
            params=params,
            json=request.body,
            timeout=self.settings.timeout,
        )

        # === MIDDLEWARE: after response ===
        for mw in self.middlewares:
            await mw.on_response(response)

        return response

    async def execute(self, request: RequestDescriptor) -> UnifiedResponse:
        """
        Execute one Helix call with auth and rate-limit recovery.

        Returns:
            UnifiedResponse: The 2xx response.

        Raises:
            AuthError: Token could not be obtained, or Helix rejected it twice.
            RateLimitError: Helix answered 429 again after the single retry.
            TransportError: Network-level failure (not retried).
            ApiError: Any other non-2xx status.
        """
        url = self.url_for(request.path)
        token = await self.auth.get_token()
        auth_retries = 0
        rate_limit_retries = 0
        waited_for_429 = False

        while True:
            # After a 429 the capped retry_delay was the wait for this attempt
            if not waited_for_429:
                await self.rate_limiter.wait_if_exhausted()
            waited_for_429 = False
            response = await self._send(request, url, token)
            self.rate_limiter.update(response.headers)

            if response.status_code == 401:
                if auth_retries >= MAX_AUTH_RETRIES:
                    raise AuthError(
                        f"{request.method} {request.path}: token rejected after refresh: "
                        f"{error_message(response)}",
                        details=response.text,
                    )
                auth_retries += 1
                logger.warning(f"Got 401 from {request.path}, refreshing token and retrying")
                token = await self.auth.refresh(stale_token=token)
                continue

            if response.status_code == 429:
                if rate_limit_retries >= MAX_RATE_LIMIT_RETRIES:
                    raise RateLimitError(
                        f"{request.method} {request.path}: still rate limited after retry",
                        endpoint=request.path,
                        reset_at=self.rate_limiter.state.reset,
                        details=response.text,
                    )
                rate_limit_retries += 1
                delay = self.rate_limiter.retry_delay(response.headers)
                logger.warning(f"Rate limited (429) on {request.path}. Waiting {delay:.2f}s...")
                await self.rate_limiter.sleep(delay)
                waited_for_429 = True
                continue

            if not response.is_success:
                raise ApiError(
                    f"{request.method} {request.path} failed: "
                    f"{response.status_code} {error_message(response)}",
                    status_code=response.status_code,
                    body=response.text,
                    endpoint=request.path,
                )

            return response
