"""
This module provides an asynchronous AuthManager class responsible for:
- minting Twitch app access tokens with the client-credentials grant
- coordinating refreshes so concurrent callers share a single one
- managing token expiration and reuse (in memory and via an optional TokenStore).

A failed refresh is never retried more than once, and only when the token
endpoint could not be reached at all. A rejection from Twitch (bad client id
or secret) surfaces immediately as AuthError.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from dataclasses import field
from typing import Callable
from typing import Optional

from tenacity import AsyncRetrying
from tenacity import retry_if_exception_type
from tenacity import stop_after_attempt
from tenacity import wait_fixed

from twitch_sdk.config import TwitchAPISettings
from twitch_sdk.decoding import decode_response
from twitch_sdk.decoding import error_message
from twitch_sdk.exceptions import ApiError
from twitch_sdk.exceptions import AuthError
from twitch_sdk.exceptions import DecodeError
from twitch_sdk.exceptions import TransportError
from twitch_sdk.models.auth import TokenResponse
from twitch_sdk.models.auth import TokenValidation
from twitch_sdk.token_store import TokenStore
from twitch_sdk.transport.base import BaseTransport

logger = logging.getLogger("twitch_sdk.auth")

# One initial attempt plus at most one retry on network failure
TOKEN_REQUEST_ATTEMPTS = 2


@dataclass
class Credentials:
    """
    Application credentials plus the current bearer token.

    `expires_at` is None when the expiry is unknown, which is the case for a
    caller-supplied token: it is then trusted until Helix rejects it.
    """

    client_id: str
    client_secret: Optional[str] = field(default=None, repr=False)
    access_token: Optional[str] = field(default=None, repr=False)
    expires_at: Optional[float] = None


class AuthManager:
    """
    Owns the Credentials of one client and hands out valid app access tokens.

    Attributes:
        settings (TwitchAPISettings): Configuration with client id/secret and OAuth URLs.
        transport (BaseTransport): HTTP backend shared with the request executor.
        token_store (Optional[TokenStore]): Optional persistence for the last token.
        credentials (Credentials): Current client credentials and token.
    """

    def __init__(
        self,
        settings: TwitchAPISettings,
        transport: BaseTransport,
        token_store: Optional[TokenStore] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.settings = settings
        self.transport = transport
        self.token_store = token_store
        self.credentials = Credentials(
            client_id=settings.client_id,
            client_secret=settings.client_secret,
            access_token=settings.access_token,
        )
        self._clock = clock
        self._store_checked = False
        self._inflight: Optional[asyncio.Future] = None

    @property
    def client_id(self) -> str:
        return self.credentials.client_id

    def has_valid_token(self) -> bool:
        """
        Checks if the current access token can still be used.

        Returns:
            bool: False if the token is missing or within the expiry margin.
        """
        creds = self.credentials
        if not creds.access_token:
            return False
        if creds.expires_at is None:
            return True
        return self._clock() < creds.expires_at - self.settings.token_expiry_margin

    async def get_token(self) -> str:
        """
        Returns a valid access token. Refreshes it only if it's expired or missing.

        Concurrent callers arriving while a refresh is in flight wait for that
        refresh instead of starting their own.

        Raises:
            AuthError: If a token cannot be obtained.
        """
        if self.has_valid_token():
            return self.credentials.access_token
        return await self._single_flight(force=False)

    async def refresh(self, stale_token: Optional[str] = None) -> str:
        """
        Forces a new token after Helix rejected `stale_token`.

        If another caller already replaced `stale_token`, the newer token is
        returned without contacting Twitch again.
        """
        current = self.credentials.access_token
        if (
            stale_token is not None
            and current is not None
            and current != stale_token
            and self.has_valid_token()
        ):
            return current
        if self._inflight is not None:
            token = await asyncio.shield(self._inflight)
            if token != stale_token:
                return token
        return await self._single_flight(force=True)

    async def invalidate(self) -> None:
        """Drops the in-memory token and clears the persisted one."""
        self.credentials.access_token = None
        self.credentials.expires_at = None
        if self.token_store:
            await self.token_store.clear()

    async def validate_token(self) -> TokenValidation:
        """
        Asks Twitch whether the current token is still accepted.

        Returns:
            TokenValidation: Client id, scopes and remaining lifetime of the token.

        Raises:
            AuthError: If Twitch rejects the token.
            ApiError: On any other non-success status.
        """
        token = await self.get_token()
        response = await self.transport.request(
            "GET",
            self.settings.validate_url,
            headers={"Authorization": f"OAuth {token}"},
            timeout=self.settings.timeout,
        )
        if response.status_code == 401:
            raise AuthError("Access token is invalid or expired", details=response.text)
        if not response.is_success:
            raise ApiError(
                f"Token validation failed: {response.status_code}",
                status_code=response.status_code,
                body=response.text,
                endpoint=self.settings.validate_url,
            )
        return await decode_response(response, TokenValidation, self.settings.validate_url)

    def _single_flight(self, force: bool) -> "asyncio.Future[str]":
        if self._inflight is None:
            self._inflight = asyncio.ensure_future(self._obtain_token(force))
            self._inflight.add_done_callback(self._flight_done)
        return asyncio.shield(self._inflight)

    def _flight_done(self, future: asyncio.Future) -> None:
        if self._inflight is future:
            self._inflight = None
        if not future.cancelled():
            # Mark the exception as retrieved; waiters re-raise it themselves
            future.exception()

    async def _obtain_token(self, force: bool) -> str:
        if not force and self.token_store and not self._store_checked:
            self._store_checked = True
            logger.debug("Attempting to load token from cache...")
            token_data = await self.token_store.load()
            if token_data:
                self.credentials.access_token = token_data["access_token"]
                self.credentials.expires_at = token_data["expires_at"]
                if self.has_valid_token():
                    logger.debug("Using cached token")
                    return self.credentials.access_token

        logger.debug("No valid token. Refreshing...")
        return await self._request_app_token()

    async def _request_app_token(self) -> str:
        creds = self.credentials
        if not creds.client_secret or not creds.client_secret.strip():
            raise AuthError("Client secret is missing or empty; cannot mint an app access token")

        form = {
            "client_id": creds.client_id,
            "client_secret": creds.client_secret,
            "grant_type": "client_credentials",
        }
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(TOKEN_REQUEST_ATTEMPTS),
                wait=wait_fixed(self.settings.auth_retry_wait),
                retry=retry_if_exception_type(TransportError),
                reraise=True,
            ):
                with attempt:
                    response = await self.transport.request(
                        "POST",
                        self.settings.auth_url,
                        data=form,
                        timeout=self.settings.timeout,
                    )
        except TransportError as err:
            logger.error(f"Token endpoint unreachable: {err}")
            raise AuthError(f"Token endpoint unreachable: {err}") from err

        if response.status_code != 200:
            message = error_message(response)
            logger.error(f"Token request rejected: {response.status_code}")
            raise AuthError(
                f"Token request rejected ({response.status_code}): {message}",
                details=response.text,
            )

        try:
            token = await decode_response(response, TokenResponse, self.settings.auth_url)
        except DecodeError as err:
            raise AuthError(f"Malformed token response: {err}", details=err.details) from err

        creds.access_token = token.access_token
        creds.expires_at = self._clock() + token.expires_in
        logger.debug(f"New app access token acquired (expires in {token.expires_in}s)")

        if self.token_store:
            try:
                await self.token_store.save(creds.access_token, creds.expires_at)
            except Exception as e:
                logger.warning(f"Failed to save token: {e}")
        return creds.access_token
