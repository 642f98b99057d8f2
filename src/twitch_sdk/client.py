"""
Async-first Twitch Helix SDK Client.

This module provides the main TwitchClient class, the single entry point to
the Helix API. It only composes the pieces below and holds the shared
instances:

- AuthManager: app access token lifecycle (single-flight refresh)
- RequestExecutor: auth headers, 401/429 single retry, rate-limit state
- endpoint functions: typed calls, one per Helix operation

Example usage:
    from twitch_sdk import TwitchClient

    async with TwitchClient.from_credentials("client-id", "client-secret") as client:
        streams = await client.get_streams(first=3)
        for stream in streams.data:
            print(stream.user_name, stream.viewer_count)
"""

import functools
from datetime import datetime
from typing import AsyncIterator
from typing import Optional

from twitch_sdk import endpoints
from twitch_sdk.auth import AuthManager
from twitch_sdk.config import TwitchAPISettings
from twitch_sdk.endpoints.validation import Identifiers
from twitch_sdk.executor import RequestExecutor
from twitch_sdk.middleware import Middleware
from twitch_sdk.models import CategoryList
from twitch_sdk.models import ChannelInformationList
from twitch_sdk.models import ChannelSearchList
from twitch_sdk.models import Clip
from twitch_sdk.models import ClipList
from twitch_sdk.models import GameList
from twitch_sdk.models import Stream
from twitch_sdk.models import StreamList
from twitch_sdk.models import TokenValidation
from twitch_sdk.models import UserList
from twitch_sdk.models import VideoList
from twitch_sdk.ratelimit import RateLimiter
from twitch_sdk.token_store import FileTokenStore
from twitch_sdk.token_store import TokenStore
from twitch_sdk.transport import get_transport
from twitch_sdk.transport.base import BaseTransport


class TwitchClient:
    """
    Async client for the Twitch Helix API.

    Args:
        settings (TwitchAPISettings): SDK configuration with support for environment variables
        transport_name (str | None): Transport backend ('httpx', 'aiohttp', 'requests').
                                   Defaults to settings.transport
        transport (BaseTransport | None): Ready-made transport instance; wins over transport_name
        middlewares (list[Middleware] | None): Optional list of middleware hooks for
                                             request/response processing
        token_store (TokenStore | None): Token persistence. Defaults to a FileTokenStore
                                       when settings.token_cache_path is set, else none

    Example:
        from twitch_sdk import TwitchClient, TwitchAPISettings
        from twitch_sdk.logging_middleware import LoggingMiddleware

        settings = TwitchAPISettings(client_id="...", client_secret="...")
        client = TwitchClient(settings, middlewares=[LoggingMiddleware()])
        try:
            users = await client.get_users(logins=["twitchdev"])
        finally:
            await client.aclose()
    """

    def __init__(
        self,
        settings: TwitchAPISettings,
        transport_name: str | None = None,
        transport: BaseTransport | None = None,
        middlewares: list[Middleware] | None = None,
        token_store: TokenStore | None = None,
    ):
        self.settings = settings
        self.transport = transport or get_transport(
            transport_name or settings.transport, timeout=settings.timeout
        )

        if token_store is None and settings.token_cache_path is not None:
            token_store = FileTokenStore(settings.token_cache_path)

        self.auth = AuthManager(
            settings=self.settings,
            transport=self.transport,
            token_store=token_store,
        )
        self.rate_limit = RateLimiter(max_wait=settings.max_rate_limit_wait)
        self.executor = RequestExecutor(
            settings=self.settings,
            transport=self.transport,
            auth=self.auth,
            rate_limiter=self.rate_limit,
            middlewares=middlewares,
        )

    @classmethod
    def from_credentials(
        cls,
        client_id: str,
        client_secret: str | None = None,
        access_token: str | None = None,
        **kwargs,
    ) -> "TwitchClient":
        """
        Build a client straight from credentials, without reading the environment.

        Keyword arguments other than the constructor's are treated as settings
        overrides (e.g. base_url, timeout).
        """
        client_kwargs = {
            key: kwargs.pop(key)
            for key in ("transport_name", "transport", "middlewares", "token_store")
            if key in kwargs
        }
        settings = TwitchAPISettings(
            client_id=client_id,
            client_secret=client_secret,
            access_token=access_token,
            **kwargs,
        )
        return cls(settings, **client_kwargs)

    # --- streams ---------------------------------------------------------

    async def get_streams(
        self,
        first: Optional[int] = 20,
        *,
        user_ids: Identifiers = None,
        user_logins: Identifiers = None,
        game_ids: Identifiers = None,
        language: Identifiers = None,
        stream_type: Optional[str] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> StreamList:
        """Get live streams, most viewers first. See endpoints.streams.get_streams."""
        return await endpoints.get_streams(
            self.executor,
            first=first,
            user_ids=user_ids,
            user_logins=user_logins,
            game_ids=game_ids,
            language=language,
            stream_type=stream_type,
            after=after,
            before=before,
        )

    def iter_streams(self, limit: Optional[int] = None, **filters) -> AsyncIterator[Stream]:
        """Iterate over live streams across pages. Filters are those of get_streams."""
        return endpoints.paginate(
            functools.partial(endpoints.get_streams, self.executor), limit=limit, **filters
        )

    # --- users & channels ------------------------------------------------

    async def get_users(
        self, *, ids: Identifiers = None, logins: Identifiers = None
    ) -> UserList:
        return await endpoints.get_users(self.executor, ids=ids, logins=logins)

    async def get_channel_information(
        self, broadcaster_ids: Identifiers
    ) -> ChannelInformationList:
        return await endpoints.get_channel_information(self.executor, broadcaster_ids)

    # --- games -----------------------------------------------------------

    async def get_games(
        self,
        *,
        ids: Identifiers = None,
        names: Identifiers = None,
        igdb_ids: Identifiers = None,
    ) -> GameList:
        return await endpoints.get_games(
            self.executor, ids=ids, names=names, igdb_ids=igdb_ids
        )

    async def get_top_games(
        self,
        first: Optional[int] = 20,
        *,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> GameList:
        return await endpoints.get_top_games(
            self.executor, first=first, after=after, before=before
        )

    # --- clips & videos --------------------------------------------------

    async def get_clips(
        self,
        *,
        broadcaster_id: Optional[str] = None,
        game_id: Optional[str] = None,
        ids: Identifiers = None,
        first: Optional[int] = 20,
        started_at: Optional[datetime] = None,
        ended_at: Optional[datetime] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> ClipList:
        return await endpoints.get_clips(
            self.executor,
            broadcaster_id=broadcaster_id,
            game_id=game_id,
            ids=ids,
            first=first,
            started_at=started_at,
            ended_at=ended_at,
            after=after,
            before=before,
        )

    def iter_clips(self, limit: Optional[int] = None, **filters) -> AsyncIterator[Clip]:
        """Iterate over clips across pages. Filters are those of get_clips."""
        return endpoints.paginate(
            functools.partial(endpoints.get_clips, self.executor), limit=limit, **filters
        )

    async def get_videos(
        self,
        *,
        ids: Identifiers = None,
        user_id: Optional[str] = None,
        game_id: Optional[str] = None,
        first: Optional[int] = 20,
        language: Optional[str] = None,
        period: Optional[str] = None,
        sort: Optional[str] = None,
        video_type: Optional[str] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> VideoList:
        return await endpoints.get_videos(
            self.executor,
            ids=ids,
            user_id=user_id,
            game_id=game_id,
            first=first,
            language=language,
            period=period,
            sort=sort,
            video_type=video_type,
            after=after,
            before=before,
        )

    # --- search ----------------------------------------------------------

    async def search_categories(
        self, query: str, *, first: Optional[int] = 20, after: Optional[str] = None
    ) -> CategoryList:
        return await endpoints.search_categories(
            self.executor, query, first=first, after=after
        )

    async def search_channels(
        self,
        query: str,
        *,
        live_only: bool = False,
        first: Optional[int] = 20,
        after: Optional[str] = None,
    ) -> ChannelSearchList:
        return await endpoints.search_channels(
            self.executor, query, live_only=live_only, first=first, after=after
        )

    # --- token -----------------------------------------------------------

    async def validate_token(self) -> TokenValidation:
        return await self.auth.validate_token()

    async def aclose(self):
        """
        Close the HTTP transport and release pooled connections.

        Example:
            async with TwitchClient(settings) as client:
                streams = await client.get_streams()
        """
        await self.transport.close()

    async def __aenter__(self) -> "TwitchClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
