"""
Synchronous wrapper for TwitchClient.

This module provides a synchronous interface on top of the async TwitchClient
to support users who need sync operations.
"""

import asyncio

from .client import TwitchClient
from .config import TwitchAPISettings
from .models import CategoryList
from .models import ChannelInformationList
from .models import ChannelSearchList
from .models import ClipList
from .models import GameList
from .models import StreamList
from .models import TokenValidation
from .models import UserList
from .models import VideoList


class TwitchClientSync:
    """
    Synchronous wrapper for TwitchClient.

    All calls run on one private event loop owned by this object, so the
    pooled HTTP connections and the token refresh coordination survive
    between calls. Do not share an instance between threads.

    Example:
        with TwitchClientSync(settings) as client:
            streams = client.get_streams(first=3)
    """

    def __init__(self, settings: TwitchAPISettings, **client_kwargs):
        """
        Initialize the synchronous client.

        Args:
            settings: API configuration settings
            **client_kwargs: Forwarded to TwitchClient (transport_name, middlewares, ...)
        """
        self._loop = asyncio.new_event_loop()
        self._async_client = TwitchClient(settings, **client_kwargs)

    @property
    def async_client(self) -> TwitchClient:
        return self._async_client

    def _run(self, coro):
        return self._loop.run_until_complete(coro)

    def get_streams(self, first: int | None = 20, **filters) -> StreamList:
        return self._run(self._async_client.get_streams(first, **filters))

    def get_users(self, **filters) -> UserList:
        return self._run(self._async_client.get_users(**filters))

    def get_channel_information(self, broadcaster_ids) -> ChannelInformationList:
        return self._run(self._async_client.get_channel_information(broadcaster_ids))

    def get_games(self, **filters) -> GameList:
        return self._run(self._async_client.get_games(**filters))

    def get_top_games(self, first: int | None = 20, **filters) -> GameList:
        return self._run(self._async_client.get_top_games(first, **filters))

    def get_clips(self, **filters) -> ClipList:
        return self._run(self._async_client.get_clips(**filters))

    def get_videos(self, **filters) -> VideoList:
        return self._run(self._async_client.get_videos(**filters))

    def search_categories(self, query: str, **filters) -> CategoryList:
        return self._run(self._async_client.search_categories(query, **filters))

    def search_channels(self, query: str, **filters) -> ChannelSearchList:
        return self._run(self._async_client.search_channels(query, **filters))

    def validate_token(self) -> TokenValidation:
        return self._run(self._async_client.validate_token())

    def close(self):
        """
        Synchronous cleanup of client resources.
        """
        if self._loop.is_closed():
            return
        try:
            self._run(self._async_client.aclose())
        finally:
            self._loop.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
