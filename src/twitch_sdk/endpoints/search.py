"""GET /search/categories and GET /search/channels."""

from typing import Optional

from twitch_sdk.decoding import decode_response
from twitch_sdk.executor import RequestExecutor
from twitch_sdk.models.search import CategoryList
from twitch_sdk.models.search import ChannelSearchList
from twitch_sdk.request import RequestDescriptor
from twitch_sdk.request import build_params

from .validation import check_first
from .validation import check_required

CATEGORIES_PATH = "/search/categories"
CHANNELS_PATH = "/search/channels"


async def search_categories(
    executor: RequestExecutor,
    query: str,
    *,
    first: Optional[int] = 20,
    after: Optional[str] = None,
) -> CategoryList:
    """Find games/categories whose name matches `query`."""
    params = build_params(
        query=check_required("query", query), first=check_first(first), after=after
    )
    response = await executor.execute(RequestDescriptor.get(CATEGORIES_PATH, params))
    return await decode_response(response, CategoryList, CATEGORIES_PATH)


async def search_channels(
    executor: RequestExecutor,
    query: str,
    *,
    live_only: bool = False,
    first: Optional[int] = 20,
    after: Optional[str] = None,
) -> ChannelSearchList:
    """Find channels whose login or title matches `query`, optionally live ones only."""
    params = build_params(
        query=check_required("query", query),
        live_only=live_only,
        first=check_first(first),
        after=after,
    )
    response = await executor.execute(RequestDescriptor.get(CHANNELS_PATH, params))
    return await decode_response(response, ChannelSearchList, CHANNELS_PATH)
