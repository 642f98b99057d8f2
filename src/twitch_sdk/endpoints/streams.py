"""GET /streams: live streams, most viewers first."""

from typing import Optional

from twitch_sdk.decoding import decode_response
from twitch_sdk.executor import RequestExecutor
from twitch_sdk.models.streams import StreamList
from twitch_sdk.request import RequestDescriptor
from twitch_sdk.request import build_params

from .validation import Identifiers
from .validation import check_choice
from .validation import check_cursors
from .validation import check_first
from .validation import check_ids

PATH = "/streams"
STREAM_TYPES = ("all", "live")


def _build_request(
    *,
    first: Optional[int] = 20,
    user_ids: Identifiers = None,
    user_logins: Identifiers = None,
    game_ids: Identifiers = None,
    language: Identifiers = None,
    stream_type: Optional[str] = None,
    after: Optional[str] = None,
    before: Optional[str] = None,
) -> RequestDescriptor:
    check_cursors(after, before)
    params = build_params(
        user_id=check_ids("user_ids", user_ids),
        user_login=check_ids("user_logins", user_logins),
        game_id=check_ids("game_ids", game_ids),
        language=check_ids("language", language),
        type=check_choice("stream_type", stream_type, STREAM_TYPES),
        first=check_first(first),
        after=after,
        before=before,
    )
    return RequestDescriptor.get(PATH, params)


async def get_streams(
    executor: RequestExecutor,
    *,
    first: Optional[int] = 20,
    user_ids: Identifiers = None,
    user_logins: Identifiers = None,
    game_ids: Identifiers = None,
    language: Identifiers = None,
    stream_type: Optional[str] = None,
    after: Optional[str] = None,
    before: Optional[str] = None,
) -> StreamList:
    """
    Get active streams, sorted by number of current viewers.

    Args:
        executor (RequestExecutor): Executor issuing the call.
        first (int): Page size, 1..100 (default: 20).
        user_ids, user_logins, game_ids, language: Optional filters, up to 100 each.
        stream_type (str | None): "all" or "live".
        after, before (str | None): Pagination cursors (mutually exclusive).

    Returns:
        StreamList: One page of streams plus the cursor for the next page.

    Raises:
        InvalidRequestError: On invalid filters, before any request is sent.
        DecodeError: If Helix returns an unexpected shape.
    """
    request = _build_request(
        first=first,
        user_ids=user_ids,
        user_logins=user_logins,
        game_ids=game_ids,
        language=language,
        stream_type=stream_type,
        after=after,
        before=before,
    )
    response = await executor.execute(request)
    return await decode_response(response, StreamList, PATH)
