"""GET /clips."""

from datetime import datetime
from typing import Optional

from twitch_sdk.decoding import decode_response
from twitch_sdk.exceptions import InvalidRequestError
from twitch_sdk.executor import RequestExecutor
from twitch_sdk.models.clips import ClipList
from twitch_sdk.request import RequestDescriptor
from twitch_sdk.request import build_params

from .validation import Identifiers
from .validation import check_cursors
from .validation import check_exactly_one
from .validation import check_first
from .validation import check_ids
from .validation import check_required

PATH = "/clips"


def _build_request(
    *,
    broadcaster_id: Optional[str] = None,
    game_id: Optional[str] = None,
    ids: Identifiers = None,
    first: Optional[int] = 20,
    started_at: Optional[datetime] = None,
    ended_at: Optional[datetime] = None,
    after: Optional[str] = None,
    before: Optional[str] = None,
) -> RequestDescriptor:
    id_list = check_ids("ids", ids)
    check_exactly_one(broadcaster_id=broadcaster_id, game_id=game_id, ids=id_list)
    for name, value in (("broadcaster_id", broadcaster_id), ("game_id", game_id)):
        if value is not None:
            check_required(name, value)
    if started_at and ended_at and ended_at < started_at:
        raise InvalidRequestError("'ended_at' must not be earlier than 'started_at'")
    check_cursors(after, before)
    params = build_params(
        broadcaster_id=broadcaster_id,
        game_id=game_id,
        id=id_list,
        first=None if id_list else check_first(first),
        started_at=started_at,
        ended_at=ended_at,
        after=after,
        before=before,
    )
    return RequestDescriptor.get(PATH, params)


async def get_clips(
    executor: RequestExecutor,
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
    """
    Get clips for a broadcaster, for a game, or by clip id.

    Exactly one of `broadcaster_id`, `game_id` and `ids` must be given.
    Naive datetimes are treated as UTC.
    """
    request = _build_request(
        broadcaster_id=broadcaster_id,
        game_id=game_id,
        ids=ids,
        first=first,
        started_at=started_at,
        ended_at=ended_at,
        after=after,
        before=before,
    )
    response = await executor.execute(request)
    return await decode_response(response, ClipList, PATH)
