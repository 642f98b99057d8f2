"""GET /videos."""

from typing import Optional

from twitch_sdk.decoding import decode_response
from twitch_sdk.executor import RequestExecutor
from twitch_sdk.models.videos import VideoList
from twitch_sdk.request import RequestDescriptor
from twitch_sdk.request import build_params

from .validation import Identifiers
from .validation import check_choice
from .validation import check_cursors
from .validation import check_exactly_one
from .validation import check_first
from .validation import check_ids
from .validation import check_required

PATH = "/videos"
PERIODS = ("all", "day", "month", "week")
SORTS = ("time", "trending", "views")
VIDEO_TYPES = ("all", "archive", "highlight", "upload")


async def get_videos(
    executor: RequestExecutor,
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
    """
    Get videos by id, by owner or by game.

    Exactly one of `ids`, `user_id` and `game_id` must be given. The other
    filters (language, period, sort, type, paging) only apply to user and game
    lookups.
    """
    id_list = check_ids("ids", ids)
    selector = check_exactly_one(ids=id_list, user_id=user_id, game_id=game_id)
    if selector != "ids":
        check_required(selector, user_id if selector == "user_id" else game_id)
    check_cursors(after, before)
    params = build_params(
        id=id_list,
        user_id=user_id,
        game_id=game_id,
        first=None if id_list else check_first(first),
        language=language,
        period=check_choice("period", period, PERIODS),
        sort=check_choice("sort", sort, SORTS),
        type=check_choice("video_type", video_type, VIDEO_TYPES),
        after=after,
        before=before,
    )
    response = await executor.execute(RequestDescriptor.get(PATH, params))
    return await decode_response(response, VideoList, PATH)
