"""GET /games and GET /games/top."""

from typing import Optional

from twitch_sdk.decoding import decode_response
from twitch_sdk.exceptions import InvalidRequestError
from twitch_sdk.executor import RequestExecutor
from twitch_sdk.models.games import GameList
from twitch_sdk.request import RequestDescriptor
from twitch_sdk.request import build_params

from .validation import MAX_IDS
from .validation import Identifiers
from .validation import check_cursors
from .validation import check_first
from .validation import check_ids

PATH = "/games"
TOP_PATH = "/games/top"


async def get_games(
    executor: RequestExecutor,
    *,
    ids: Identifiers = None,
    names: Identifiers = None,
    igdb_ids: Identifiers = None,
) -> GameList:
    """
    Get categories/games by id, exact name or IGDB id.

    Raises:
        InvalidRequestError: If no filter is given or more than 100 values are passed.
    """
    filters = {
        "id": check_ids("ids", ids),
        "name": check_ids("names", names),
        "igdb_id": check_ids("igdb_ids", igdb_ids),
    }
    total = sum(len(values) for values in filters.values())
    if total == 0:
        raise InvalidRequestError("get_games needs at least one id, name or igdb_id")
    if total > MAX_IDS:
        raise InvalidRequestError(f"get_games accepts at most {MAX_IDS} filters combined")
    response = await executor.execute(RequestDescriptor.get(PATH, build_params(**filters)))
    return await decode_response(response, GameList, PATH)


async def get_top_games(
    executor: RequestExecutor,
    *,
    first: Optional[int] = 20,
    after: Optional[str] = None,
    before: Optional[str] = None,
) -> GameList:
    """Get games sorted by number of current viewers."""
    check_cursors(after, before)
    params = build_params(first=check_first(first), after=after, before=before)
    response = await executor.execute(RequestDescriptor.get(TOP_PATH, params))
    return await decode_response(response, GameList, TOP_PATH)
