"""
Cursor-following helper for list endpoints.

Helix pages carry a `pagination.cursor` that is passed back as `after` to get
the next page; the last page has no cursor.
"""

from typing import Any
from typing import AsyncIterator
from typing import Awaitable
from typing import Callable
from typing import Optional

from twitch_sdk.exceptions import InvalidRequestError
from twitch_sdk.models.common import Page


async def paginate(
    fetch: Callable[..., Awaitable[Page]],
    *,
    limit: Optional[int] = None,
    **kwargs: Any,
) -> AsyncIterator[Any]:
    """
    Yield items across pages until the cursor runs out or `limit` items were yielded.

    Args:
        fetch: A list endpoint bound to its executor, e.g.
            functools.partial(get_streams, executor).
        limit (int | None): Maximum number of items to yield.
        **kwargs: Filters forwarded to every `fetch` call.

    Example:
        async for stream in paginate(partial(get_streams, executor), limit=250, first=100):
            print(stream.user_name)
    """
    if limit is not None and limit <= 0:
        raise InvalidRequestError(f"'limit' must be positive, got {limit}")
    if kwargs.get("before") is not None:
        raise InvalidRequestError(
            "'before' is not supported when iterating; pages are followed with 'after'"
        )
    cursor = kwargs.pop("after", None)
    yielded = 0
    while True:
        page = await fetch(after=cursor, **kwargs)
        for item in page.data:
            yield item
            yielded += 1
            if limit is not None and yielded >= limit:
                return
        cursor = page.cursor
        if not cursor or not page.data:
            return
