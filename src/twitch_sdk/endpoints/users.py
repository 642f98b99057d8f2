"""GET /users: look up users by id or login."""

from twitch_sdk.decoding import decode_response
from twitch_sdk.exceptions import InvalidRequestError
from twitch_sdk.executor import RequestExecutor
from twitch_sdk.models.users import UserList
from twitch_sdk.request import RequestDescriptor
from twitch_sdk.request import build_params

from .validation import MAX_IDS
from .validation import Identifiers
from .validation import check_ids

PATH = "/users"


def _build_request(*, ids: Identifiers = None, logins: Identifiers = None) -> RequestDescriptor:
    id_list = check_ids("ids", ids)
    login_list = check_ids("logins", logins)
    # An app token has no "current user", so at least one filter is required
    if not id_list and not login_list:
        raise InvalidRequestError("get_users needs at least one id or login")
    if len(id_list) + len(login_list) > MAX_IDS:
        raise InvalidRequestError(f"get_users accepts at most {MAX_IDS} ids and logins combined")
    return RequestDescriptor.get(PATH, build_params(id=id_list, login=login_list))


async def get_users(
    executor: RequestExecutor,
    *,
    ids: Identifiers = None,
    logins: Identifiers = None,
) -> UserList:
    """Get information about one or more users. Unknown ids and logins are simply absent from the result."""
    response = await executor.execute(_build_request(ids=ids, logins=logins))
    return await decode_response(response, UserList, PATH)
