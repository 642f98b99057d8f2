"""GET /channels."""

from twitch_sdk.decoding import decode_response
from twitch_sdk.exceptions import InvalidRequestError
from twitch_sdk.executor import RequestExecutor
from twitch_sdk.models.channels import ChannelInformationList
from twitch_sdk.request import RequestDescriptor
from twitch_sdk.request import build_params

from .validation import Identifiers
from .validation import check_ids

PATH = "/channels"


async def get_channel_information(
    executor: RequestExecutor,
    broadcaster_ids: Identifiers,
) -> ChannelInformationList:
    """Get title, category and language of up to 100 channels."""
    ids = check_ids("broadcaster_ids", broadcaster_ids)
    if not ids:
        raise InvalidRequestError("get_channel_information needs at least one broadcaster id")
    request = RequestDescriptor.get(PATH, build_params(broadcaster_id=ids))
    response = await executor.execute(request)
    return await decode_response(response, ChannelInformationList, PATH)
