"""Models relating to the /search/* endpoints."""

from pydantic import Field

from .common import OptionalTimestamp
from .common import Page
from .common import StrList
from .common import TwitchModel
from .games import Game


class CategoryList(Page[Game]):
    pass


class ChannelSearchResult(TwitchModel):
    id: str
    broadcaster_login: str
    display_name: str
    broadcaster_language: str
    game_id: str
    game_name: str
    is_live: bool
    tags: StrList = Field(default_factory=list)
    thumbnail_url: str
    title: str
    # Empty upstream when the channel is offline
    started_at: OptionalTimestamp = None


class ChannelSearchList(Page[ChannelSearchResult]):
    pass
