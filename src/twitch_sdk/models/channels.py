"""Models relating to the /channels endpoint."""

from pydantic import Field

from .common import Page
from .common import StrList
from .common import TwitchModel


class ChannelInformation(TwitchModel):
    broadcaster_id: str
    broadcaster_login: str
    broadcaster_name: str
    broadcaster_language: str
    game_id: str
    game_name: str
    title: str
    delay: int = 0
    tags: StrList = Field(default_factory=list)
    content_classification_labels: StrList = Field(default_factory=list)
    is_branded_content: bool = False


class ChannelInformationList(Page[ChannelInformation]):
    pass
