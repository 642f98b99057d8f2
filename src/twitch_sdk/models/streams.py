"""Models relating to the /streams endpoint."""

from datetime import datetime

from pydantic import Field

from .common import Page
from .common import StrList
from .common import TwitchModel


class Stream(TwitchModel):
    """A live stream as listed by GET /streams."""

    id: str
    user_id: str
    user_login: str
    user_name: str
    game_id: str
    game_name: str = ""
    # "live", or "" when the stream went down between listing and response
    stream_type: str = Field(alias="type")
    title: str
    viewer_count: int
    started_at: datetime
    language: str
    thumbnail_url: str
    tag_ids: StrList = Field(default_factory=list)
    tags: StrList = Field(default_factory=list)
    is_mature: bool = False

    def thumbnail(self, width: int, height: int) -> str:
        """Thumbnail URL with the {width}x{height} template filled in."""
        return self.thumbnail_url.replace("{width}", str(width)).replace(
            "{height}", str(height)
        )


class StreamList(Page[Stream]):
    """The list of streams."""
