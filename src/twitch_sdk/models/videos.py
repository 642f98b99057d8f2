"""Models relating to the /videos endpoint."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import Page
from .common import TwitchModel


class MutedSegment(TwitchModel):
    duration: int
    offset: int


class Video(TwitchModel):
    id: str
    stream_id: Optional[str] = None
    user_id: str
    user_login: str
    user_name: str
    title: str
    description: str = ""
    created_at: datetime
    published_at: datetime
    url: str
    thumbnail_url: str
    viewable: str = "public"
    view_count: int
    language: str
    # "archive", "highlight" or "upload"
    video_type: str = Field(alias="type")
    # Helix format, e.g. "3h8m33s"
    duration: str
    muted_segments: Optional[list[MutedSegment]] = None


class VideoList(Page[Video]):
    pass
