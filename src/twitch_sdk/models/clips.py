"""Models relating to the /clips endpoint."""

from datetime import datetime
from typing import Optional

from .common import Page
from .common import TwitchModel


class Clip(TwitchModel):
    id: str
    url: str
    embed_url: str
    broadcaster_id: str
    broadcaster_name: str
    creator_id: str
    creator_name: str
    video_id: str = ""
    game_id: str
    language: str
    title: str
    view_count: int
    created_at: datetime
    thumbnail_url: str
    duration: float
    # Offset into the VOD in seconds; null when the VOD is gone
    vod_offset: Optional[int] = None
    is_featured: bool = False


class ClipList(Page[Clip]):
    pass
