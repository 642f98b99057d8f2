"""Typed response models for the Helix API."""

from .auth import TokenResponse
from .auth import TokenValidation
from .channels import ChannelInformation
from .channels import ChannelInformationList
from .clips import Clip
from .clips import ClipList
from .common import Page
from .common import Pagination
from .games import Game
from .games import GameList
from .search import CategoryList
from .search import ChannelSearchList
from .search import ChannelSearchResult
from .streams import Stream
from .streams import StreamList
from .users import User
from .users import UserList
from .videos import MutedSegment
from .videos import Video
from .videos import VideoList

__all__ = [
    "CategoryList",
    "ChannelInformation",
    "ChannelInformationList",
    "ChannelSearchList",
    "ChannelSearchResult",
    "Clip",
    "ClipList",
    "Game",
    "GameList",
    "MutedSegment",
    "Page",
    "Pagination",
    "Stream",
    "StreamList",
    "TokenResponse",
    "TokenValidation",
    "User",
    "UserList",
    "Video",
    "VideoList",
]
