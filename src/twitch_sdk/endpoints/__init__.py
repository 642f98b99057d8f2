"""
Endpoint layer: one async function per Helix operation.

Each function validates its own input, builds a RequestDescriptor, hands it
to a RequestExecutor and decodes the JSON body into the matching model.
"""

from .channels import get_channel_information
from .clips import get_clips
from .games import get_games
from .games import get_top_games
from .pagination import paginate
from .search import search_categories
from .search import search_channels
from .streams import get_streams
from .users import get_users
from .videos import get_videos

__all__ = [
    "get_channel_information",
    "get_clips",
    "get_games",
    "get_streams",
    "get_top_games",
    "get_users",
    "get_videos",
    "paginate",
    "search_categories",
    "search_channels",
]
