"""Models relating to the /users endpoint."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import Page
from .common import TwitchModel


class User(TwitchModel):
    id: str
    login: str
    display_name: str
    # "admin", "global_mod", "staff" or ""
    user_type: str = Field(default="", alias="type")
    # "affiliate", "partner" or ""
    broadcaster_type: str = ""
    description: str = ""
    profile_image_url: str = ""
    offline_image_url: str = ""
    view_count: int = 0
    email: Optional[str] = None
    created_at: datetime


class UserList(Page[User]):
    pass
