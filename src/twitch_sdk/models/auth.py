"""Models for the id.twitch.tv OAuth endpoints."""

from typing import Optional

from pydantic import Field

from .common import StrList
from .common import TwitchModel


class TokenResponse(TwitchModel):
    """Body of a successful client-credentials grant."""

    access_token: str = Field(min_length=1)
    expires_in: int
    token_type: str = "bearer"


class TokenValidation(TwitchModel):
    """Body of GET /oauth2/validate."""

    client_id: str
    login: Optional[str] = None
    user_id: Optional[str] = None
    scopes: StrList = Field(default_factory=list)
    expires_in: int
