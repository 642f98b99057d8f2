"""Models relating to the /games and /games/top endpoints."""

from typing import Optional

from .common import Page
from .common import TwitchModel


class Game(TwitchModel):
    id: str
    name: str
    box_art_url: str
    igdb_id: Optional[str] = None

    def box_art(self, width: int, height: int) -> str:
        return self.box_art_url.replace("{width}", str(width)).replace(
            "{height}", str(height)
        )


class GameList(Page[Game]):
    pass
