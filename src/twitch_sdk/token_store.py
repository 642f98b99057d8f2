# token_store.py

import json
import logging
import time
from pathlib import Path

logger = logging.getLogger("twitch_sdk.token_store")


class TokenStore:
    """Abstract interface for app-token persistence."""

    async def load(self) -> dict | None:
        raise NotImplementedError

    async def save(self, access_token: str, expires_at: float):
        raise NotImplementedError

    async def clear(self):
        """Clears the token cache"""
        raise NotImplementedError


class FileTokenStore(TokenStore):
    """
    Keeps the last app token in a small JSON file so that short-lived processes
    (CLI invocations, cron jobs) do not mint a new token on every run.

    File format: {"access_token": "...", "expires_at": <unix timestamp>}
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    async def load(self) -> dict | None:
        logger.debug(f"Attempting to load token from: {self.path}")
        if not self.path.exists():
            logger.debug("Token cache file does not exist")
            return None
        try:
            data = json.loads(self.path.read_text())
        except (json.JSONDecodeError, OSError) as e:
            logger.debug(f"Failed to load token cache: {e}")
            return None
        if (
            not isinstance(data, dict)
            or not isinstance(data.get("access_token"), str)
            or not data["access_token"]
            or isinstance(data.get("expires_at"), bool)
            or not isinstance(data.get("expires_at"), (int, float))
        ):
            logger.debug("Cached token data is invalid")
            return None
        if time.time() >= data["expires_at"]:
            logger.debug("Cached token is expired")
            return None
        logger.debug("Valid cached token found")
        return data

    async def save(self, access_token: str, expires_at: float):
        data = {"access_token": access_token, "expires_at": expires_at}
        try:
            logger.debug(f"Saving token to: {self.path}")
            self.path.write_text(json.dumps(data))
        except OSError as e:
            logger.warning(f"Failed to save token: {e}")

    async def clear(self):
        """Clears the token cache"""
        try:
            if self.path.exists():
                self.path.unlink()
                logger.debug("Token cache cleared")
        except OSError as e:
            logger.warning(f"Failed to clear token cache: {e}")
