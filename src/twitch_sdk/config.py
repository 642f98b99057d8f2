"""
Configuration management for Twitch SDK.

This module provides TwitchAPISettings class that handles all SDK configuration
with support for environment variables, .env files, and sensible defaults.

Environment variables are automatically loaded with TWITCH_API_ prefix.
Example: TWITCH_API_CLIENT_ID=your_client_id
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class TwitchAPISettings(BaseSettings):
    """
    Configuration settings for Twitch SDK with environment variable support.

    This class automatically loads configuration from:
    - Environment variables (with TWITCH_API_ prefix)
    - .env files
    - Default values for optional settings

    Example:
        # From environment
        export TWITCH_API_CLIENT_ID=abc123
        export TWITCH_API_CLIENT_SECRET=s3cr3t

        # In code
        settings = TwitchAPISettings()
    """

    client_id: str = Field(..., description="Application client id from the developer console")
    client_secret: Optional[str] = Field(
        default=None, description="Application client secret, needed to mint app tokens"
    )
    access_token: Optional[str] = Field(
        default=None, description="Pre-obtained bearer token, used until it is rejected"
    )

    base_url: str = "https://api.twitch.tv/helix"
    auth_url: str = "https://id.twitch.tv/oauth2/token"
    validate_url: str = "https://id.twitch.tv/oauth2/validate"

    timeout: float = 30.0
    transport: str = "httpx"  # default, can be 'aiohttp' or 'requests'

    # Seconds before the real expiry at which a token is considered stale
    token_expiry_margin: float = 60.0
    token_cache_path: Optional[Path] = None
    auth_retry_wait: float = 0.5
    max_rate_limit_wait: float = 60.0

    model_config = SettingsConfigDict(
        env_prefix="TWITCH_API_", env_file=".env", extra="ignore"
    )
