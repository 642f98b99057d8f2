"""
Twitch SDK - Async-first SDK for the Twitch Helix API.

This SDK provides:
- Async client for Helix with one typed method per operation
- Synchronous wrapper for sync operations
- App access token management with single-flight refresh
- Rate-limit aware request execution with single retry on 401/429
- Multiple HTTP transport support
- Middleware support
"""

from .auth import AuthManager
from .client import TwitchClient
from .client_sync import TwitchClientSync
from .config import TwitchAPISettings
from .exceptions import ApiError
from .exceptions import AuthError
from .exceptions import DecodeError
from .exceptions import InvalidRequestError
from .exceptions import RateLimitError
from .exceptions import TransportError
from .exceptions import TwitchAPIError
from .middleware import Middleware
from .request import RequestDescriptor
from .token_store import FileTokenStore
from .token_store import TokenStore

__version__ = "0.1.0"

__all__ = [
    "TwitchClient",
    "TwitchClientSync",
    "TwitchAPISettings",
    "AuthManager",
    "RequestDescriptor",
    "TwitchAPIError",
    "AuthError",
    "RateLimitError",
    "TransportError",
    "ApiError",
    "DecodeError",
    "InvalidRequestError",
    "Middleware",
    "TokenStore",
    "FileTokenStore",
]
