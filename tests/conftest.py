import pytest

from tests.fakes import FakeClock
from tests.fakes import FakeTransport
from tests.fakes import token_response
from twitch_sdk.client import TwitchClient
from twitch_sdk.config import TwitchAPISettings
from twitch_sdk.ratelimit import RateLimiter


@pytest.fixture
def settings():
    """Settings isolated from the developer's .env file."""
    return TwitchAPISettings(
        client_id="test-client-id",
        client_secret="test-client-secret",
        auth_retry_wait=0,
        _env_file=None,
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_client(settings, clock):
    """
    Build a TwitchClient over a FakeTransport.

    The rate limiter uses the fake clock so that 429 waits do not really sleep.
    """

    def _make(routes, **settings_overrides):
        client_settings = settings.model_copy(update=settings_overrides)
        routes.setdefault("https://id.twitch.tv/oauth2/token", token_response())
        transport = FakeTransport(routes)
        client = TwitchClient(client_settings, transport=transport)
        client.rate_limit = RateLimiter(
            max_wait=client_settings.max_rate_limit_wait, clock=clock, sleep=clock.sleep
        )
        client.executor.rate_limiter = client.rate_limit
        return client, transport

    return _make
