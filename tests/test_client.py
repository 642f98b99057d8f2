import pytest

from tests.fakes import AUTH_URL
from tests.fakes import FakeTransport
from tests.fakes import page
from tests.fakes import token_response
from twitch_sdk import TwitchClient
from twitch_sdk import TwitchClientSync
from twitch_sdk.token_store import FileTokenStore
from twitch_sdk.transport.httpx import HttpxTransport

USER = {
    "id": "141981764",
    "login": "twitchdev",
    "display_name": "TwitchDev",
    "type": "",
    "broadcaster_type": "partner",
    "description": "",
    "profile_image_url": "",
    "offline_image_url": "",
    "view_count": 0,
    "created_at": "2016-12-14T20:32:28Z",
}


def test_from_credentials_builds_settings():
    client = TwitchClient.from_credentials(
        "my-client", "my-secret", base_url="https://helix.test", timeout=5.0
    )

    assert client.settings.client_id == "my-client"
    assert client.settings.client_secret == "my-secret"
    assert client.settings.base_url == "https://helix.test"
    assert client.executor.url_for("/streams") == "https://helix.test/streams"
    assert isinstance(client.transport, HttpxTransport)


def test_from_credentials_accepts_transport():
    transport = FakeTransport()

    client = TwitchClient.from_credentials("my-client", access_token="given", transport=transport)

    assert client.transport is transport
    assert client.auth.credentials.access_token == "given"


def test_token_cache_path_enables_file_store(settings, tmp_path):
    settings = settings.model_copy(update={"token_cache_path": tmp_path / "token.json"})

    client = TwitchClient(settings, transport=FakeTransport())

    assert isinstance(client.auth.token_store, FileTokenStore)


def test_secrets_are_not_in_repr():
    client = TwitchClient.from_credentials("my-client", "top-secret", access_token="tok", transport=FakeTransport())

    assert "top-secret" not in repr(client.auth.credentials)
    assert "access_token" not in repr(client.auth.credentials)


@pytest.mark.asyncio
async def test_async_context_manager_closes_transport(settings):
    transport = FakeTransport({AUTH_URL: token_response(), "/users": page([USER])})

    async with TwitchClient(settings, transport=transport) as client:
        users = await client.get_users(logins="twitchdev")

    assert users.data[0].login == "twitchdev"
    assert transport.closed


def test_sync_client(settings):
    """
    GIVEN: a TwitchClientSync over a fake transport
    WHEN: we call endpoints without an event loop
    THEN: results come back synchronously and the token is minted once
    """
    transport = FakeTransport(
        {AUTH_URL: token_response(), "/users": page([USER]), "/streams": page([])}
    )

    with TwitchClientSync(settings, transport=transport) as client:
        users = client.get_users(ids=["141981764"])
        streams = client.get_streams(5)

    assert users.data[0].id == "141981764"
    assert streams.data == []
    assert transport.calls_to("/streams")[0]["params"] == [("first", "5")]
    assert len(transport.calls_to(AUTH_URL)) == 1
    assert transport.closed


def test_sync_client_close_is_idempotent(settings):
    client = TwitchClientSync(settings, transport=FakeTransport())

    client.close()
    client.close()
