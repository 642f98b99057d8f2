import pytest
from click.testing import CliRunner

from tests.fakes import AUTH_URL
from tests.fakes import VALIDATE_URL
from tests.fakes import FakeTransport
from tests.fakes import helix_error
from tests.fakes import make_response
from tests.fakes import page
from tests.fakes import token_response
from twitch_sdk import cli as cli_module
from twitch_sdk.client import TwitchClient

STREAM = {
    "id": "1",
    "user_id": "101051819",
    "user_login": "afro",
    "user_name": "Afro",
    "game_id": "32982",
    "game_name": "Grand Theft Auto V",
    "type": "live",
    "title": "NoPixel",
    "tags": [],
    "viewer_count": 1490,
    "started_at": "2021-03-10T03:18:11Z",
    "language": "en",
    "thumbnail_url": "",
    "is_mature": False,
}


@pytest.fixture
def cli_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TWITCH_API_CLIENT_ID", "cli-client")
    monkeypatch.setenv("TWITCH_API_CLIENT_SECRET", "cli-secret")
    return tmp_path


@pytest.fixture
def fake_routes(monkeypatch):
    """Route every client the CLI builds through one FakeTransport."""
    transport = FakeTransport()

    def factory(settings, middlewares=None):
        return TwitchClient(settings, transport=transport, middlewares=middlewares)

    monkeypatch.setattr(cli_module, "TwitchClient", factory)

    def _set(routes):
        routes.setdefault(AUTH_URL, token_response())
        transport.routes = {key: list(value) if isinstance(value, list) else [value] for key, value in routes.items()}
        return transport

    return _set


def test_streams_command(cli_env, fake_routes):
    transport = fake_routes({"/streams": page([STREAM])})

    result = CliRunner().invoke(cli_module.cli, ["streams", "--count", "1", "--language", "en"])

    assert result.exit_code == 0, result.output
    assert "Afro" in result.output
    assert "1490" in result.output
    assert transport.calls_to("/streams")[0]["params"] == [("language", "en"), ("first", "1")]
    assert transport.closed


def test_top_games_command(cli_env, fake_routes):
    fake_routes(
        {"/games/top": page([{"id": "509658", "name": "Just Chatting", "box_art_url": "", "igdb_id": ""}])}
    )

    result = CliRunner().invoke(cli_module.cli, ["top-games", "--count", "1"])

    assert result.exit_code == 0, result.output
    assert "1. Just Chatting (509658)" in result.output


def test_token_command(cli_env, fake_routes):
    fake_routes(
        {VALIDATE_URL: make_response(200, {"client_id": "cli-client", "scopes": [], "expires_in": 4000})}
    )

    result = CliRunner().invoke(cli_module.cli, ["token"])

    assert result.exit_code == 0, result.output
    assert "cli-client" in result.output
    assert "4000s" in result.output


def test_sdk_errors_become_cli_errors(cli_env, fake_routes):
    fake_routes({AUTH_URL: helix_error(403, "invalid client secret")})

    result = CliRunner().invoke(cli_module.cli, ["users", "--login", "twitchdev"])

    assert result.exit_code == 1
    assert "invalid client secret" in result.output


def test_missing_configuration(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TWITCH_API_CLIENT_ID", raising=False)

    result = CliRunner().invoke(cli_module.cli, ["streams"])

    assert result.exit_code == 1
    assert "TWITCH_API_CLIENT_ID" in result.output


def test_clear_token_cache(cli_env, monkeypatch):
    cache = cli_env / "token.json"
    cache.write_text('{"access_token": "x", "expires_at": 0}')
    monkeypatch.setenv("TWITCH_API_TOKEN_CACHE_PATH", str(cache))

    result = CliRunner().invoke(cli_module.cli, ["clear-token-cache"])

    assert result.exit_code == 0, result.output
    assert not cache.exists()
