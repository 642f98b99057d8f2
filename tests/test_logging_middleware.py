import logging

import pytest

from tests.fakes import make_response
from twitch_sdk.logging_middleware import LoggingMiddleware
from twitch_sdk.logging_middleware import redact


def test_redact_hides_authorization():
    headers = {"Authorization": "Bearer secret", "Client-Id": "abc"}

    assert redact(headers) == {"Authorization": "***", "Client-Id": "abc"}
    assert headers["Authorization"] == "Bearer secret"


@pytest.mark.asyncio
async def test_logs_request_and_response_without_token(caplog):
    middleware = LoggingMiddleware()

    with caplog.at_level(logging.INFO, logger="twitch_sdk.middleware.logging"):
        await middleware.on_request(
            "GET",
            "https://api.twitch.tv/helix/streams",
            {"Authorization": "Bearer secret", "Client-Id": "abc"},
            [("first", "1")],
            None,
            None,
        )
        await middleware.on_response(
            make_response(200, {"data": []}, headers={"Ratelimit-Remaining": "799"})
        )

    assert "secret" not in caplog.text
    assert "Request: GET https://api.twitch.tv/helix/streams" in caplog.text
    assert "Response: 200" in caplog.text
    assert "ratelimit-remaining=799" in caplog.text
