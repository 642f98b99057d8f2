import httpx
import pytest
import requests

from twitch_sdk.exceptions import DecodeError
from twitch_sdk.exceptions import TransportError
from twitch_sdk.transport import get_transport
from twitch_sdk.transport.aiohttp import AiohttpTransport
from twitch_sdk.transport.base import UnifiedResponse
from twitch_sdk.transport.httpx import HttpxTransport
from twitch_sdk.transport.requests import RequestsTransport


def test_get_transport_by_name():
    assert isinstance(get_transport("httpx"), HttpxTransport)
    assert isinstance(get_transport("AIOHTTP"), AiohttpTransport)
    assert isinstance(get_transport("requests"), RequestsTransport)


def test_get_transport_unknown_name():
    with pytest.raises(ValueError, match="Unknown transport"):
        get_transport("urllib")


@pytest.mark.asyncio
async def test_unified_response_headers_are_case_insensitive():
    response = UnifiedResponse(200, text='{"ok": true}', headers={"Ratelimit-Remaining": "5"})

    assert response.headers["ratelimit-remaining"] == "5"
    assert response.is_success
    assert await response.json() == {"ok": True}


@pytest.mark.asyncio
async def test_unified_response_invalid_json():
    response = UnifiedResponse(502, text="Bad Gateway", url="https://api.twitch.tv/helix/streams")

    with pytest.raises(DecodeError) as exc_info:
        await response.json()

    assert exc_info.value.body_snippet == "Bad Gateway"


@pytest.mark.asyncio
async def test_httpx_transport_sends_repeated_params_and_reads_body():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["ids"] = request.url.params.get_list("id")
        seen["client_id"] = request.headers["Client-Id"]
        return httpx.Response(
            200, json={"data": []}, headers={"Ratelimit-Remaining": "799"}
        )

    transport = HttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    response = await transport.request(
        "GET",
        "https://api.twitch.tv/helix/users",
        headers={"Client-Id": "abc"},
        params=[("id", "1"), ("id", "2")],
    )
    await transport.close()

    assert seen == {"ids": ["1", "2"], "client_id": "abc"}
    assert response.status_code == 200
    assert response.headers["ratelimit-remaining"] == "799"
    assert await response.json() == {"data": []}


@pytest.mark.asyncio
async def test_httpx_transport_maps_network_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport = HttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))

    with pytest.raises(TransportError) as exc_info:
        await transport.request("GET", "https://api.twitch.tv/helix/streams")

    assert exc_info.value.endpoint == "https://api.twitch.tv/helix/streams"
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_httpx_transport_returns_error_statuses():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"message": "slow down"})

    transport = HttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))

    response = await transport.request("GET", "https://api.twitch.tv/helix/streams")

    assert response.status_code == 429
    assert not response.is_success


@pytest.mark.asyncio
async def test_requests_transport_maps_network_errors(monkeypatch):
    transport = RequestsTransport()

    def boom(**kwargs):
        raise requests.ConnectionError("no route to host")

    monkeypatch.setattr(transport._session, "request", boom)

    with pytest.raises(TransportError):
        await transport.request("GET", "https://api.twitch.tv/helix/streams")
    await transport.close()


@pytest.mark.asyncio
async def test_requests_transport_wraps_response(monkeypatch):
    transport = RequestsTransport()

    def fake_request(**kwargs):
        response = requests.Response()
        response.status_code = 200
        response._content = b'{"data": []}'
        response.headers["Ratelimit-Reset"] = "1700000000"
        response.encoding = "utf-8"
        return response

    monkeypatch.setattr(transport._session, "request", fake_request)

    response = await transport.request("GET", "https://api.twitch.tv/helix/streams")

    assert response.status_code == 200
    assert response.headers["ratelimit-reset"] == "1700000000"
    assert await response.json() == {"data": []}
    await transport.close()
