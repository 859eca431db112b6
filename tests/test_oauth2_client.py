"""Tests for the OAuth2 transport."""

import httpx
import pytest

from soundcloud_token.core.errors import OAuth2TransportError
from soundcloud_token.infrastructure import OAuth2Client

from conftest import mock_http_client

PROFILE_URL = "https://api.soundcloud.com/me.json"


def make_client(handler, **kwargs) -> OAuth2Client:
    return OAuth2Client(
        client_id="123",
        client_secret="123",
        authorize_url="https://soundcloud.com/connect",
        access_token_url="https://api.soundcloud.com/oauth2/token",
        http_client=mock_http_client(handler),
        **kwargs,
    )


@pytest.mark.asyncio
async def test_sends_bearer_header_when_enabled():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["authorization"] = request.headers.get("Authorization")
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, text='{"id": 1}')

    client = make_client(handler)
    client.use_authorization_header_for_get(True)

    body = await client.get(PROFILE_URL, "T")

    assert body == '{"id": 1}'
    assert seen["authorization"] == "Bearer T"
    assert seen["params"] == {}


@pytest.mark.asyncio
async def test_sends_query_parameter_by_default():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["authorization"] = request.headers.get("Authorization")
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, text="{}")

    client = make_client(handler)

    await client.get(PROFILE_URL, "T")

    assert seen["authorization"] is None
    assert seen["params"] == {"access_token": "T"}


@pytest.mark.asyncio
async def test_custom_auth_method_and_headers():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["authorization"] = request.headers.get("Authorization")
        seen["user-agent"] = request.headers.get("User-Agent")
        return httpx.Response(200, text="{}")

    client = make_client(handler, custom_headers={"User-Agent": "soundcloud-token"})
    client.use_authorization_header_for_get(True)
    client.set_auth_method("OAuth")

    await client.get(PROFILE_URL, "T")

    assert seen["authorization"] == "OAuth T"
    assert seen["user-agent"] == "soundcloud-token"


@pytest.mark.asyncio
async def test_non_2xx_raises_with_status_and_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, text='{"errors": [{"error_message": "401 - Unauthorized"}]}')

    client = make_client(handler)

    with pytest.raises(OAuth2TransportError) as exc_info:
        await client.get(PROFILE_URL, "T")

    assert exc_info.value.status_code == 401
    assert "401 - Unauthorized" in exc_info.value.data


@pytest.mark.asyncio
async def test_network_error_raises_without_status():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)

    with pytest.raises(OAuth2TransportError) as exc_info:
        await client.get(PROFILE_URL, "T")

    assert exc_info.value.status_code is None
    assert exc_info.value.data is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_follows_redirects():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/me.json":
            return httpx.Response(302, headers={"Location": "https://api.soundcloud.com/me"})
        return httpx.Response(200, text='{"id": 7}')

    client = make_client(handler)
    client.use_authorization_header_for_get(True)

    assert await client.get(PROFILE_URL, "T") == '{"id": 7}'


@pytest.mark.asyncio
async def test_custom_access_token_name_for_query_parameter():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, text="{}")

    client = make_client(handler)
    client.set_access_token_name("oauth_token")

    await client.get(PROFILE_URL, "T")

    assert seen["params"] == {"oauth_token": "T"}
