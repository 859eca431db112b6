"""Shared fixtures for strategy tests."""

from pathlib import Path
from typing import Callable, List, Optional

import httpx
import pytest

from soundcloud_token.config import StrategyConfig
from soundcloud_token.infrastructure import OAuth2Client, SoundCloudTokenStrategy

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class StubOAuth2Client(OAuth2Client):
    """OAuth2 transport stub returning a canned body or raising a canned error."""

    def __init__(self, body: Optional[str] = None, error: Optional[Exception] = None):
        super().__init__(
            client_id="123",
            client_secret="123",
            authorize_url="https://soundcloud.com/connect",
            access_token_url="https://api.soundcloud.com/oauth2/token",
        )
        self.body = body
        self.error = error
        self.calls: List[tuple] = []

    async def get(self, url: str, access_token: str) -> str:
        self.calls.append((url, access_token))
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture
def profile_body() -> str:
    """Raw /me response body as returned by SoundCloud."""
    return (FIXTURES_DIR / "profile.json").read_text(encoding="utf-8")


@pytest.fixture
def stub_oauth2(profile_body) -> StubOAuth2Client:
    return StubOAuth2Client(body=profile_body)


@pytest.fixture
def make_strategy(stub_oauth2) -> Callable[..., SoundCloudTokenStrategy]:
    """Factory building a strategy wired to the stub transport."""

    def _make(verify: Callable, oauth2: Optional[OAuth2Client] = None, **config) -> SoundCloudTokenStrategy:
        options = {"clientID": "123", "clientSecret": "123"}
        options.update(config)
        return SoundCloudTokenStrategy(
            StrategyConfig(**options),
            verify,
            oauth2=oauth2 or stub_oauth2,
        )

    return _make



def mock_http_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    """AsyncClient backed by httpx.MockTransport."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))
