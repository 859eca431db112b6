"""Immutable per-instance configuration for the SoundCloud token strategy"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_AUTHORIZATION_URL = "https://soundcloud.com/connect"
DEFAULT_TOKEN_URL = "https://api.soundcloud.com/oauth2/token"
DEFAULT_PROFILE_URL = "https://api.soundcloud.com/me.json"
DEFAULT_ACCESS_TOKEN_FIELD = "access_token"
DEFAULT_REFRESH_TOKEN_FIELD = "refresh_token"

_DEFAULTS = {
    "authorization_url": DEFAULT_AUTHORIZATION_URL,
    "token_url": DEFAULT_TOKEN_URL,
    "profile_url": DEFAULT_PROFILE_URL,
    "access_token_field": DEFAULT_ACCESS_TOKEN_FIELD,
    "refresh_token_field": DEFAULT_REFRESH_TOKEN_FIELD,
}


class StrategyConfig(BaseModel):
    """
    Configuration for SoundCloudTokenStrategy.

    Accepts both snake_case names and the camelCase names used by
    passport-style strategies (clientID, profileURL, passReqToCallback...).
    Empty URL and field-name values fall back to the SoundCloud defaults.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    client_id: str = Field(default="", alias="clientID")
    client_secret: str = Field(default="", alias="clientSecret")
    authorization_url: str = Field(
        default=DEFAULT_AUTHORIZATION_URL, alias="authorizationURL"
    )
    token_url: str = Field(default=DEFAULT_TOKEN_URL, alias="tokenURL")
    profile_url: str = Field(default=DEFAULT_PROFILE_URL, alias="profileURL")
    access_token_field: str = Field(
        default=DEFAULT_ACCESS_TOKEN_FIELD, alias="accessTokenField"
    )
    refresh_token_field: str = Field(
        default=DEFAULT_REFRESH_TOKEN_FIELD, alias="refreshTokenField"
    )
    pass_req_to_callback: bool = Field(default=False, alias="passReqToCallback")
    token_from_headers: bool = Field(default=False, alias="tokenFromHeaders")
    request_timeout: float = Field(default=10.0, gt=0, alias="requestTimeout")

    @field_validator(
        "authorization_url",
        "token_url",
        "profile_url",
        "access_token_field",
        "refresh_token_field",
        mode="before",
    )
    @classmethod
    def _apply_default(cls, value: Optional[Any], info) -> Any:
        if value is None or value == "":
            return _DEFAULTS[info.field_name]
        return value
