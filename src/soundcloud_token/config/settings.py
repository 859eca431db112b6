"""Strategy configuration from the environment using pydantic-settings"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .strategy_config import (
    DEFAULT_ACCESS_TOKEN_FIELD,
    DEFAULT_AUTHORIZATION_URL,
    DEFAULT_PROFILE_URL,
    DEFAULT_REFRESH_TOKEN_FIELD,
    DEFAULT_TOKEN_URL,
    StrategyConfig,
)


class Settings(BaseSettings):
    """SoundCloud token strategy configuration from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="SOUNDCLOUD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # SoundCloud application credentials
    client_id: str = Field(
        default="",
        description="Client ID of the SoundCloud application",
    )
    client_secret: str = Field(
        default="",
        description="Client secret of the SoundCloud application",
    )

    # Provider endpoints
    authorization_url: str = Field(
        default=DEFAULT_AUTHORIZATION_URL,
        description="SoundCloud authorization (connect) URL",
    )
    token_url: str = Field(
        default=DEFAULT_TOKEN_URL,
        description="SoundCloud token exchange URL",
    )
    profile_url: str = Field(
        default=DEFAULT_PROFILE_URL,
        description="SoundCloud profile URL queried with the access token",
    )

    # Request field names
    access_token_field: str = Field(
        default=DEFAULT_ACCESS_TOKEN_FIELD,
        description="Body/query field carrying the access token",
    )
    refresh_token_field: str = Field(
        default=DEFAULT_REFRESH_TOKEN_FIELD,
        description="Body/query field carrying the refresh token",
    )
    token_from_headers: bool = Field(
        default=False,
        description="Also look for tokens in request headers (legacy behaviour)",
    )

    pass_req_to_callback: bool = Field(
        default=False,
        description="Pass the incoming request as first argument to verify",
    )

    request_timeout: float = Field(
        default=10.0,
        description="Timeout in seconds for the profile request",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    def to_strategy_config(self) -> StrategyConfig:
        """Build the immutable strategy configuration from these settings."""
        return StrategyConfig(
            client_id=self.client_id,
            client_secret=self.client_secret,
            authorization_url=self.authorization_url,
            token_url=self.token_url,
            profile_url=self.profile_url,
            access_token_field=self.access_token_field,
            refresh_token_field=self.refresh_token_field,
            pass_req_to_callback=self.pass_req_to_callback,
            token_from_headers=self.token_from_headers,
            request_timeout=self.request_timeout,
        )


# Singleton settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create settings singleton"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
