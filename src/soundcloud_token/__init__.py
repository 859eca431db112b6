"""
SoundCloud access-token authentication strategy.

Authenticates requests that carry a previously obtained SoundCloud OAuth2
access token by fetching the token owner's profile and handing it to an
application verify callback.
"""

from .config import Settings, StrategyConfig, configure_logging, get_settings
from .core import (
    AuthOutcome,
    AuthResult,
    IAuthStrategy,
    IncomingRequest,
    InternalOAuthError,
    OAuth2TransportError,
    Profile,
)
from .infrastructure import OAuth2Client, SoundCloudTokenStrategy, Strategy

__version__ = "1.0.0"

__all__ = [
    "AuthOutcome",
    "AuthResult",
    "IAuthStrategy",
    "IncomingRequest",
    "InternalOAuthError",
    "OAuth2Client",
    "OAuth2TransportError",
    "Profile",
    "Settings",
    "SoundCloudTokenStrategy",
    "Strategy",
    "StrategyConfig",
    "configure_logging",
    "get_settings",
]
