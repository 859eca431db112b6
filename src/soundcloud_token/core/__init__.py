"""Core domain models and interfaces for token authentication"""

from .auth_strategy import AuthOutcome, AuthResult, IAuthStrategy
from .credentials import IncomingCredentials, IncomingRequest, extract_credentials
from .errors import InternalOAuthError, InvalidProfileError, OAuth2TransportError, TokenAuthError
from .profile import Profile, ProfileName, ProfilePhoto, normalize_profile, parse_profile

__all__ = [
    "AuthOutcome",
    "AuthResult",
    "IAuthStrategy",
    "IncomingCredentials",
    "IncomingRequest",
    "extract_credentials",
    "InternalOAuthError",
    "InvalidProfileError",
    "OAuth2TransportError",
    "TokenAuthError",
    "Profile",
    "ProfileName",
    "ProfilePhoto",
    "normalize_profile",
    "parse_profile",
]
