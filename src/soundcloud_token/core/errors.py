"""Error taxonomy for the SoundCloud token strategy"""

from typing import Any, Optional


class TokenAuthError(Exception):
    """Base class for errors raised by this package"""


class OAuth2TransportError(TokenAuthError):
    """
    Raised by OAuth2Client when a request does not succeed.

    Attributes:
        status_code: HTTP status of the response, or None on network failure
        data: Response body text, or None on network failure
    """

    def __init__(self, status_code: Optional[int] = None, data: Optional[str] = None):
        self.status_code = status_code
        self.data = data
        if status_code is None:
            message = "OAuth2 request failed"
        else:
            message = f"OAuth2 request failed with status {status_code}"
        super().__init__(message)


class InternalOAuthError(TokenAuthError):
    """
    Error while talking to the provider on behalf of the strategy.

    Attributes:
        message: Human readable description
        oauth_error: Underlying transport error, if any
        status_code: Provider status code, if known
    """

    def __init__(
        self,
        message: str,
        oauth_error: Any = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.oauth_error = oauth_error
        self.status_code = status_code

    def __str__(self) -> str:
        if isinstance(self.oauth_error, OAuth2TransportError):
            return f"{self.message} ({self.oauth_error})"
        return self.message


class InvalidProfileError(TokenAuthError, TypeError):
    """The provider returned valid JSON that is not a profile object"""
