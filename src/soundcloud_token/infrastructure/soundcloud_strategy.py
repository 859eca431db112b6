"""SoundCloud access-token authentication strategy implementation"""

import asyncio
import inspect
import json
import logging
from typing import Any, Callable, Optional

from ..config.log_setup import configure_logging
from ..config.settings import Settings
from ..config.strategy_config import StrategyConfig
from ..core.auth_strategy import AuthResult, IAuthStrategy
from ..core.credentials import IncomingCredentials, extract_credentials
from ..core.errors import InternalOAuthError, OAuth2TransportError
from ..core.profile import Profile, parse_profile
from .oauth2_client import OAuth2Client

logger = logging.getLogger(__name__)

VerifyCallback = Callable[..., Any]


class SoundCloudTokenStrategy(IAuthStrategy):
    """
    Authenticates requests carrying a previously obtained SoundCloud token.

    The client sends access_token (and optionally refresh_token) in the
    request body or query string. The token is exchanged for the user's
    SoundCloud profile, which is handed to the application's verify
    callback together with a completion callable:

        def verify(access_token, refresh_token, profile, done):
            user = users.find_by_soundcloud_id(profile.id)
            done(None, user)

    With pass_req_to_callback=True the request is passed first:
    verify(request, access_token, refresh_token, profile, done).

    done(error, user, info) resolves the attempt:
    - error set -> ERROR
    - falsy user -> FAIL with info as reason
    - otherwise -> SUCCESS with (user, info)
    """

    name = "soundcloud-token"

    def __init__(
        self,
        config: Optional[StrategyConfig] = None,
        verify: Optional[VerifyCallback] = None,
        oauth2: Optional[OAuth2Client] = None,
    ):
        """
        Initialize the strategy.

        Args:
            config: Strategy configuration (defaults apply when omitted)
            verify: Application verify callback
            oauth2: OAuth2 transport (built from config when omitted)

        Raises:
            TypeError: If verify is missing or not callable
        """
        if verify is None or not callable(verify):
            raise TypeError("SoundCloudTokenStrategy requires a verify callback")

        self.config = config or StrategyConfig()
        self._verify = verify
        self._profile_url = self.config.profile_url
        self._access_token_field = self.config.access_token_field
        self._refresh_token_field = self.config.refresh_token_field
        self._pass_req_to_callback = self.config.pass_req_to_callback
        self._token_from_headers = self.config.token_from_headers

        self._oauth2 = oauth2 or OAuth2Client(
            client_id=self.config.client_id,
            client_secret=self.config.client_secret,
            authorize_url=self.config.authorization_url,
            access_token_url=self.config.token_url,
            timeout=self.config.request_timeout,
        )
        # SoundCloud's API expects the token as a bearer Authorization header
        self._oauth2.use_authorization_header_for_get(True)

        logger.info(
            f"Initialized SoundCloudTokenStrategy with profile URL: {self._profile_url} "
            f"(pass request to verify: {self._pass_req_to_callback})"
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        verify: VerifyCallback,
        oauth2: Optional[OAuth2Client] = None,
    ) -> "SoundCloudTokenStrategy":
        """Create a strategy configured from environment settings."""
        configure_logging(settings.log_level)
        return cls(settings.to_strategy_config(), verify, oauth2=oauth2)

    @property
    def oauth2(self) -> OAuth2Client:
        return self._oauth2

    def extract_credentials(self, request: Any) -> IncomingCredentials:
        """Extract access/refresh tokens using the configured field names."""
        return extract_credentials(
            request,
            access_token_field=self._access_token_field,
            refresh_token_field=self._refresh_token_field,
            include_headers=self._token_from_headers,
        )

    async def authenticate(self, request: Any, options: Optional[dict] = None) -> AuthResult:
        """
        Authenticate a request carrying a SoundCloud access token.

        Steps:
        1. Extract access and refresh tokens
        2. Fetch the SoundCloud profile for the access token
        3. Run the verify callback and wait for its completion

        Args:
            request: Incoming request exposing body, query and headers
            options: Host options (unused)

        Returns:
            AuthResult with outcome SUCCESS, FAIL or ERROR
        """
        credentials = self.extract_credentials(request)

        if not credentials.access_token:
            logger.warning(f"Authentication failed: no {self._access_token_field} provided")
            return AuthResult.fail({"message": f"You should provide {self._access_token_field}"})

        try:
            profile = await self.user_profile(credentials.access_token)
        except Exception as e:
            logger.warning(f"Failed to load SoundCloud profile: {str(e)}")
            return AuthResult.errored(e)

        return await self._run_verify(request, credentials, profile)

    async def user_profile(self, access_token: str) -> Profile:
        """
        Fetch and normalize the SoundCloud profile of a token's owner.

        Args:
            access_token: SoundCloud OAuth2 access token

        Returns:
            Normalized Profile

        Raises:
            InternalOAuthError: If the profile request fails
            json.JSONDecodeError: If SoundCloud returns malformed JSON
        """
        try:
            body = await self._oauth2.get(self._profile_url, access_token)
        except OAuth2TransportError as e:
            raise self._wrap_transport_error(e) from e

        profile = parse_profile(body)
        logger.debug(f"Loaded SoundCloud profile for user {profile.id}")
        return profile

    def _wrap_transport_error(self, error: OAuth2TransportError) -> InternalOAuthError:
        """
        Turn a transport error into an InternalOAuthError.

        SoundCloud error bodies look like {"errors": [{"error_message": "..."}]};
        when the body has that shape its message and the status code are kept,
        otherwise a generic message wraps the transport error.
        """
        try:
            error_json = json.loads(error.data)
            message = error_json["errors"][0]["error_message"]
            if not isinstance(message, str):
                raise TypeError("error_message is not a string")
        except (TypeError, ValueError, KeyError, IndexError):
            return InternalOAuthError("Failed to fetch user profile", error)

        return InternalOAuthError(message, error, status_code=error.status_code)

    async def _run_verify(
        self,
        request: Any,
        credentials: IncomingCredentials,
        profile: Profile,
    ) -> AuthResult:
        loop = asyncio.get_running_loop()
        completion: asyncio.Future = loop.create_future()

        def verified(error: Any = None, user: Any = None, info: Any = None) -> None:
            if completion.done():
                logger.warning("Verify callback completed more than once, ignoring")
                return
            completion.set_result(self._resolve(error, user, info))

        if self._pass_req_to_callback:
            args = (request, credentials.access_token, credentials.refresh_token, profile, verified)
        else:
            args = (credentials.access_token, credentials.refresh_token, profile, verified)

        try:
            result = self._verify(*args)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            if completion.done():
                logger.error(f"Verify callback raised after completing: {str(e)}")
                return completion.result()
            logger.error(f"Verify callback raised: {str(e)}")
            return AuthResult.errored(e)

        return await completion

    def _resolve(self, error: Any, user: Any, info: Any) -> AuthResult:
        if error:
            logger.error(f"Verify callback reported an error: {str(error)}")
            return AuthResult.errored(error)
        if not user:
            logger.warning("Verify callback rejected the SoundCloud user")
            return AuthResult.fail(info)

        logger.info("Successfully authenticated request via soundcloud-token")
        return AuthResult.success(user, info)


# Alternate export name
Strategy = SoundCloudTokenStrategy
