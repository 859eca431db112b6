"""Minimal async OAuth2 client used to call protected provider resources"""

import logging
from typing import Dict, Optional

import httpx

from ..core.errors import OAuth2TransportError

logger = logging.getLogger(__name__)


class OAuth2Client:
    """
    OAuth2 transport for authenticated GET requests.

    Features:
    - Access token sent as Authorization header or query parameter
    - Redirects followed for GET requests
    - Non-2xx responses raised as OAuth2TransportError with the body attached
    - Optional shared httpx.AsyncClient (one is created per call otherwise)
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        authorize_url: str,
        access_token_url: str,
        timeout: float = 10.0,
        custom_headers: Optional[Dict[str, str]] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize OAuth2 client.

        Args:
            client_id: OAuth2 client identifier
            client_secret: OAuth2 client secret
            authorize_url: Provider authorization URL
            access_token_url: Provider token exchange URL
            timeout: Request timeout in seconds
            custom_headers: Extra headers sent on every request
            http_client: Shared AsyncClient (caller owns its lifecycle)
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.authorize_url = authorize_url
        self.access_token_url = access_token_url
        self.timeout = timeout
        self.custom_headers = dict(custom_headers or {})
        self.access_token_name = "access_token"
        self.auth_method = "Bearer"
        self._http_client = http_client
        self._use_authorization_header_for_get = False

    @property
    def uses_authorization_header_for_get(self) -> bool:
        return self._use_authorization_header_for_get

    def use_authorization_header_for_get(self, enabled: bool) -> None:
        """Send the access token as an Authorization header on GET requests."""
        self._use_authorization_header_for_get = enabled

    def set_auth_method(self, auth_method: str) -> None:
        """Set the Authorization scheme (default: Bearer)."""
        self.auth_method = auth_method

    def set_access_token_name(self, name: str) -> None:
        """Set the query parameter name used when not sending a header."""
        self.access_token_name = name

    def build_auth_header(self, access_token: str) -> str:
        return f"{self.auth_method} {access_token}"

    async def get(self, url: str, access_token: str) -> str:
        """
        Perform an authenticated GET request.

        Args:
            url: Protected resource URL
            access_token: OAuth2 access token

        Returns:
            Response body as text

        Raises:
            OAuth2TransportError: On network failure or non-2xx status
        """
        headers = dict(self.custom_headers)
        params: Dict[str, str] = {}
        if self._use_authorization_header_for_get:
            headers["Authorization"] = self.build_auth_header(access_token)
        else:
            params[self.access_token_name] = access_token

        try:
            if self._http_client is not None:
                response = await self._send(self._http_client, url, headers, params)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await self._send(client, url, headers, params)
        except httpx.HTTPError as e:
            logger.warning(f"OAuth2 GET {url} failed: {str(e)}")
            raise OAuth2TransportError() from e

        if not 200 <= response.status_code < 300:
            logger.warning(
                f"OAuth2 GET {url} returned status {response.status_code}"
            )
            raise OAuth2TransportError(
                status_code=response.status_code, data=response.text
            )

        return response.text

    async def _send(
        self,
        client: httpx.AsyncClient,
        url: str,
        headers: Dict[str, str],
        params: Dict[str, str],
    ) -> httpx.Response:
        return await client.get(
            url,
            headers=headers,
            params=params,
            timeout=self.timeout,
            follow_redirects=True,
        )
