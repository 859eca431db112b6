"""Authentication middleware hosting a token strategy in Starlette/FastAPI apps"""

import json
import logging
from typing import Any, Callable, Dict, Iterable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ..core.auth_strategy import AuthOutcome, AuthResult, IAuthStrategy
from ..core.credentials import IncomingRequest
from ..core.errors import InternalOAuthError, InvalidProfileError

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def build_incoming_request(request: Request) -> IncomingRequest:
    """
    Build the framework-neutral request view the strategy reads tokens from.

    The body is parsed as a JSON object or as form data depending on the
    content type. Any other body (or an unparseable one) counts as empty.

    Args:
        request: Incoming Starlette request

    Returns:
        IncomingRequest with body, query and headers mappings
    """
    body: Dict[str, Any] = {}
    content_type = request.headers.get("content-type", "")

    if content_type.startswith("application/json"):
        raw = await request.body()
        if raw:
            try:
                parsed = json.loads(raw)
            except ValueError:
                logger.debug(f"Ignoring malformed JSON body on {request.url.path}")
            else:
                if isinstance(parsed, dict):
                    body = parsed
    elif content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        body = {key: value for key, value in form.items() if isinstance(value, str)}

    return IncomingRequest(
        body=body,
        query=dict(request.query_params),
        headers=request.headers,
    )


class TokenAuthMiddleware(BaseHTTPMiddleware):
    """
    Authentication middleware running a token strategy per request.

    Flow:
    1. Skip public endpoints
    2. Extract body/query/headers into an IncomingRequest
    3. Run strategy.authenticate()
    4. Map the outcome:
       - FAIL -> 401 with the failure message
       - ERROR -> 502 for provider errors, 500 otherwise
       - SUCCESS -> request.state.user / request.state.auth_info, then forward
    """

    def __init__(
        self,
        app,
        strategy: IAuthStrategy,
        public_paths: Iterable[str] = ("/health",),
    ):
        """
        Initialize authentication middleware.

        Args:
            app: ASGI application
            strategy: Authentication strategy implementation (IAuthStrategy)
            public_paths: Path prefixes that skip authentication
        """
        super().__init__(app)
        self.strategy = strategy
        self.public_paths = tuple(public_paths)

        logger.info(
            f"Initialized TokenAuthMiddleware with strategy: {strategy.name}, "
            f"public paths: {list(self.public_paths)}"
        )

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request with token authentication.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            Response from downstream handler or an authentication error
        """
        if self._is_public_endpoint(request.url.path):
            logger.debug(f"Public endpoint accessed: {request.url.path}")
            return await call_next(request)

        incoming = await build_incoming_request(request)
        result = await self.strategy.authenticate(incoming)

        if result.outcome is AuthOutcome.FAIL:
            return self._fail_response(request, result)

        if result.outcome is AuthOutcome.ERROR:
            return self._error_response(request, result)

        request.state.user = result.user
        request.state.auth_info = result.info
        logger.info(
            f"Authenticated {request.method} {request.url.path} via {self.strategy.name}"
        )

        return await call_next(request)

    def _is_public_endpoint(self, path: str) -> bool:
        return any(path.startswith(prefix) for prefix in self.public_paths)

    def _fail_response(self, request: Request, result: AuthResult) -> JSONResponse:
        message = "Authentication failed"
        if isinstance(result.info, dict) and result.info.get("message"):
            message = str(result.info["message"])
        elif isinstance(result.info, str) and result.info:
            message = result.info

        logger.warning(f"Authentication failed for {request.url.path}: {message}")
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={
                "error": "authentication_failed",
                "message": message,
            },
        )

    def _error_response(self, request: Request, result: AuthResult) -> JSONResponse:
        error = result.error
        # Provider-side problems (transport failure, unparseable profile)
        if isinstance(error, (InternalOAuthError, InvalidProfileError, json.JSONDecodeError)):
            status_code = status.HTTP_502_BAD_GATEWAY
        else:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

        logger.error(
            f"Authentication error for {request.url.path}: {str(error)}"
        )
        return JSONResponse(
            status_code=status_code,
            content={
                "error": "authentication_error",
                "message": str(error),
            },
        )
