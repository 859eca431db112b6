"""Authentication strategy interface expected by authentication hosts"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class AuthOutcome(Enum):
    """Terminal outcomes of a single authentication attempt."""
    SUCCESS = "success"  # Identity verified, user attached
    FAIL = "fail"        # Not authenticated, client can retry
    ERROR = "error"      # Transport or application fault


@dataclass(frozen=True)
class AuthResult:
    """Result handed back to the host for one authenticate() call"""

    outcome: AuthOutcome
    user: Any = None
    info: Any = None
    error: Optional[BaseException] = None

    @classmethod
    def success(cls, user: Any, info: Any = None) -> "AuthResult":
        return cls(AuthOutcome.SUCCESS, user=user, info=info)

    @classmethod
    def fail(cls, info: Any = None) -> "AuthResult":
        return cls(AuthOutcome.FAIL, info=info)

    @classmethod
    def errored(cls, error: BaseException) -> "AuthResult":
        return cls(AuthOutcome.ERROR, error=error)

    @property
    def is_success(self) -> bool:
        return self.outcome is AuthOutcome.SUCCESS

    @property
    def is_fail(self) -> bool:
        return self.outcome is AuthOutcome.FAIL

    @property
    def is_error(self) -> bool:
        return self.outcome is AuthOutcome.ERROR


class IAuthStrategy(ABC):
    """
    Interface for pluggable authentication strategies.

    Hosts construct a strategy once and call authenticate() once per
    incoming request. Implementations must:
    1. Extract credentials from the request
    2. Resolve them to an application user
    3. Resolve to exactly one AuthResult (success, fail or error)
    """

    name: str

    @abstractmethod
    async def authenticate(self, request: Any, options: Optional[dict] = None) -> AuthResult:
        """
        Authenticate an incoming request.

        Args:
            request: Incoming request exposing body, query and headers mappings
            options: Host-specific options (unused by most strategies)

        Returns:
            AuthResult describing the outcome
        """
        pass
