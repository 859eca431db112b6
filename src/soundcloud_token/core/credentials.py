"""Access and refresh token extraction from incoming requests"""

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Tuple

from ..config.strategy_config import DEFAULT_ACCESS_TOKEN_FIELD, DEFAULT_REFRESH_TOKEN_FIELD

_EMPTY: Mapping[str, Any] = {}


@dataclass(frozen=True)
class IncomingRequest:
    """Framework-neutral view of the request sections tokens may live in"""

    body: Mapping[str, Any] = field(default_factory=dict)
    query: Mapping[str, Any] = field(default_factory=dict)
    headers: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class IncomingCredentials:
    access_token: Optional[str]
    refresh_token: Optional[str] = None


SectionAccessor = Callable[[Any], Optional[Mapping[str, Any]]]

# Lookup order matters: the first section holding a non-empty value wins.
REQUEST_SECTIONS: Tuple[Tuple[str, SectionAccessor], ...] = (
    ("body", lambda request: getattr(request, "body", None)),
    ("query", lambda request: getattr(request, "query", None)),
)
HEADER_SECTION: Tuple[str, SectionAccessor] = (
    "headers",
    lambda request: getattr(request, "headers", None),
)


def _sections(include_headers: bool) -> Tuple[Tuple[str, SectionAccessor], ...]:
    if include_headers:
        return REQUEST_SECTIONS + (HEADER_SECTION,)
    return REQUEST_SECTIONS


def lookup_field(request: Any, field_name: str, include_headers: bool = False) -> Optional[str]:
    """
    Find the first non-empty value of a field across request sections.

    Args:
        request: Object exposing body/query (and optionally headers) mappings
        field_name: Name of the field to look up
        include_headers: Also consult headers after body and query

    Returns:
        The value as a string, or None if no section carries it
    """
    for _, accessor in _sections(include_headers):
        section = accessor(request)
        if not isinstance(section, Mapping):
            section = _EMPTY
        value = section.get(field_name)
        if not value:
            continue
        return value if isinstance(value, str) else str(value)
    return None


def extract_credentials(
    request: Any,
    access_token_field: str = DEFAULT_ACCESS_TOKEN_FIELD,
    refresh_token_field: str = DEFAULT_REFRESH_TOKEN_FIELD,
    include_headers: bool = False,
) -> IncomingCredentials:
    """Extract access and refresh tokens from a request."""
    return IncomingCredentials(
        access_token=lookup_field(request, access_token_field, include_headers),
        refresh_token=lookup_field(request, refresh_token_field, include_headers),
    )
