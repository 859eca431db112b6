"""Canonical user profile built from the SoundCloud /me response"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import InvalidProfileError

PROVIDER_NAME = "soundcloud"


@dataclass(frozen=True)
class ProfileName:
    """Family and given name split from the provider's full name"""

    family_name: str = ""
    given_name: str = ""


@dataclass(frozen=True)
class ProfilePhoto:
    value: str = ""


@dataclass
class Profile:
    """Normalized, provider-agnostic identity record"""

    id: Optional[str]
    username: Optional[str]
    display_name: str
    name: ProfileName
    raw_body: str
    raw_json: Dict[str, Any]
    provider: str = PROVIDER_NAME
    emails: List[Dict[str, str]] = field(default_factory=list)
    photos: List[ProfilePhoto] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """
        Render the profile in the canonical camelCase shape.

        Keys follow the conventions shared by OAuth strategies:
        provider, id, username, displayName, name.familyName,
        name.givenName, emails, photos[].value, _raw and _json.
        """
        return {
            "provider": self.provider,
            "id": self.id,
            "username": self.username,
            "displayName": self.display_name,
            "name": {
                "familyName": self.name.family_name,
                "givenName": self.name.given_name,
            },
            "emails": list(self.emails),
            "photos": [{"value": photo.value} for photo in self.photos],
            "_raw": self.raw_body,
            "_json": self.raw_json,
        }


def split_full_name(full_name: Optional[str]) -> ProfileName:
    """Split a full name on its first whitespace run into given/family parts."""
    if not full_name:
        return ProfileName()

    parts = full_name.split(None, 1)
    if not parts:
        return ProfileName()
    given_name = parts[0]
    family_name = parts[1] if len(parts) > 1 else ""
    return ProfileName(family_name=family_name, given_name=given_name)


def normalize_profile(body: str, data: Dict[str, Any]) -> Profile:
    """
    Build a Profile from an already parsed /me document.

    Args:
        body: Original response text
        data: Parsed JSON object

    Returns:
        Profile with exactly one photo entry and no emails

    Raises:
        InvalidProfileError: If the document is not a JSON object
    """
    if not isinstance(data, dict):
        raise InvalidProfileError(
            f"Expected a JSON object for the profile, got {type(data).__name__}"
        )

    raw_id = data.get("id")
    full_name = data.get("full_name") or ""

    return Profile(
        id=str(raw_id) if raw_id is not None else None,
        username=data.get("username"),
        display_name=full_name,
        name=split_full_name(full_name),
        raw_body=body,
        raw_json=data,
        photos=[ProfilePhoto(value=data.get("avatar_url") or "")],
    )


def parse_profile(body: str) -> Profile:
    """
    Parse and normalize a /me response body.

    Raises:
        json.JSONDecodeError: If the body is not valid JSON
    """
    return normalize_profile(body, json.loads(body))
