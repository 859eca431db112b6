"""Tests for SoundCloud profile normalization."""

import json

import pytest

from soundcloud_token.core.errors import InvalidProfileError
from soundcloud_token.core.profile import (
    Profile,
    ProfileName,
    normalize_profile,
    parse_profile,
    split_full_name,
)


def test_parses_minimal_profile():
    body = json.dumps(
        {"id": "3207", "full_name": "Johannes Wagener", "avatar_url": "http://example/img.jpg"}
    )

    profile = parse_profile(body)

    assert profile.provider == "soundcloud"
    assert profile.id == "3207"
    assert profile.display_name == "Johannes Wagener"
    assert profile.name == ProfileName(family_name="Wagener", given_name="Johannes")
    assert profile.emails == []
    assert [photo.value for photo in profile.photos] == ["http://example/img.jpg"]
    assert profile.raw_body == body


def test_missing_full_name_gives_empty_names():
    profile = normalize_profile("{}", {"id": 1})

    assert profile.display_name == ""
    assert profile.name.family_name == ""
    assert profile.name.given_name == ""


def test_missing_avatar_gives_single_empty_photo():
    profile = normalize_profile("{}", {"id": 1})

    assert len(profile.photos) == 1
    assert profile.photos[0].value == ""


def test_missing_id_and_username_are_none():
    profile = normalize_profile("{}", {})

    assert profile.id is None
    assert profile.username is None


@pytest.mark.parametrize(
    "full_name, given, family",
    [
        ("Johannes Wagener", "Johannes", "Wagener"),
        ("Johannes  van Wagener", "Johannes", "van Wagener"),
        ("Cher", "Cher", ""),
        ("Ana\tMaria", "Ana", "Maria"),
        ("", "", ""),
        (None, "", ""),
        ("   ", "", ""),
    ],
)
def test_split_full_name(full_name, given, family):
    assert split_full_name(full_name) == ProfileName(family_name=family, given_name=given)


def test_non_object_document_is_rejected():
    with pytest.raises(InvalidProfileError):
        parse_profile("[1, 2]")


def test_to_dict_renders_canonical_shape():
    body = json.dumps({"id": 3207, "username": "jwagener", "full_name": "Johannes Wagener"})
    profile = parse_profile(body)

    assert profile.to_dict() == {
        "provider": "soundcloud",
        "id": "3207",
        "username": "jwagener",
        "displayName": "Johannes Wagener",
        "name": {"familyName": "Wagener", "givenName": "Johannes"},
        "emails": [],
        "photos": [{"value": ""}],
        "_raw": body,
        "_json": {"id": 3207, "username": "jwagener", "full_name": "Johannes Wagener"},
    }


def test_profile_is_a_dataclass_value():
    body = json.dumps({"id": 1, "full_name": "A B"})

    assert parse_profile(body) == parse_profile(body)
    assert isinstance(parse_profile(body), Profile)
