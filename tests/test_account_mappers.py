"""Tests for frame, device, category and user mapping."""

import pytest

from skylight_hub.errors import DecodeError
from skylight_hub.jsonapi.document import parse_document
from skylight_hub.mappers.common import map_primary
from skylight_hub.mappers.devices import map_devices
from skylight_hub.mappers.family import map_categories, map_family_members
from skylight_hub.mappers.frames import frame_from_resource, map_frames
from skylight_hub.mappers.users import login_from_resource, user_from_resource


def test_frames_with_feature_bundle() -> None:
    document = {
        "data": [
            {
                "id": "f1",
                "type": "frame",
                "attributes": {
                    "name": "Home",
                    "timezone": "America/New_York",
                    "plus": True,
                    "feature_bundle": {
                        "bundle_name": "plus",
                        "chores": {"enabled": True},
                        "lists": {"enabled": False, "unsupported_hardware": True},
                        "calendar": "on",
                    },
                },
            },
            {"id": "f2", "type": "frame", "attributes": {"timezone": "UTC"}},
        ]
    }
    index = parse_document(document)

    frames = map_frames(index.primary, index)

    assert [frame.id for frame in frames] == ["f1"]
    frame = frames[0]
    assert frame.timezone == "America/New_York"
    assert frame.type == "frame"
    assert frame.is_plus is True
    assert frame.has_chores is True
    assert frame.has_lists is False
    assert frame.has_calendar is False
    assert frame.has_rewards is False
    assert frame.feature_bundle is not None
    assert frame.feature_bundle.bundle_name == "plus"
    assert frame.feature_bundle.lists is not None
    assert frame.feature_bundle.lists.unsupported_hardware is True


def test_frame_with_invalid_timezone_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("TZ", "Europe/Berlin")
    index = parse_document(
        {
            "data": {
                "id": "f1",
                "type": "frame",
                "attributes": {"name": "Home", "timezone": "Mars/Olympus"},
            }
        }
    )

    frame = map_primary(index, frame_from_resource)

    assert frame.timezone == "Europe/Berlin"
    assert frame.feature_bundle is None


def test_primary_frame_without_name_is_a_decode_error() -> None:
    index = parse_document({"data": {"id": "f1", "type": "frame", "attributes": {}}})

    with pytest.raises(DecodeError):
        map_primary(index, frame_from_resource)


def test_devices() -> None:
    document = {
        "data": [
            {
                "id": "d1",
                "type": "device",
                "attributes": {
                    "name": "Kitchen",
                    "timezone": "UTC",
                    "activated": True,
                    "brightness": 80,
                    "sleeps_at": "22:00",
                    "wakes_at": "07:00",
                    "currently_sleeping": False,
                    "sleep_mode_on": True,
                },
            },
            {"id": "d2", "type": "device", "attributes": {"activated": True}},
        ]
    }
    index = parse_document(document)

    devices = map_devices(index.primary, index)

    assert len(devices) == 1
    device = devices[0]
    assert device.is_online is True
    assert device.brightness == 80
    assert device.sleeps_at == "22:00"
    assert device.wakes_at == "07:00"
    assert device.currently_sleeping is False
    assert device.sleep_mode_on is True


def _categories_document():
    return {
        "data": [
            {
                "id": "c1",
                "type": "category",
                "attributes": {
                    "label": "Mom",
                    "color": "#FF0000",
                    "linkedToProfile": True,
                    "profilePicUrl": "https://img.test/mom.png",
                },
            },
            {
                "id": "c2",
                "type": "category",
                "attributes": {"label": "Errands", "linkedToProfile": False},
            },
            {"id": "c3", "type": "category", "attributes": {"linkedToProfile": True}},
            {"id": "c4", "type": "category", "attributes": {"label": "Kid"}},
        ]
    }


def test_family_members_are_profile_linked_and_labelled() -> None:
    index = parse_document(_categories_document())

    members = map_family_members(index.primary, index)

    assert [member.id for member in members] == ["c1"]
    member = members[0]
    assert member.name == "Mom"
    assert member.avatar_url == "https://img.test/mom.png"
    assert member.initials == "M"
    assert member.display_color == "#FF0000"


def test_categories_are_not_filtered() -> None:
    index = parse_document(_categories_document())

    categories = map_categories(index.primary, index)

    assert [category.id for category in categories] == ["c1", "c2", "c3", "c4"]
    assert categories[2].label is None
    assert categories[3].linked_to_profile is False


def test_current_user() -> None:
    index = parse_document(
        {
            "data": {
                "id": "u1",
                "type": "user",
                "attributes": {
                    "email": "sam@example.com",
                    "phone": "555-0100",
                    "subscription_status": "plus",
                    "profile": {"name": "Sam Smith"},
                },
            }
        }
    )

    user = map_primary(index, user_from_resource)

    assert user.name == "Sam Smith"
    assert user.display_name == "Sam Smith"
    assert user.initials == "SS"
    assert user.phone == "555-0100"
    assert user.subscription_status == "plus"


def test_user_without_email_is_rejected() -> None:
    index = parse_document({"data": {"id": "u1", "type": "user", "attributes": {}}})

    with pytest.raises(DecodeError):
        map_primary(index, user_from_resource)


def test_login_result() -> None:
    index = parse_document(
        {
            "data": {
                "id": "u1",
                "type": "authenticated_user",
                "attributes": {
                    "email": "sam@example.com",
                    "token": "secret",
                    "subscription_status": "free",
                },
            }
        }
    )

    result = map_primary(index, login_from_resource)

    assert result.user_id == "u1"
    assert result.token == "secret"
    assert result.email == "sam@example.com"
    assert result.subscription_status == "free"


def test_login_without_token_is_rejected() -> None:
    index = parse_document(
        {"data": {"id": "u1", "type": "user", "attributes": {"email": "a@b.c"}}}
    )

    with pytest.raises(DecodeError):
        map_primary(index, login_from_resource)
