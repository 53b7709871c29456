"""Tests for request descriptors and payload serialization."""

from datetime import UTC, date, datetime

from skylight_hub.adapters import endpoints
from skylight_hub.adapters.endpoints import (
    CreateCalendarEventRequest,
    CreateChoreRequest,
    HttpMethod,
    UpdateListItemRequest,
)


def test_login_is_unauthenticated_post() -> None:
    descriptor = endpoints.login("sam@example.com", "pw")

    assert descriptor.method is HttpMethod.POST
    assert descriptor.path == "/api/sessions"
    assert descriptor.requires_auth is False
    assert descriptor.body == {"email": "sam@example.com", "password": "pw"}


def test_calendar_events_query() -> None:
    descriptor = endpoints.get_calendar_events(
        "frame-1", date(2024, 1, 1), date(2024, 1, 8), "America/Chicago"
    )

    assert descriptor.method is HttpMethod.GET
    assert descriptor.path == "/api/frames/frame-1/calendar_events"
    assert descriptor.query == {
        "date_min": "2024-01-01",
        "date_max": "2024-01-08",
        "timezone": "America/Chicago",
        "include": "categories,calendar_account,event_notification_setting",
    }


def test_chores_query() -> None:
    descriptor = endpoints.get_chores(
        "frame-1", date(2024, 1, 1), date(2024, 1, 8), include_late=True
    )

    assert descriptor.path == "/api/frames/frame-1/chores"
    assert descriptor.query == {
        "after": "2024-01-01",
        "before": "2024-01-08",
        "include_late": "true",
    }


def test_bodies_use_camel_case_and_skip_unset_fields() -> None:
    event = CreateCalendarEventRequest(
        title="Dentist", start_date=datetime(2024, 1, 1, 10, tzinfo=UTC)
    )
    chore = CreateChoreRequest(title="Trash", assignee_id="c1", points=3)

    event_descriptor = endpoints.create_calendar_event("frame-1", event)
    chore_descriptor = endpoints.create_chore("frame-1", chore)

    assert event_descriptor.body == {
        "title": "Dentist",
        "startDate": "2024-01-01T10:00:00Z",
        "allDay": False,
    }
    assert chore_descriptor.body == {
        "title": "Trash",
        "assigneeId": "c1",
        "points": 3,
    }


def test_mutation_paths_and_methods() -> None:
    update = endpoints.update_list_item(
        "frame-1", "list-1", "item-9", UpdateListItemRequest(checked=True)
    )
    delete = endpoints.delete_list_item("frame-1", "list-1", "item-9")

    assert update.method is HttpMethod.PUT
    assert update.path == "/api/frames/frame-1/lists/list-1/list_items/item-9"
    assert update.body == {"checked": True}
    assert delete.method is HttpMethod.DELETE
    assert delete.path == update.path
    assert delete.body is None
