"""Request descriptors for every Skylight backend endpoint."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

EVENT_INCLUDES = "categories,calendar_account,event_notification_setting"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@dataclass(frozen=True)
class RequestDescriptor:
    """Everything the transport needs to issue one request."""

    method: HttpMethod
    path: str
    query: dict[str, str] = field(default_factory=dict)
    body: dict[str, object] | None = None
    requires_auth: bool = True


class RequestBody(BaseModel):
    """Base for JSON request payloads, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class LoginRequest(RequestBody):
    email: str
    password: str


class CreateCalendarEventRequest(RequestBody):
    title: str
    start_date: datetime
    end_date: datetime | None = None
    all_day: bool = False
    location: str | None = None
    notes: str | None = None


class UpdateCalendarEventRequest(RequestBody):
    title: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    all_day: bool | None = None
    location: str | None = None
    notes: str | None = None


class CreateChoreRequest(RequestBody):
    title: str
    assignee_id: str | None = None
    due_date: datetime | None = None
    recurrence: str | None = None
    points: int | None = None


class UpdateChoreRequest(RequestBody):
    title: str | None = None
    assignee_id: str | None = None
    due_date: datetime | None = None
    recurrence: str | None = None
    points: int | None = None
    completed: bool | None = None


class CreateListRequest(RequestBody):
    name: str
    list_type: str | None = None


class UpdateListRequest(RequestBody):
    name: str | None = None


class CreateListItemRequest(RequestBody):
    title: str
    quantity: int | None = None
    notes: str | None = None


class UpdateListItemRequest(RequestBody):
    title: str | None = None
    quantity: int | None = None
    notes: str | None = None
    checked: bool | None = None


class CreateTaskBoxItemRequest(RequestBody):
    title: str


def _day(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def _frame(frame_id: str) -> str:
    return f"/api/frames/{frame_id}"


# Authentication


def login(email: str, password: str) -> RequestDescriptor:
    return RequestDescriptor(
        HttpMethod.POST,
        "/api/sessions",
        body=LoginRequest(email=email, password=password).to_payload(),
        requires_auth=False,
    )


def get_current_user() -> RequestDescriptor:
    return RequestDescriptor(HttpMethod.GET, "/api/user")


# Frames


def get_frames() -> RequestDescriptor:
    return RequestDescriptor(HttpMethod.GET, "/api/frames")


def get_frame(frame_id: str) -> RequestDescriptor:
    return RequestDescriptor(HttpMethod.GET, _frame(frame_id))


def get_frame_categories(frame_id: str) -> RequestDescriptor:
    return RequestDescriptor(HttpMethod.GET, f"{_frame(frame_id)}/categories")


def get_devices(frame_id: str) -> RequestDescriptor:
    return RequestDescriptor(HttpMethod.GET, f"{_frame(frame_id)}/devices")


# Calendar


def get_calendar_events(
    frame_id: str, date_min: date, date_max: date, timezone: str
) -> RequestDescriptor:
    """List events between `date_min` (inclusive) and `date_max` (exclusive)."""
    return RequestDescriptor(
        HttpMethod.GET,
        f"{_frame(frame_id)}/calendar_events",
        query={
            "date_min": _day(date_min),
            "date_max": _day(date_max),
            "timezone": timezone,
            "include": EVENT_INCLUDES,
        },
    )


def create_calendar_event(
    frame_id: str, event: CreateCalendarEventRequest
) -> RequestDescriptor:
    return RequestDescriptor(
        HttpMethod.POST,
        f"{_frame(frame_id)}/calendar_events",
        body=event.to_payload(),
    )


def update_calendar_event(
    frame_id: str, event_id: str, event: UpdateCalendarEventRequest
) -> RequestDescriptor:
    return RequestDescriptor(
        HttpMethod.PUT,
        f"{_frame(frame_id)}/calendar_events/{event_id}",
        body=event.to_payload(),
    )


def delete_calendar_event(frame_id: str, event_id: str) -> RequestDescriptor:
    return RequestDescriptor(
        HttpMethod.DELETE, f"{_frame(frame_id)}/calendar_events/{event_id}"
    )


# Chores


def get_chores(
    frame_id: str, after: date, before: date, include_late: bool
) -> RequestDescriptor:
    return RequestDescriptor(
        HttpMethod.GET,
        f"{_frame(frame_id)}/chores",
        query={
            "after": _day(after),
            "before": _day(before),
            "include_late": "true" if include_late else "false",
        },
    )


def create_chore(frame_id: str, chore: CreateChoreRequest) -> RequestDescriptor:
    return RequestDescriptor(
        HttpMethod.POST, f"{_frame(frame_id)}/chores", body=chore.to_payload()
    )


def update_chore(
    frame_id: str, chore_id: str, updates: UpdateChoreRequest
) -> RequestDescriptor:
    return RequestDescriptor(
        HttpMethod.PUT,
        f"{_frame(frame_id)}/chores/{chore_id}",
        body=updates.to_payload(),
    )


def delete_chore(frame_id: str, chore_id: str) -> RequestDescriptor:
    return RequestDescriptor(HttpMethod.DELETE, f"{_frame(frame_id)}/chores/{chore_id}")


# Lists


def get_lists(frame_id: str) -> RequestDescriptor:
    return RequestDescriptor(HttpMethod.GET, f"{_frame(frame_id)}/lists")


def create_list(frame_id: str, new_list: CreateListRequest) -> RequestDescriptor:
    return RequestDescriptor(
        HttpMethod.POST, f"{_frame(frame_id)}/lists", body=new_list.to_payload()
    )


def update_list(
    frame_id: str, list_id: str, updates: UpdateListRequest
) -> RequestDescriptor:
    return RequestDescriptor(
        HttpMethod.PUT,
        f"{_frame(frame_id)}/lists/{list_id}",
        body=updates.to_payload(),
    )


def delete_list(frame_id: str, list_id: str) -> RequestDescriptor:
    return RequestDescriptor(HttpMethod.DELETE, f"{_frame(frame_id)}/lists/{list_id}")


def get_list_items(frame_id: str, list_id: str) -> RequestDescriptor:
    return RequestDescriptor(
        HttpMethod.GET, f"{_frame(frame_id)}/lists/{list_id}/list_items"
    )


def add_list_item(
    frame_id: str, list_id: str, item: CreateListItemRequest
) -> RequestDescriptor:
    return RequestDescriptor(
        HttpMethod.POST,
        f"{_frame(frame_id)}/lists/{list_id}/list_items",
        body=item.to_payload(),
    )


def update_list_item(
    frame_id: str, list_id: str, item_id: str, updates: UpdateListItemRequest
) -> RequestDescriptor:
    return RequestDescriptor(
        HttpMethod.PUT,
        f"{_frame(frame_id)}/lists/{list_id}/list_items/{item_id}",
        body=updates.to_payload(),
    )


def delete_list_item(frame_id: str, list_id: str, item_id: str) -> RequestDescriptor:
    return RequestDescriptor(
        HttpMethod.DELETE,
        f"{_frame(frame_id)}/lists/{list_id}/list_items/{item_id}",
    )


# Task box


def get_task_box_items(frame_id: str) -> RequestDescriptor:
    return RequestDescriptor(HttpMethod.GET, f"{_frame(frame_id)}/task_box_items")


def create_task_box_item(
    frame_id: str, item: CreateTaskBoxItemRequest
) -> RequestDescriptor:
    return RequestDescriptor(
        HttpMethod.POST,
        f"{_frame(frame_id)}/task_box_items",
        body=item.to_payload(),
    )
