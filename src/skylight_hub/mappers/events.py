"""Mapping of calendar event resources."""

from collections.abc import Iterable

from skylight_hub.domain.calendar import Attendee, CalendarEvent
from skylight_hub.jsonapi.attributes import attr_bool, attr_datetime, attr_str
from skylight_hub.jsonapi.document import RawResource, ResourceIndex
from skylight_hub.jsonapi.relationships import relationship_identifiers, resolve
from skylight_hub.mappers.common import map_collection

CATEGORIES_RELATIONSHIP = "categories"


def event_from_resource(
    resource: RawResource, index: ResourceIndex
) -> CalendarEvent | None:
    """Build an event, or None when its start or end cannot be read."""
    start_date = attr_datetime(resource, "startsAt")
    end_date = attr_datetime(resource, "endsAt")
    if start_date is None or end_date is None:
        return None

    # An unresolvable first id is still the primary category.
    identifiers = relationship_identifiers(resource, CATEGORIES_RELATIONSHIP)
    primary_id = identifiers[0].id if identifiers else None
    primary = index.lookup(identifiers[0]) if identifiers else None

    categories = resolve(resource, CATEGORIES_RELATIONSHIP, index)
    attendees = tuple(
        attendee for attendee in map(_attendee, categories) if attendee is not None
    )

    return CalendarEvent(
        id=resource.id,
        title=attr_str(resource, "summary") or "",
        description=attr_str(resource, "description"),
        start_date=start_date,
        end_date=end_date,
        is_all_day=attr_bool(resource, "allDay") or False,
        location=attr_str(resource, "location"),
        is_recurring=attr_bool(resource, "recurring") or False,
        category_id=primary_id,
        category_color=attr_str(primary, "color") if primary else None,
        attendees=attendees,
    )


def map_events(
    resources: Iterable[RawResource], index: ResourceIndex
) -> list[CalendarEvent]:
    """Map event resources, dropping events without start and end times."""
    return map_collection(resources, index, event_from_resource)


def _attendee(category: RawResource) -> Attendee | None:
    label = attr_str(category, "label")
    if label is None:
        return None
    # linkedToProfile is informational; every labelled category attends.
    return Attendee(
        id=category.id,
        name=label,
        color=attr_str(category, "color"),
        avatar_url=attr_str(category, "profilePicUrl"),
    )
