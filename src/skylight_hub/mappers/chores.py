"""Mapping of chore resources."""

from collections.abc import Iterable

from skylight_hub.domain.chores import Chore
from skylight_hub.jsonapi.attributes import (
    attr_bool,
    attr_datetime,
    attr_int,
    attr_str,
)
from skylight_hub.jsonapi.document import RawResource, ResourceIndex
from skylight_hub.jsonapi.relationships import relationship_identifiers, resolve_one
from skylight_hub.mappers.common import map_collection

COMPLETED_STATUS = "completed"
CATEGORY_RELATIONSHIP = "category"


def chore_from_resource(resource: RawResource, index: ResourceIndex) -> Chore:
    """Build a chore with its single category resolved."""
    identifiers = relationship_identifiers(resource, CATEGORY_RELATIONSHIP)
    category_id = identifiers[0].id if identifiers else None
    category = resolve_one(resource, CATEGORY_RELATIONSHIP, index)

    return Chore(
        id=resource.id,
        title=attr_str(resource, "summary") or "",
        category_id=category_id,
        category_color=attr_str(category, "color") if category else None,
        category_label=attr_str(category, "label") if category else None,
        points=attr_int(resource, "rewardPoints"),
        is_completed=attr_str(resource, "status") == COMPLETED_STATUS,
        completed_at=attr_datetime(resource, "completedOn"),
        due_date=attr_datetime(resource, "dueDate"),
        is_recurring=attr_bool(resource, "recurring") or False,
    )


def map_chores(resources: Iterable[RawResource], index: ResourceIndex) -> list[Chore]:
    """Map chore resources."""
    return map_collection(resources, index, chore_from_resource)
