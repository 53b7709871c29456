"""Mapping of list and list item resources."""

from collections.abc import Iterable

from skylight_hub.domain.lists import ListItem, ShoppingList
from skylight_hub.jsonapi.attributes import (
    attr_bool,
    attr_int,
    attr_str,
    first_present,
)
from skylight_hub.jsonapi.document import RawResource, ResourceIndex
from skylight_hub.jsonapi.relationships import relationship_count
from skylight_hub.mappers.common import map_collection

# The backend has shipped both spellings for this relationship.
_ITEMS_RELATIONSHIPS = ("list_items", "listItems")


def _title(resource: RawResource) -> str:
    # Some payloads use `label`, others `title`.
    return first_present(attr_str(resource, "label"), attr_str(resource, "title")) or ""


def list_from_resource(resource: RawResource, index: ResourceIndex) -> ShoppingList:
    """Build a list summary."""
    item_count = first_present(
        *(relationship_count(resource, name) for name in _ITEMS_RELATIONSHIPS)
    )
    return ShoppingList(
        id=resource.id,
        name=_title(resource),
        kind=attr_str(resource, "kind"),
        color=attr_str(resource, "color"),
        item_count=item_count,
    )


def list_item_from_resource(resource: RawResource, index: ResourceIndex) -> ListItem:
    """Build a list item."""
    return ListItem(
        id=resource.id,
        title=_title(resource),
        quantity=attr_int(resource, "quantity"),
        notes=attr_str(resource, "notes"),
        is_checked=attr_bool(resource, "checked") or False,
    )


def map_lists(
    resources: Iterable[RawResource], index: ResourceIndex
) -> list[ShoppingList]:
    return map_collection(resources, index, list_from_resource)


def map_list_items(
    resources: Iterable[RawResource], index: ResourceIndex
) -> list[ListItem]:
    return map_collection(resources, index, list_item_from_resource)
