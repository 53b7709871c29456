"""Mapping of category resources into family members."""

from collections.abc import Iterable

from skylight_hub.domain.family import Category, FamilyMember
from skylight_hub.jsonapi.attributes import attr_bool, attr_str
from skylight_hub.jsonapi.document import RawResource, ResourceIndex
from skylight_hub.mappers.common import map_collection


def category_from_resource(resource: RawResource, index: ResourceIndex) -> Category:
    return Category(
        id=resource.id,
        label=attr_str(resource, "label"),
        color=attr_str(resource, "color"),
        avatar_url=attr_str(resource, "profilePicUrl"),
        linked_to_profile=attr_bool(resource, "linkedToProfile") or False,
    )


def family_member_from_resource(
    resource: RawResource, index: ResourceIndex
) -> FamilyMember | None:
    """Build a family member from a profile-linked, labelled category."""
    category = category_from_resource(resource, index)
    if not category.linked_to_profile or category.label is None:
        return None
    return FamilyMember(
        id=category.id,
        name=category.label,
        color=category.color,
        avatar_url=category.avatar_url,
        linked_to_profile=True,
    )


def map_categories(
    resources: Iterable[RawResource], index: ResourceIndex
) -> list[Category]:
    return map_collection(resources, index, category_from_resource)


def map_family_members(
    resources: Iterable[RawResource], index: ResourceIndex
) -> list[FamilyMember]:
    """Map categories, keeping only those linked to a profile."""
    return map_collection(resources, index, family_member_from_resource)
