"""Resolution of relationship pointers against a resource index."""

from skylight_hub.jsonapi.document import (
    RawResource,
    ResourceIdentifier,
    ResourceIndex,
)


def relationship_identifiers(
    resource: RawResource, relationship_name: str
) -> list[ResourceIdentifier]:
    """Return the identifiers a relationship points at, in serialized order."""
    ref = resource.relationships.get(relationship_name)
    if ref is None:
        return []
    if isinstance(ref, ResourceIdentifier):
        return [ref]
    return list(ref)


def resolve(
    resource: RawResource, relationship_name: str, index: ResourceIndex
) -> list[RawResource]:
    """Return the related resources present in the index.

    Identifiers missing from the index are skipped, never raised. The
    result keeps the order of the relationship linkage.
    """
    resolved: list[RawResource] = []
    for identifier in relationship_identifiers(resource, relationship_name):
        target = index.lookup(identifier)
        if target is not None:
            resolved.append(target)
    return resolved


def resolve_one(
    resource: RawResource, relationship_name: str, index: ResourceIndex
) -> RawResource | None:
    """Return the first resolvable related resource, if any."""
    related = resolve(resource, relationship_name, index)
    return related[0] if related else None


def relationship_count(resource: RawResource, relationship_name: str) -> int | None:
    """Return the linkage length of a relationship, or None when absent."""
    if relationship_name not in resource.relationships:
        return None
    return len(relationship_identifiers(resource, relationship_name))
