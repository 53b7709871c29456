"""Parsing of JSON:API documents into an index of typed resources."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from skylight_hub.errors import DecodeError

_logger = logging.getLogger(__name__)

ResourceKey = tuple[str, str]


@dataclass(frozen=True)
class ResourceIdentifier:
    """A `{type, id}` pointer to another resource."""

    type: str
    id: str

    @property
    def key(self) -> ResourceKey:
        return (self.type, self.id)


# A to-one link is a single identifier (or None when explicitly null), a
# to-many link is a tuple preserving the backend's serialization order.
RelationshipRef = ResourceIdentifier | tuple[ResourceIdentifier, ...] | None


@dataclass(frozen=True)
class RawResource:
    """One JSON:API resource object."""

    type: str
    id: str
    attributes: Mapping[str, object] = field(
        default_factory=lambda: MappingProxyType({})
    )
    relationships: Mapping[str, RelationshipRef] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def key(self) -> ResourceKey:
        return (self.type, self.id)


@dataclass(frozen=True)
class ResourceIndex:
    """Resources from a document's `data` and `included`, keyed by type and id.

    `primary` keeps the `data` resources in document order. `is_collection`
    records whether `data` was an array or a single object.
    """

    primary: tuple[RawResource, ...]
    resources: Mapping[ResourceKey, RawResource]
    is_collection: bool = True

    def get(self, resource_type: str, resource_id: str) -> RawResource | None:
        return self.resources.get((resource_type, resource_id))

    def lookup(self, identifier: ResourceIdentifier) -> RawResource | None:
        return self.resources.get(identifier.key)

    def __len__(self) -> int:
        return len(self.resources)

    def __contains__(self, key: object) -> bool:
        return key in self.resources


def parse_document(document: object) -> ResourceIndex:
    """Index every resource in a decoded JSON:API document.

    Primary data is strict: a missing or malformed `data` member, or any
    malformed resource inside it, raises `DecodeError`. Side-loaded
    resources in `included` are permissive and skipped when malformed.
    When the same type and id appear twice the later occurrence wins,
    with `included` processed after `data`.
    """
    if not isinstance(document, Mapping):
        raise DecodeError("JSON:API document must be an object")
    if "data" not in document:
        raise DecodeError("JSON:API document has no 'data' member")

    data = document["data"]
    if isinstance(data, list):
        is_collection = True
        raw_primary = data
    elif isinstance(data, Mapping):
        is_collection = False
        raw_primary = [data]
    else:
        raise DecodeError("JSON:API 'data' must be an object or an array")

    primary: list[RawResource] = []
    for position, item in enumerate(raw_primary):
        resource = parse_resource(item)
        if resource is None:
            raise DecodeError(f"Malformed resource object at data[{position}]")
        primary.append(resource)

    resources: dict[ResourceKey, RawResource] = {}
    for resource in primary:
        resources[resource.key] = resource

    included = document.get("included")
    if isinstance(included, list):
        for position, item in enumerate(included):
            resource = parse_resource(item)
            if resource is None:
                _logger.debug("Skipping malformed resource at included[%s]", position)
                continue
            resources[resource.key] = resource
    elif included is not None:
        _logger.debug("Ignoring non-array 'included' member")

    return ResourceIndex(
        primary=tuple(primary),
        resources=MappingProxyType(resources),
        is_collection=is_collection,
    )


def parse_resource(item: object) -> RawResource | None:
    """Parse one resource object, returning None when it is malformed."""
    if not isinstance(item, Mapping):
        return None
    resource_type = _identifier_part(item.get("type"))
    resource_id = _identifier_part(item.get("id"))
    if resource_type is None or resource_id is None:
        return None

    attributes = item.get("attributes")
    if attributes is None:
        attributes = {}
    if not isinstance(attributes, Mapping):
        return None

    relationships: dict[str, RelationshipRef] = {}
    raw_relationships = item.get("relationships")
    if isinstance(raw_relationships, Mapping):
        for name, raw_ref in raw_relationships.items():
            if not isinstance(raw_ref, Mapping) or "data" not in raw_ref:
                continue
            ref = _parse_linkage(raw_ref["data"])
            if ref is not None or raw_ref["data"] is None:
                relationships[str(name)] = ref

    return RawResource(
        type=resource_type,
        id=resource_id,
        attributes=MappingProxyType(dict(attributes)),
        relationships=MappingProxyType(relationships),
    )


def _parse_linkage(linkage: object) -> RelationshipRef:
    if isinstance(linkage, list):
        identifiers = (_parse_identifier(entry) for entry in linkage)
        return tuple(ident for ident in identifiers if ident is not None)
    return _parse_identifier(linkage)


def _parse_identifier(entry: object) -> ResourceIdentifier | None:
    if not isinstance(entry, Mapping):
        return None
    resource_type = _identifier_part(entry.get("type"))
    resource_id = _identifier_part(entry.get("id"))
    if resource_type is None or resource_id is None:
        return None
    return ResourceIdentifier(type=resource_type, id=resource_id)


def _identifier_part(value: object) -> str | None:
    # Some endpoints serialize numeric ids; JSON:API ids are strings.
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str) and value:
        return value
    return None
