"""Helpers shared by the resource mappers."""

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

from skylight_hub.errors import DecodeError
from skylight_hub.jsonapi.document import RawResource, ResourceIndex

_logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")

ResourceMapper = Callable[[RawResource, ResourceIndex], RecordT | None]


def map_collection(
    resources: Iterable[RawResource],
    index: ResourceIndex,
    mapper: "ResourceMapper[RecordT]",
) -> list[RecordT]:
    """Map each resource, dropping those the mapper rejects."""
    records: list[RecordT] = []
    for resource in resources:
        record = mapper(resource, index)
        if record is None:
            _logger.debug("Dropped %s %s while mapping", resource.type, resource.id)
            continue
        records.append(record)
    return records


def map_primary(index: ResourceIndex, mapper: "ResourceMapper[RecordT]") -> RecordT:
    """Map the single primary resource of a document."""
    if not index.primary:
        raise DecodeError("Document has no primary resource")
    resource = index.primary[0]
    record = mapper(resource, index)
    if record is None:
        raise DecodeError(
            f"Primary {resource.type} {resource.id} is missing required attributes"
        )
    return record
