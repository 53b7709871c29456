"""Mapping of device resources."""

from collections.abc import Iterable

from skylight_hub.config import resolve_timezone
from skylight_hub.domain.devices import Device
from skylight_hub.jsonapi.attributes import attr_bool, attr_int, attr_str
from skylight_hub.jsonapi.document import RawResource, ResourceIndex
from skylight_hub.mappers.common import map_collection


def device_from_resource(resource: RawResource, index: ResourceIndex) -> Device | None:
    """Build a device, or None when it has no name."""
    name = attr_str(resource, "name")
    if name is None:
        return None
    return Device(
        id=resource.id,
        name=name,
        timezone=resolve_timezone(attr_str(resource, "timezone")),
        activated=attr_bool(resource, "activated") or False,
        brightness=attr_int(resource, "brightness"),
        sleeps_at=attr_str(resource, "sleeps_at"),
        wakes_at=attr_str(resource, "wakes_at"),
        currently_sleeping=attr_bool(resource, "currently_sleeping"),
        sleep_mode_on=attr_bool(resource, "sleep_mode_on"),
    )


def map_devices(
    resources: Iterable[RawResource], index: ResourceIndex
) -> list[Device]:
    return map_collection(resources, index, device_from_resource)
