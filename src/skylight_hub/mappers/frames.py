"""Mapping of frame resources."""

from collections.abc import Iterable, Mapping

from skylight_hub.config import resolve_timezone
from skylight_hub.domain.frames import FeatureBundle, FeatureFlag, Frame
from skylight_hub.jsonapi.attributes import attr_bool, attr_mapping, attr_str
from skylight_hub.jsonapi.document import RawResource, ResourceIndex
from skylight_hub.mappers.common import map_collection


def frame_from_resource(resource: RawResource, index: ResourceIndex) -> Frame | None:
    """Build a frame, or None when it has no name."""
    name = attr_str(resource, "name")
    if name is None:
        return None
    return Frame(
        id=resource.id,
        name=name,
        type=resource.type,
        timezone=resolve_timezone(attr_str(resource, "timezone")),
        is_plus=attr_bool(resource, "plus") or False,
        feature_bundle=_feature_bundle(attr_mapping(resource, "feature_bundle")),
    )


def map_frames(resources: Iterable[RawResource], index: ResourceIndex) -> list[Frame]:
    return map_collection(resources, index, frame_from_resource)


def _feature_bundle(raw: Mapping[str, object] | None) -> FeatureBundle | None:
    if raw is None:
        return None
    return FeatureBundle(
        chores=_feature_flag(attr_mapping(raw, "chores")),
        lists=_feature_flag(attr_mapping(raw, "lists")),
        rewards=_feature_flag(attr_mapping(raw, "rewards")),
        calendar=_feature_flag(attr_mapping(raw, "calendar")),
        bundle_name=attr_str(raw, "bundle_name"),
    )


def _feature_flag(raw: Mapping[str, object] | None) -> FeatureFlag | None:
    if raw is None:
        return None
    return FeatureFlag(
        enabled=attr_bool(raw, "enabled") or False,
        unsupported_hardware=attr_bool(raw, "unsupported_hardware"),
    )
