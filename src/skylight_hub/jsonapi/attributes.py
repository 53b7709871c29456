"""Typed, per-attribute decoding of resource attributes.

Scalar accessors validate one attribute against a pydantic schema and
timestamps are read as ISO-8601. Every accessor returns None when the
attribute is absent or has the wrong shape, so mappers only ever see
optional values of the expected type.
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any, TypeVar

from pydantic import StrictBool, StrictInt, StrictStr, TypeAdapter, ValidationError

from skylight_hub.jsonapi.document import RawResource

T = TypeVar("T")

_STR = TypeAdapter(StrictStr)
_BOOL = TypeAdapter(StrictBool)
_INT = TypeAdapter(StrictInt)
_STR_LIST = TypeAdapter(list[StrictStr])

AttributeSource = RawResource | Mapping[str, object]


def _raw(source: AttributeSource, name: str) -> object:
    attributes = source.attributes if isinstance(source, RawResource) else source
    return attributes.get(name)


def _validate(adapter: TypeAdapter[Any], value: object) -> Any:
    if value is None:
        return None
    try:
        return adapter.validate_python(value)
    except ValidationError:
        return None


def attr_str(source: AttributeSource, name: str) -> str | None:
    """Return a string attribute."""
    return _validate(_STR, _raw(source, name))


def attr_bool(source: AttributeSource, name: str) -> bool | None:
    """Return a boolean attribute."""
    return _validate(_BOOL, _raw(source, name))


def attr_int(source: AttributeSource, name: str) -> int | None:
    """Return an integer attribute. Booleans are not integers here."""
    return _validate(_INT, _raw(source, name))


def attr_str_list(source: AttributeSource, name: str) -> list[str] | None:
    """Return a list-of-strings attribute."""
    return _validate(_STR_LIST, _raw(source, name))


def attr_mapping(source: AttributeSource, name: str) -> Mapping[str, object] | None:
    """Return a nested object attribute."""
    value = _raw(source, name)
    if isinstance(value, Mapping):
        return value
    return None


def attr_datetime(source: AttributeSource, name: str) -> datetime | None:
    """Return an ISO-8601 timestamp attribute as an aware datetime.

    Only strings are accepted. Timestamps without an offset are read as
    UTC and bare calendar dates as midnight UTC.
    """
    value = _raw(source, name)
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    # Bare digit runs are epoch-like, not calendar timestamps.
    if text.isdigit():
        return None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed


def first_present(*values: T | None) -> T | None:
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None
