"""Mapping of user and session resources."""

from skylight_hub.domain.users import LoginResult, User
from skylight_hub.jsonapi.attributes import attr_mapping, attr_str
from skylight_hub.jsonapi.document import RawResource, ResourceIndex


def user_from_resource(resource: RawResource, index: ResourceIndex) -> User | None:
    """Build the current user, or None without an email."""
    email = attr_str(resource, "email")
    if email is None:
        return None
    profile = attr_mapping(resource, "profile")
    return User(
        id=resource.id,
        email=email,
        name=attr_str(profile, "name") if profile is not None else None,
        phone=attr_str(resource, "phone"),
        subscription_status=attr_str(resource, "subscription_status"),
    )


def login_from_resource(
    resource: RawResource, index: ResourceIndex
) -> LoginResult | None:
    """Read the credentials issued by the sessions endpoint."""
    token = attr_str(resource, "token")
    if token is None:
        return None
    return LoginResult(
        user_id=resource.id,
        email=attr_str(resource, "email") or "",
        token=token,
        subscription_status=attr_str(resource, "subscription_status"),
    )
