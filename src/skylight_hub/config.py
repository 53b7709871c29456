"""Client configuration."""

import os
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_TIMEZONE = "UTC"


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    base_url: str = "https://api.ourskylight.com"
    request_timeout_seconds: float = 30.0
    email: str | None = None
    password: str | None = None
    frame_id: str | None = None
    timezone: str | None = None
    events_cache_ttl_seconds: int = 3600
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="SKYLIGHT_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def local_timezone_name() -> str:
    """Return the IANA name of the local timezone, if it can be determined."""
    env_tz = os.getenv("TZ")
    if env_tz and _is_valid_timezone(env_tz):
        return env_tz
    local = datetime.now().astimezone().tzinfo
    key = getattr(local, "key", None)
    if isinstance(key, str) and _is_valid_timezone(key):
        return key
    return DEFAULT_TIMEZONE


def resolve_timezone(name: str | None) -> str:
    """Return a usable timezone name, falling back to the local zone."""
    if name and _is_valid_timezone(name.strip()):
        return name.strip()
    return local_timezone_name()


def _is_valid_timezone(name: str) -> bool:
    if not name:
        return False
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return False
    return True
