"""Device domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Device:
    """A Skylight display registered to a frame."""

    id: str
    name: str
    timezone: str
    activated: bool = False
    brightness: int | None = None
    sleeps_at: str | None = None
    wakes_at: str | None = None
    currently_sleeping: bool | None = None
    sleep_mode_on: bool | None = None

    @property
    def is_online(self) -> bool:
        return self.activated
