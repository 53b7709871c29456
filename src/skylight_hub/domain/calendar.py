"""Calendar domain models."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

DEFAULT_EVENT_COLOR = "#007AFF"
DEFAULT_ATTENDEE_COLOR = "#8E8E93"


@dataclass(frozen=True)
class Attendee:
    """A category (usually a family member) assigned to an event."""

    id: str
    name: str
    color: str | None = None
    avatar_url: str | None = None

    @property
    def display_color(self) -> str:
        return self.color or DEFAULT_ATTENDEE_COLOR

    @property
    def initials(self) -> str:
        return self.name[:1].upper()


@dataclass(frozen=True)
class CalendarEvent:
    """A calendar event with its categories resolved."""

    id: str
    title: str
    start_date: datetime
    end_date: datetime
    description: str | None = None
    location: str | None = None
    is_all_day: bool = False
    is_recurring: bool = False
    category_id: str | None = None
    category_color: str | None = None
    attendees: tuple[Attendee, ...] = field(default_factory=tuple)

    @property
    def display_color(self) -> str:
        return self.category_color or DEFAULT_EVENT_COLOR

    @property
    def duration(self) -> timedelta:
        return self.end_date - self.start_date

    @property
    def is_multi_day(self) -> bool:
        return self.start_date.date() != self.end_date.date()
