"""Family member domain models."""

from dataclasses import dataclass

from skylight_hub.domain.calendar import DEFAULT_ATTENDEE_COLOR


@dataclass(frozen=True)
class FamilyMember:
    """A category linked to a family member profile."""

    id: str
    name: str
    color: str | None = None
    avatar_url: str | None = None
    linked_to_profile: bool = True

    @property
    def display_color(self) -> str:
        return self.color or DEFAULT_ATTENDEE_COLOR

    @property
    def initials(self) -> str:
        return self.name[:1].upper()


@dataclass(frozen=True)
class Category:
    """Any frame category, organizational label or profile."""

    id: str
    label: str | None = None
    color: str | None = None
    avatar_url: str | None = None
    linked_to_profile: bool = False
