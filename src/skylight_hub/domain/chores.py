"""Chore domain models."""

from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo


@dataclass(frozen=True)
class Chore:
    """A chore with its category resolved."""

    id: str
    title: str
    is_completed: bool
    category_id: str | None = None
    category_color: str | None = None
    category_label: str | None = None
    points: int | None = None
    completed_at: datetime | None = None
    due_date: datetime | None = None
    is_recurring: bool = False

    def is_overdue(self, now: datetime | None = None) -> bool:
        """Return True when the due date has passed and the chore is open."""
        if self.is_completed or self.due_date is None:
            return False
        return self.due_date < (now or datetime.now(tz=UTC))

    def is_due_today(self, now: datetime | None = None, tz: tzinfo = UTC) -> bool:
        """Return True when the chore is open and due on the current day."""
        if self.is_completed or self.due_date is None:
            return False
        today = (now or datetime.now(tz=tz)).astimezone(tz).date()
        return self.due_date.astimezone(tz).date() == today
