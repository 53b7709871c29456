"""Task box domain models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TaskPriority(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Task:
    """An item in a frame's task box."""

    id: str
    title: str
    description: str | None = None
    priority: str | None = None
    created_by: str | None = None
    created_by_name: str | None = None
    created_at: datetime | None = None
    status: str | None = None

    @property
    def priority_level(self) -> TaskPriority:
        """Parsed priority; unknown or missing values count as medium."""
        if self.priority is None:
            return TaskPriority.MEDIUM
        try:
            return TaskPriority(self.priority.lower())
        except ValueError:
            return TaskPriority.MEDIUM
