"""Calendar screen state with a per-range event cache."""

import calendar
import logging
from datetime import UTC, date, datetime, timedelta
from enum import Enum
from zoneinfo import ZoneInfo

from skylight_hub.aggregators.base import BaseAggregator
from skylight_hub.config import resolve_timezone
from skylight_hub.domain.calendar import CalendarEvent
from skylight_hub.domain.session import SessionContext
from skylight_hub.errors import SkylightError
from skylight_hub.services.cache import Cache
from skylight_hub.services.calendar import CalendarService

_logger = logging.getLogger(__name__)

_CACHE_PREFIX = "events"


class DisplayMode(Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


def add_months(day: date, months: int) -> date:
    """Shift a date by whole months, clamping to the last day of the month."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def date_range(mode: DisplayMode, selected: date) -> tuple[date, date]:
    """Return `(start, end)` for a display mode; `end` is exclusive.

    Weeks start on Sunday.
    """
    if mode is DisplayMode.DAY:
        return selected, selected + timedelta(days=1)
    if mode is DisplayMode.WEEK:
        start = selected - timedelta(days=(selected.weekday() + 1) % 7)
        return start, start + timedelta(days=7)
    first = selected.replace(day=1)
    return first, add_months(first, 1)


class CalendarAggregator(BaseAggregator):
    """Holds the events for the selected date range."""

    def __init__(  # noqa: PLR0913
        self,
        session: SessionContext,
        service: CalendarService,
        cache: Cache,
        cache_ttl_seconds: int = 3600,
        timezone: str | None = None,
    ) -> None:
        super().__init__(session)
        self.service = service
        self.cache = cache
        self.cache_ttl_seconds = cache_ttl_seconds
        frame = session.frame
        self.timezone_name = resolve_timezone(
            timezone or (frame.timezone if frame else None)
        )
        self.events: list[CalendarEvent] = []
        self.selected_date = datetime.now(tz=self.tz).date()
        self.display_mode = DisplayMode.DAY

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone_name)

    def date_range(self) -> tuple[date, date]:
        return date_range(self.display_mode, self.selected_date)

    async def load(self, force_refresh: bool = False) -> None:
        """Show events for the selected range, from cache when possible."""
        frame_id = self.session.current_frame_id
        if frame_id is None:
            return
        start, end = self.date_range()
        key = self._cache_key(frame_id, start, end)

        if not force_refresh:
            cached = self.cache.get(key)
            if isinstance(cached, list):
                self._supersede()
                self.events = cached
                return
            contained = self._cached_containing(frame_id, start, end)
            if contained is not None:
                self._supersede()
                self.events = contained
                return

        def commit(events: list[CalendarEvent]) -> None:
            self.cache.set(key, events, ttl_seconds=self.cache_ttl_seconds)
            self.events = events

        await self._run_load(
            lambda: self.service.get_events(frame_id, start, end, self.timezone_name),
            commit,
        )

    def events_for_date(self, day: date) -> list[CalendarEvent]:
        tz = self.tz
        return sorted(
            (e for e in self.events if e.start_date.astimezone(tz).date() == day),
            key=lambda event: event.start_date,
        )

    async def change_date(self, day: date) -> None:
        self.selected_date = day
        await self.load()

    async def change_display_mode(self, mode: DisplayMode) -> None:
        self.display_mode = mode
        await self.load()

    async def go_to_today(self) -> None:
        await self.change_date(datetime.now(tz=self.tz).date())

    async def go_to_previous(self) -> None:
        await self.change_date(self._step(-1))

    async def go_to_next(self) -> None:
        await self.change_date(self._step(1))

    def clear_cache(self) -> None:
        self.cache.clear()

    async def fetch_event(self, event_id: str) -> CalendarEvent | None:
        """Find an event locally, else search one month back to two ahead."""
        for event in self.events:
            if event.id == event_id:
                return event
        frame_id = self.session.current_frame_id
        if frame_id is None:
            return None
        today = datetime.now(tz=self.tz).date()
        try:
            events = await self.service.get_events(
                frame_id,
                add_months(today, -1),
                add_months(today, 2),
                self.timezone_name,
            )
        except SkylightError as exc:
            _logger.warning("Failed to fetch event %s: %s", event_id, exc)
            return None
        return next((event for event in events if event.id == event_id), None)

    def upcoming_cached_events(
        self, now: datetime | None = None
    ) -> list[CalendarEvent]:
        """Return future events from every live cached range, one per id."""
        frame_id = self.session.current_frame_id
        if frame_id is None:
            return []
        current = now or datetime.now(tz=UTC)
        by_id: dict[str, CalendarEvent] = {}
        for _, _, events in self._cached_ranges(frame_id):
            for event in events:
                if event.start_date > current:
                    by_id[event.id] = event
        return sorted(by_id.values(), key=lambda event: event.start_date)

    def _step(self, direction: int) -> date:
        if self.display_mode is DisplayMode.DAY:
            return self.selected_date + timedelta(days=direction)
        if self.display_mode is DisplayMode.WEEK:
            return self.selected_date + timedelta(weeks=direction)
        return add_months(self.selected_date, direction)

    @staticmethod
    def _cache_key(frame_id: str, start: date, end: date) -> str:
        return f"{_CACHE_PREFIX}:{frame_id}:{start.isoformat()}:{end.isoformat()}"

    def _cached_ranges(
        self, frame_id: str
    ) -> list[tuple[date, date, list[CalendarEvent]]]:
        prefix = f"{_CACHE_PREFIX}:{frame_id}:"
        ranges: list[tuple[date, date, list[CalendarEvent]]] = []
        for key in self.cache.keys():
            if not key.startswith(prefix):
                continue
            start_text, _, end_text = key[len(prefix) :].partition(":")
            try:
                start = date.fromisoformat(start_text)
                end = date.fromisoformat(end_text)
            except ValueError:
                continue
            events = self.cache.get(key)
            if isinstance(events, list):
                ranges.append((start, end, events))
        return ranges

    def _cached_containing(
        self, frame_id: str, start: date, end: date
    ) -> list[CalendarEvent] | None:
        tz = self.tz
        for cached_start, cached_end, events in self._cached_ranges(frame_id):
            if cached_start <= start and cached_end >= end:
                return [
                    event
                    for event in events
                    if start <= event.start_date.astimezone(tz).date() < end
                ]
        return None
