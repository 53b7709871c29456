"""Shared state handling for screen-level aggregators."""

import logging
from collections.abc import Awaitable, Callable
from typing import Protocol, TypeVar

from skylight_hub.domain.session import SessionContext
from skylight_hub.errors import SkylightError

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class _Identified(Protocol):
    @property
    def id(self) -> str: ...


RecordT = TypeVar("RecordT", bound=_Identified)


class BaseAggregator:
    """Loading flag, last error, and stale-load protection for one screen.

    All state is mutated from a single event loop. Each load takes a new
    generation number and only commits its result if no newer load has
    started in the meantime, so a slow response cannot overwrite the
    result of a later request.
    """

    def __init__(self, session: SessionContext) -> None:
        self.session = session
        self.is_loading = False
        self.error: SkylightError | None = None
        self.show_error = False
        self._generation = 0

    def dismiss_error(self) -> None:
        self.error = None
        self.show_error = False

    def _supersede(self) -> None:
        """Invalidate any in-flight load without starting a new fetch."""
        self._generation += 1
        self.is_loading = False

    def _record_error(self, exc: SkylightError) -> None:
        _logger.warning("%s failed: %s", type(self).__name__, exc)
        self.error = exc
        self.show_error = True

    async def _run_load(
        self, fetch: Callable[[], Awaitable[T]], commit: Callable[[T], None]
    ) -> bool:
        """Fetch and commit unless superseded. Returns True when committed."""
        self._generation += 1
        generation = self._generation
        self.is_loading = True
        try:
            result = await fetch()
        except SkylightError as exc:
            if generation == self._generation:
                self._record_error(exc)
            return False
        finally:
            if generation == self._generation:
                self.is_loading = False
        if generation != self._generation:
            _logger.debug("Discarding stale %s load", type(self).__name__)
            return False
        commit(result)
        return True

    async def _run_mutation(
        self, action: Callable[[], Awaitable[T]], commit: Callable[[T], None]
    ) -> T | None:
        """Run a create/update/delete and apply its result to local state.

        Returns the result, or None when the backend call failed.
        """
        try:
            result = await action()
        except SkylightError as exc:
            self._record_error(exc)
            return None
        commit(result)
        return result


def replace_by_id(records: list[RecordT], updated: RecordT) -> bool:
    """Replace the record sharing `updated.id` in place. Returns True if found."""
    for position, record in enumerate(records):
        if record.id == updated.id:
            records[position] = updated
            return True
    return False


def remove_by_id(records: list[RecordT], record_id: str) -> list[RecordT]:
    return [record for record in records if record.id != record_id]
