"""Chores screen state."""

from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

from skylight_hub.adapters.endpoints import CreateChoreRequest, UpdateChoreRequest
from skylight_hub.aggregators.base import BaseAggregator, remove_by_id, replace_by_id
from skylight_hub.config import resolve_timezone
from skylight_hub.domain.chores import Chore
from skylight_hub.domain.session import SessionContext
from skylight_hub.services.chores import ChoresService

_FAR_FUTURE = datetime.max.replace(tzinfo=UTC)
_FAR_PAST = datetime.min.replace(tzinfo=UTC)


class ChoresAggregator(BaseAggregator):
    """Holds the frame's chores and the views derived from them."""

    def __init__(
        self,
        session: SessionContext,
        service: ChoresService,
        window_days: int = 7,
    ) -> None:
        super().__init__(session)
        self.service = service
        self.window_days = window_days
        self.chores: list[Chore] = []
        self.filter_assignee: str | None = None

    @property
    def timezone(self) -> ZoneInfo:
        frame = self.session.frame
        return ZoneInfo(resolve_timezone(frame.timezone if frame else None))

    def _visible(self) -> list[Chore]:
        if self.filter_assignee is None:
            return list(self.chores)
        return [c for c in self.chores if c.category_id == self.filter_assignee]

    @property
    def pending(self) -> list[Chore]:
        """Open chores by due date, undated chores last."""
        return sorted(
            (c for c in self._visible() if not c.is_completed),
            key=lambda chore: chore.due_date or _FAR_FUTURE,
        )

    @property
    def completed(self) -> list[Chore]:
        """Completed chores, most recently completed first."""
        return sorted(
            (c for c in self._visible() if c.is_completed),
            key=lambda chore: chore.completed_at or _FAR_PAST,
            reverse=True,
        )

    @property
    def overdue(self) -> list[Chore]:
        now = datetime.now(tz=UTC)
        return [chore for chore in self.pending if chore.is_overdue(now)]

    @property
    def due_today(self) -> list[Chore]:
        tz = self.timezone
        now = datetime.now(tz=tz)
        return [chore for chore in self.pending if chore.is_due_today(now, tz)]

    async def load(self, today: date | None = None) -> None:
        frame_id = self.session.current_frame_id
        if frame_id is None:
            return
        start = today or datetime.now(tz=self.timezone).date()
        end = start + timedelta(days=self.window_days)

        def commit(chores: list[Chore]) -> None:
            self.chores = chores

        await self._run_load(
            lambda: self.service.get_chores(frame_id, start, end, include_late=True),
            commit,
        )

    async def create_chore(  # noqa: PLR0913
        self,
        title: str,
        assignee_id: str | None = None,
        due_date: datetime | None = None,
        recurrence: str | None = None,
        points: int | None = None,
    ) -> Chore | None:
        frame_id = self.session.current_frame_id
        if frame_id is None:
            return None
        request = CreateChoreRequest(
            title=title,
            assignee_id=assignee_id,
            due_date=due_date,
            recurrence=recurrence,
            points=points,
        )
        return await self._run_mutation(
            lambda: self.service.create_chore(frame_id, request),
            lambda chore: self.chores.append(chore),
        )

    async def update_chore(self, chore_id: str, updates: UpdateChoreRequest) -> None:
        frame_id = self.session.current_frame_id
        if frame_id is None:
            return
        await self._run_mutation(
            lambda: self.service.update_chore(frame_id, chore_id, updates),
            self._replace,
        )

    async def mark_complete(self, chore_id: str) -> None:
        frame_id = self.session.current_frame_id
        if frame_id is None:
            return
        await self._run_mutation(
            lambda: self.service.complete_chore(frame_id, chore_id), self._replace
        )

    async def delete_chore(self, chore_id: str) -> None:
        frame_id = self.session.current_frame_id
        if frame_id is None:
            return

        def commit(_: None) -> None:
            self.chores = remove_by_id(self.chores, chore_id)

        await self._run_mutation(
            lambda: self.service.delete_chore(frame_id, chore_id), commit
        )

    def _replace(self, chore: Chore) -> None:
        replace_by_id(self.chores, chore)
