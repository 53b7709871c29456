"""Tests for the chores aggregator."""

import asyncio
from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime, timedelta

from skylight_hub.adapters.endpoints import CreateChoreRequest, UpdateChoreRequest
from skylight_hub.aggregators.chores import ChoresAggregator
from skylight_hub.domain.chores import Chore
from skylight_hub.domain.session import SessionContext
from skylight_hub.errors import NetworkError, SkylightError


@dataclass
class FakeChoresService:
    chores: list[Chore] = field(default_factory=list)
    fail_with: SkylightError | None = None
    calls: list[tuple[object, ...]] = field(default_factory=list)

    def _check(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    async def get_chores(
        self, frame_id: str, after: date, before: date, include_late: bool = True
    ) -> list[Chore]:
        self.calls.append(("get", frame_id, after, before, include_late))
        self._check()
        return list(self.chores)

    async def create_chore(self, frame_id: str, chore: CreateChoreRequest) -> Chore:
        self.calls.append(("create", chore.title))
        self._check()
        return Chore(id="chore-new", title=chore.title, is_completed=False)

    async def update_chore(
        self, frame_id: str, chore_id: str, updates: UpdateChoreRequest
    ) -> Chore:
        self.calls.append(("update", chore_id))
        self._check()
        current = next(c for c in self.chores if c.id == chore_id)
        return replace(current, title=updates.title or current.title)

    async def complete_chore(self, frame_id: str, chore_id: str) -> Chore:
        self._check()
        current = next(c for c in self.chores if c.id == chore_id)
        return replace(current, is_completed=True, completed_at=datetime.now(tz=UTC))

    async def delete_chore(self, frame_id: str, chore_id: str) -> None:
        self.calls.append(("delete", chore_id))
        self._check()


def _chores() -> list[Chore]:
    now = datetime.now(tz=UTC)
    return [
        Chore(id="chore-0", title="Dishes", is_completed=False, category_id="c1"),
        Chore(id="chore-1", title="Trash", is_completed=False, category_id="c2"),
        Chore(
            id="chore-2",
            title="Laundry",
            is_completed=False,
            due_date=now - timedelta(days=1),
            category_id="c1",
        ),
        Chore(
            id="chore-3",
            title="Beds",
            is_completed=True,
            completed_at=now - timedelta(hours=3),
        ),
        Chore(
            id="chore-4",
            title="Sweep",
            is_completed=True,
            completed_at=now - timedelta(hours=1),
        ),
    ]


def _loaded(session: SessionContext) -> tuple[ChoresAggregator, FakeChoresService]:
    service = FakeChoresService(chores=_chores())
    aggregator = ChoresAggregator(session, service)  # type: ignore[arg-type]
    asyncio.run(aggregator.load(today=date(2024, 1, 1)))
    return aggregator, service


def test_load_requests_a_week_including_late(session: SessionContext) -> None:
    aggregator, service = _loaded(session)

    assert service.calls[0] == (
        "get",
        "frame-1",
        date(2024, 1, 1),
        date(2024, 1, 8),
        True,
    )
    assert len(aggregator.chores) == 5
    assert aggregator.is_loading is False


def test_update_replaces_only_the_updated_chore(session: SessionContext) -> None:
    aggregator, _ = _loaded(session)
    before = list(aggregator.chores)

    asyncio.run(
        aggregator.update_chore("chore-1", UpdateChoreRequest(title="Take out trash"))
    )

    matching = [chore for chore in aggregator.chores if chore.id == "chore-1"]
    assert len(matching) == 1
    assert matching[0].title == "Take out trash"
    assert aggregator.chores.index(matching[0]) == 1
    for position, chore in enumerate(aggregator.chores):
        if chore.id != "chore-1":
            assert chore == before[position]


def test_derived_views(session: SessionContext) -> None:
    aggregator, _ = _loaded(session)

    assert [c.id for c in aggregator.pending] == ["chore-2", "chore-0", "chore-1"]
    assert [c.id for c in aggregator.completed] == ["chore-4", "chore-3"]
    assert [c.id for c in aggregator.overdue] == ["chore-2"]

    aggregator.filter_assignee = "c1"
    assert [c.id for c in aggregator.pending] == ["chore-2", "chore-0"]
    assert aggregator.completed == []


def test_mark_complete_moves_chore(session: SessionContext) -> None:
    aggregator, _ = _loaded(session)

    asyncio.run(aggregator.mark_complete("chore-0"))

    assert "chore-0" not in [c.id for c in aggregator.pending]
    assert aggregator.completed[0].id == "chore-0"


def test_create_and_delete(session: SessionContext) -> None:
    aggregator, _ = _loaded(session)

    created = asyncio.run(aggregator.create_chore("Feed cat"))
    asyncio.run(aggregator.delete_chore("chore-3"))

    assert created is not None
    assert aggregator.chores[-1] == created
    assert "chore-3" not in [c.id for c in aggregator.chores]


def test_failed_mutation_keeps_state_and_records_error(
    session: SessionContext,
) -> None:
    aggregator, service = _loaded(session)
    before = list(aggregator.chores)
    service.fail_with = NetworkError("offline")

    asyncio.run(aggregator.delete_chore("chore-1"))

    assert aggregator.chores == before
    assert isinstance(aggregator.error, NetworkError)
    assert aggregator.show_error is True

    aggregator.dismiss_error()
    assert aggregator.error is None
    assert aggregator.show_error is False


def test_failed_load_keeps_previous_chores(session: SessionContext) -> None:
    aggregator, service = _loaded(session)
    service.fail_with = NetworkError("offline")

    asyncio.run(aggregator.load())

    assert len(aggregator.chores) == 5
    assert isinstance(aggregator.error, NetworkError)
    assert aggregator.is_loading is False


def test_no_frame_selected_is_a_no_op() -> None:
    service = FakeChoresService(chores=_chores())
    aggregator = ChoresAggregator(SessionContext(), service)  # type: ignore[arg-type]

    asyncio.run(aggregator.load())

    assert service.calls == []
    assert aggregator.chores == []
