"""Dependency container wiring for the client."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from skylight_hub.adapters.skylight_client import (
    HttpxSkylightTransport,
    SkylightTransport,
)
from skylight_hub.aggregators.calendar import CalendarAggregator
from skylight_hub.aggregators.chores import ChoresAggregator
from skylight_hub.aggregators.family import FamilyAggregator
from skylight_hub.aggregators.lists import ListDetailAggregator, ListsAggregator
from skylight_hub.config import Settings
from skylight_hub.domain.session import SessionContext
from skylight_hub.services.auth import AuthService
from skylight_hub.services.cache import Cache, InMemoryCache
from skylight_hub.services.calendar import CalendarService
from skylight_hub.services.chores import ChoresService
from skylight_hub.services.family import FamilyService
from skylight_hub.services.frames import FramesService
from skylight_hub.services.lists import ListsService
from skylight_hub.services.tasks import TasksService


@dataclass
class AppContainer:
    """Holds client-wide dependencies."""

    settings: Settings
    session: SessionContext
    transport: SkylightTransport
    cache: Cache
    auth_service: AuthService
    frames_service: FramesService
    calendar_service: CalendarService
    chores_service: ChoresService
    lists_service: ListsService
    family_service: FamilyService
    tasks_service: TasksService
    close_resources: Callable[[], Awaitable[None]]

    def calendar_aggregator(self) -> CalendarAggregator:
        return CalendarAggregator(
            self.session,
            self.calendar_service,
            self.cache,
            cache_ttl_seconds=self.settings.events_cache_ttl_seconds,
            timezone=self.settings.timezone,
        )

    def chores_aggregator(self) -> ChoresAggregator:
        return ChoresAggregator(self.session, self.chores_service)

    def lists_aggregator(self) -> ListsAggregator:
        return ListsAggregator(self.session, self.lists_service)

    def list_detail_aggregator(self, list_id: str) -> ListDetailAggregator:
        return ListDetailAggregator(self.session, self.lists_service, list_id)

    def family_aggregator(self) -> FamilyAggregator:
        return FamilyAggregator(self.session, self.family_service)


def build_container(
    settings: Settings | None = None, session: SessionContext | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_session = session or SessionContext(frame_id=resolved_settings.frame_id)
    transport = HttpxSkylightTransport.create(
        base_url=resolved_settings.base_url,
        session=resolved_session,
        timeout=resolved_settings.request_timeout_seconds,
    )
    frames_service = FramesService(transport)

    async def close_resources() -> None:
        await transport.close()

    return AppContainer(
        settings=resolved_settings,
        session=resolved_session,
        transport=transport,
        cache=InMemoryCache(),
        auth_service=AuthService(
            transport=transport,
            frames_service=frames_service,
            session=resolved_session,
        ),
        frames_service=frames_service,
        calendar_service=CalendarService(transport),
        chores_service=ChoresService(transport),
        lists_service=ListsService(transport),
        family_service=FamilyService(transport),
        tasks_service=TasksService(transport),
        close_resources=close_resources,
    )
