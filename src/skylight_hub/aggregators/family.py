"""Family screen state."""

import asyncio

from skylight_hub.aggregators.base import BaseAggregator
from skylight_hub.domain.devices import Device
from skylight_hub.domain.family import FamilyMember
from skylight_hub.domain.session import SessionContext
from skylight_hub.services.family import FamilyService


class FamilyAggregator(BaseAggregator):
    """Holds the frame's family members and devices."""

    def __init__(self, session: SessionContext, service: FamilyService) -> None:
        super().__init__(session)
        self.service = service
        self.members: list[FamilyMember] = []
        self.devices: list[Device] = []

    async def load(self) -> None:
        """Fetch members and devices concurrently and commit them together.

        If either fetch fails the other is cancelled and its first error
        is reported.
        """
        frame_id = self.session.current_frame_id
        if frame_id is None:
            return

        async def fetch() -> tuple[list[FamilyMember], list[Device]]:
            try:
                async with asyncio.TaskGroup() as group:
                    members = group.create_task(
                        self.service.get_family_members(frame_id)
                    )
                    devices = group.create_task(self.service.get_devices(frame_id))
            except ExceptionGroup as failures:
                raise failures.exceptions[0] from failures
            return members.result(), devices.result()

        def commit(result: tuple[list[FamilyMember], list[Device]]) -> None:
            self.members, self.devices = result

        await self._run_load(fetch, commit)
