"""Chore operations."""

from dataclasses import dataclass
from datetime import date

from skylight_hub.adapters import endpoints
from skylight_hub.adapters.endpoints import CreateChoreRequest, UpdateChoreRequest
from skylight_hub.adapters.skylight_client import SkylightTransport
from skylight_hub.domain.chores import Chore
from skylight_hub.jsonapi.document import parse_document
from skylight_hub.mappers.chores import chore_from_resource, map_chores
from skylight_hub.mappers.common import map_primary


@dataclass
class ChoresService:
    """Fetches and mutates chores for a frame."""

    transport: SkylightTransport

    async def get_chores(
        self, frame_id: str, after: date, before: date, include_late: bool = True
    ) -> list[Chore]:
        """Return chores scheduled between `after` and `before`."""
        payload = await self.transport.request(
            endpoints.get_chores(frame_id, after, before, include_late)
        )
        index = parse_document(payload)
        return map_chores(index.primary, index)

    async def create_chore(self, frame_id: str, chore: CreateChoreRequest) -> Chore:
        payload = await self.transport.request(endpoints.create_chore(frame_id, chore))
        return map_primary(parse_document(payload), chore_from_resource)

    async def update_chore(
        self, frame_id: str, chore_id: str, updates: UpdateChoreRequest
    ) -> Chore:
        payload = await self.transport.request(
            endpoints.update_chore(frame_id, chore_id, updates)
        )
        return map_primary(parse_document(payload), chore_from_resource)

    async def delete_chore(self, frame_id: str, chore_id: str) -> None:
        await self.transport.request_without_body(
            endpoints.delete_chore(frame_id, chore_id)
        )

    async def complete_chore(self, frame_id: str, chore_id: str) -> Chore:
        """Mark a chore as completed."""
        return await self.update_chore(
            frame_id, chore_id, UpdateChoreRequest(completed=True)
        )
