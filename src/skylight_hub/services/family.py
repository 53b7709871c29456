"""Family member and device lookups."""

from dataclasses import dataclass

from skylight_hub.adapters import endpoints
from skylight_hub.adapters.skylight_client import SkylightTransport
from skylight_hub.domain.devices import Device
from skylight_hub.domain.family import Category, FamilyMember
from skylight_hub.jsonapi.document import parse_document
from skylight_hub.mappers.devices import map_devices
from skylight_hub.mappers.family import map_categories, map_family_members


@dataclass
class FamilyService:
    """Reads the people and displays attached to a frame."""

    transport: SkylightTransport

    async def get_family_members(self, frame_id: str) -> list[FamilyMember]:
        """Return the frame's categories that are linked to a profile."""
        payload = await self.transport.request(
            endpoints.get_frame_categories(frame_id)
        )
        index = parse_document(payload)
        return map_family_members(index.primary, index)

    async def get_categories(self, frame_id: str) -> list[Category]:
        payload = await self.transport.request(
            endpoints.get_frame_categories(frame_id)
        )
        index = parse_document(payload)
        return map_categories(index.primary, index)

    async def get_devices(self, frame_id: str) -> list[Device]:
        payload = await self.transport.request(endpoints.get_devices(frame_id))
        index = parse_document(payload)
        return map_devices(index.primary, index)
