"""Frame lookups."""

from dataclasses import dataclass

from skylight_hub.adapters import endpoints
from skylight_hub.adapters.skylight_client import SkylightTransport
from skylight_hub.domain.frames import Frame
from skylight_hub.jsonapi.document import parse_document
from skylight_hub.mappers.common import map_primary
from skylight_hub.mappers.frames import frame_from_resource, map_frames


@dataclass
class FramesService:
    """Reads the frames available to the signed-in user."""

    transport: SkylightTransport

    async def get_frames(self) -> list[Frame]:
        payload = await self.transport.request(endpoints.get_frames())
        index = parse_document(payload)
        return map_frames(index.primary, index)

    async def get_frame(self, frame_id: str) -> Frame:
        payload = await self.transport.request(endpoints.get_frame(frame_id))
        return map_primary(parse_document(payload), frame_from_resource)
