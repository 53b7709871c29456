"""Task box operations."""

from dataclasses import dataclass

from skylight_hub.adapters import endpoints
from skylight_hub.adapters.endpoints import CreateTaskBoxItemRequest
from skylight_hub.adapters.skylight_client import SkylightTransport
from skylight_hub.domain.tasks import Task
from skylight_hub.mappers.tasks import parse_task, parse_tasks


@dataclass
class TasksService:
    """Reads and adds items in a frame's task box."""

    transport: SkylightTransport

    async def get_task_box_items(self, frame_id: str) -> list[Task]:
        payload = await self.transport.request(endpoints.get_task_box_items(frame_id))
        return parse_tasks(payload)

    async def create_task_box_item(self, frame_id: str, title: str) -> Task:
        payload = await self.transport.request(
            endpoints.create_task_box_item(
                frame_id, CreateTaskBoxItemRequest(title=title)
            )
        )
        return parse_task(payload)
