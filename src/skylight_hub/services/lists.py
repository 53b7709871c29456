"""List and list item operations."""

from dataclasses import dataclass

from skylight_hub.adapters import endpoints
from skylight_hub.adapters.endpoints import (
    CreateListItemRequest,
    CreateListRequest,
    UpdateListItemRequest,
    UpdateListRequest,
)
from skylight_hub.adapters.skylight_client import SkylightTransport
from skylight_hub.domain.lists import ListItem, ShoppingList
from skylight_hub.jsonapi.document import parse_document
from skylight_hub.mappers.common import map_primary
from skylight_hub.mappers.lists import (
    list_from_resource,
    list_item_from_resource,
    map_list_items,
    map_lists,
)


@dataclass
class ListsService:
    """Fetches and mutates lists and their items."""

    transport: SkylightTransport

    async def get_lists(self, frame_id: str) -> list[ShoppingList]:
        payload = await self.transport.request(endpoints.get_lists(frame_id))
        index = parse_document(payload)
        return map_lists(index.primary, index)

    async def create_list(
        self, frame_id: str, new_list: CreateListRequest
    ) -> ShoppingList:
        payload = await self.transport.request(
            endpoints.create_list(frame_id, new_list)
        )
        return map_primary(parse_document(payload), list_from_resource)

    async def update_list(
        self, frame_id: str, list_id: str, updates: UpdateListRequest
    ) -> ShoppingList:
        payload = await self.transport.request(
            endpoints.update_list(frame_id, list_id, updates)
        )
        return map_primary(parse_document(payload), list_from_resource)

    async def delete_list(self, frame_id: str, list_id: str) -> None:
        await self.transport.request_without_body(
            endpoints.delete_list(frame_id, list_id)
        )

    async def get_list_items(self, frame_id: str, list_id: str) -> list[ListItem]:
        payload = await self.transport.request(
            endpoints.get_list_items(frame_id, list_id)
        )
        index = parse_document(payload)
        return map_list_items(index.primary, index)

    async def add_item(
        self, frame_id: str, list_id: str, item: CreateListItemRequest
    ) -> ListItem:
        payload = await self.transport.request(
            endpoints.add_list_item(frame_id, list_id, item)
        )
        return map_primary(parse_document(payload), list_item_from_resource)

    async def update_item(
        self,
        frame_id: str,
        list_id: str,
        item_id: str,
        updates: UpdateListItemRequest,
    ) -> ListItem:
        payload = await self.transport.request(
            endpoints.update_list_item(frame_id, list_id, item_id, updates)
        )
        return map_primary(parse_document(payload), list_item_from_resource)

    async def delete_item(self, frame_id: str, list_id: str, item_id: str) -> None:
        await self.transport.request_without_body(
            endpoints.delete_list_item(frame_id, list_id, item_id)
        )
