"""Lists and list detail screen state."""

from skylight_hub.adapters.endpoints import (
    CreateListItemRequest,
    CreateListRequest,
    UpdateListItemRequest,
)
from skylight_hub.aggregators.base import BaseAggregator, remove_by_id, replace_by_id
from skylight_hub.domain.lists import ListItem, ShoppingList
from skylight_hub.domain.session import SessionContext
from skylight_hub.services.lists import ListsService


class ListsAggregator(BaseAggregator):
    """Holds the frame's lists."""

    def __init__(self, session: SessionContext, service: ListsService) -> None:
        super().__init__(session)
        self.service = service
        self.lists: list[ShoppingList] = []

    async def load(self) -> None:
        frame_id = self.session.current_frame_id
        if frame_id is None:
            return

        def commit(lists: list[ShoppingList]) -> None:
            self.lists = lists

        await self._run_load(lambda: self.service.get_lists(frame_id), commit)

    async def create_list(
        self, name: str, list_type: str | None = None
    ) -> ShoppingList | None:
        frame_id = self.session.current_frame_id
        if frame_id is None:
            return None
        request = CreateListRequest(name=name, list_type=list_type)
        return await self._run_mutation(
            lambda: self.service.create_list(frame_id, request),
            lambda created: self.lists.append(created),
        )

    async def delete_list(self, list_id: str) -> None:
        frame_id = self.session.current_frame_id
        if frame_id is None:
            return

        def commit(_: None) -> None:
            self.lists = remove_by_id(self.lists, list_id)

        await self._run_mutation(
            lambda: self.service.delete_list(frame_id, list_id), commit
        )


class ListDetailAggregator(BaseAggregator):
    """Holds the items of one list, split into checked and unchecked views."""

    def __init__(
        self, session: SessionContext, service: ListsService, list_id: str
    ) -> None:
        super().__init__(session)
        self.service = service
        self.list_id = list_id
        self.items: list[ListItem] = []
        self.new_item_title = ""

    @property
    def unchecked_items(self) -> list[ListItem]:
        return [item for item in self.items if not item.is_checked]

    @property
    def checked_items(self) -> list[ListItem]:
        return [item for item in self.items if item.is_checked]

    async def load(self) -> None:
        frame_id = self.session.current_frame_id
        if frame_id is None:
            return

        def commit(items: list[ListItem]) -> None:
            self.items = items

        await self._run_load(
            lambda: self.service.get_list_items(frame_id, self.list_id), commit
        )

    async def add_item(self, title: str | None = None) -> ListItem | None:
        """Add an item titled `title`, or the pending `new_item_title`.

        Blank titles are ignored.
        """
        frame_id = self.session.current_frame_id
        if frame_id is None:
            return None
        cleaned = (self.new_item_title if title is None else title).strip()
        if not cleaned:
            return None
        request = CreateListItemRequest(title=cleaned)

        def commit(item: ListItem) -> None:
            self.items.append(item)
            self.new_item_title = ""

        return await self._run_mutation(
            lambda: self.service.add_item(frame_id, self.list_id, request), commit
        )

    async def toggle_item(self, item: ListItem) -> None:
        await self.update_item(
            item.id, UpdateListItemRequest(checked=not item.is_checked)
        )

    async def update_item(self, item_id: str, updates: UpdateListItemRequest) -> None:
        frame_id = self.session.current_frame_id
        if frame_id is None:
            return
        await self._run_mutation(
            lambda: self.service.update_item(
                frame_id, self.list_id, item_id, updates
            ),
            lambda updated: replace_by_id(self.items, updated),
        )

    async def delete_item(self, item_id: str) -> None:
        frame_id = self.session.current_frame_id
        if frame_id is None:
            return

        def commit(_: None) -> None:
            self.items = remove_by_id(self.items, item_id)

        await self._run_mutation(
            lambda: self.service.delete_item(frame_id, self.list_id, item_id), commit
        )
