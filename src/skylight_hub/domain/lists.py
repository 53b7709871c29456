"""Domain models for lists and list items."""

from dataclasses import dataclass

_LIST_KIND_NAMES = {
    "shopping": "Shopping List",
    "to_do": "To-Do List",
    "grocery": "Grocery List",
}

DEFAULT_LIST_COLOR = "#007AFF"


@dataclass(frozen=True)
class ShoppingList:
    """A household list (shopping, to-do, grocery, ...)."""

    id: str
    name: str
    kind: str | None = None
    color: str | None = None
    item_count: int | None = None

    @property
    def display_type(self) -> str:
        if self.kind is None:
            return "List"
        friendly = _LIST_KIND_NAMES.get(self.kind.lower())
        if friendly:
            return friendly
        return self.kind.replace("_", " ").title()

    @property
    def display_color(self) -> str:
        return self.color or DEFAULT_LIST_COLOR


@dataclass(frozen=True)
class ListItem:
    """A single entry on a list."""

    id: str
    title: str
    is_checked: bool = False
    quantity: int | None = None
    notes: str | None = None

    @property
    def display_quantity(self) -> str | None:
        if self.quantity is None or self.quantity <= 1:
            return None
        return f"x{self.quantity}"
