"""Items and inventories that hold them."""

from __future__ import annotations

from dataclasses import dataclass, field

from .components import Component
from .objects import GameObject


@dataclass(eq=False)
class Item(GameObject):
    """Something a player can carry; its id identifies the item type, not the instance."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.id == other.id

    __hash__ = None  # type: ignore[assignment]


@dataclass(eq=False)
class InventoryComponent(Component):
    """A bounded list of items, usable by players, NPCs and containers."""

    items: list[Item] = field(default_factory=list)
    capacity: int = 0

    def get_item(self, item: Item) -> Item | None:
        """The stored item of the same type as item, or None."""
        return next((stored for stored in self.items if stored == item), None)

    def get_item_index(self, item: Item) -> int | None:
        """Position of the first stored item of the same type, or None."""
        return next(
            (position for position, stored in enumerate(self.items) if stored == item),
            None,
        )

    def _resolve_index(self, key: Item | int) -> int | None:
        if isinstance(key, Item):
            return self.get_item_index(key)
        if 0 <= key < len(self.items):
            return key
        return None

    def pop_item(self, key: Item | int) -> Item | None:
        """Remove an item, given by type or by position, and return it; None if nothing was removed."""
        position = self._resolve_index(key)
        if position is None:
            return None
        return self.items.pop(position)

    def remove_item(self, key: Item | int) -> bool:
        """Remove an item, given by type or by position; True if one was removed."""
        return self.pop_item(key) is not None

    def transfer_item(self, key: Item | int, other: InventoryComponent) -> bool:
        """Move an item into other, removing it here first; False if other is full or the item is absent."""
        if len(other.items) >= other.capacity:
            return False
        item = self.pop_item(key)
        if item is None:
            return False
        other.items.append(item)
        return True