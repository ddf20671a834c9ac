"""In-memory menu store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from cooking_menu.models import MenuItem


@dataclass(frozen=True)
class MenuStore:
    """
    Ordered snapshot of menu items.

    Mutations never touch the snapshot they are called on; they return a new
    store so the owner can replace its state wholesale. Insertion order is
    preserved and removal never reorders the survivors.
    """

    items: tuple[MenuItem, ...] = ()

    def add(self, item: MenuItem) -> MenuStore:
        """Return a new store with ``item`` appended.

        Ids are not checked for uniqueness here; callers generate them with
        ``models.new_item_id``.
        """
        return MenuStore(self.items + (item,))

    def remove(self, item_id: str) -> MenuStore:
        """Return a new store without the items carrying ``item_id``."""
        return MenuStore(tuple(item for item in self.items if item.item_id != item_id))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self.items)
