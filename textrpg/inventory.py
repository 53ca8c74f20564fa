"""A character's item inventory."""

from __future__ import annotations

from typing import Iterator, Optional

from .items import Item


class Inventory:
    """Ordered item stacks; items with the same name share a stack."""

    def __init__(self) -> None:
        self._items: list[Item] = []

    def add_item(self, item: Optional[Item]) -> None:
        if item is None:
            return
        for existing in self._items:
            if existing.name == item.name:
                existing.increase_quantity()
                return
        self._items.append(item)

    def show_items(self) -> None:
        print("--------- 인벤토리 ----------")
        if not self._items:
            print("현재 인벤토리가 비어있습니다.")
            return
        for number, item in enumerate(self._items, start=1):
            print(f"{number}. {item.name} (수량: {item.quantity})")

    def get_item(self, index: int) -> Optional[Item]:
        """Return the item at a zero-based index, or None if out of range."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def remove_item(self, index: int) -> None:
        """Remove the item at a zero-based index; out of range is ignored."""
        if 0 <= index < len(self._items):
            del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)