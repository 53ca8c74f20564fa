"""The item shop."""

from __future__ import annotations

from typing import Iterator, Optional

from .items import Item, create_shop_items
from .stats import CombatStats
from .util import Reader, ask_yes_no


class Shop:
    """A list of item stacks that the player can buy from and sell to."""

    def __init__(self) -> None:
        self._items: list[Item] = []

    def initialize(self) -> None:
        """Replace the stock with the starting catalogue."""
        self._items = create_shop_items()

    def restock(self) -> None:
        self.initialize()

    def add_item(self, item: Optional[Item]) -> None:
        """Add a stack, or raise the quantity of a stack with the same name."""
        if item is None:
            return
        for existing in self._items:
            if existing.name == item.name:
                existing.increase_quantity()
                return
        self._items.append(item)

    def show_items(self) -> None:
        print("---------- 빡빡이 아저씨의 눈부신 상점 목록 ------------")
        for number, item in enumerate(self._items, start=1):
            print(f"{number}. {item.name} (가격: {item.price}, 수량: {item.quantity})")

    def get_item(self, index: int) -> Optional[Item]:
        """Return the item at a zero-based index, or None if out of range."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def purchase_item(
        self, index: int, stats: CombatStats, read: Reader = input
    ) -> bool:
        """Sell one of the item at ``index`` to the player after confirmation."""
        item = self.get_item(index)
        if item is None:
            return False
        if item.quantity <= 0:
            print("품절되었습니다!")
            return False
        if stats.gold < item.price:
            print(f"골드가 모자랍니다. 잔액: {stats.gold}")
            return False
        if not ask_yes_no("아이템을 구매하시겠습니까?(Y/N)\n>", read):
            return False

        stats.gold -= item.price
        item.decrease_quantity()
        print(f"{item.name}을(를) 구매하였습니다. 잔액: {stats.gold}")
        if item.is_sold_out():
            del self._items[index]
        return True

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)