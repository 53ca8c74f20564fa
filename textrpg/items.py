"""Usable items and the catalogues that produce them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .effects import (
    AtkBoostEffect,
    CurseEffect,
    Damage5Effect,
    DodgeEffect,
    DoubleAtkEffect,
    Effect,
    HealEffect,
    HpBoostEffect,
)
from .util import Reader, ask_yes_no, random_in_range

if TYPE_CHECKING:
    from .character import Character


@dataclass
class Item:
    """A stack of identical items sharing one effect."""

    name: str
    price: int
    quantity: int
    effect: Effect

    def use(self, target: "Character", read: Reader = input) -> bool:
        """Ask for confirmation and apply the effect; return whether it was used."""
        if self.quantity <= 0:
            print("아이템을 모두 사용하셨습니다")
            return False
        if not ask_yes_no("아이템을 사용하시겠습니까?(Y/N)\n>", read):
            return False
        self.effect.apply(target)
        self.quantity -= 1
        return True

    def decrease_quantity(self) -> None:
        if self.quantity > 0:
            self.quantity -= 1

    def increase_quantity(self) -> None:
        if self.quantity > 0:
            self.quantity += 1

    def is_sold_out(self) -> bool:
        return self.quantity <= 0

    def clone(self) -> "Item":
        """Return a single copy of this item with its own effect."""
        return Item(self.name, self.price, 1, self.effect.clone())


# name, price, shop stock, effect
_CATALOGUE: tuple[tuple[str, int, int, Effect], ...] = (
    ("회복 포션", 10, 10, HealEffect(50)),
    ("공격력 강화", 40, 3, AtkBoostEffect(10)),
    ("체력 강화", 30, 3, HpBoostEffect(50)),
    ("저주 물약", 50, 3, CurseEffect()),
    ("장막", 70, 2, Damage5Effect()),
    ("두번 때리기", 80, 2, DoubleAtkEffect()),
    ("회피 주사위", 60, 5, DodgeEffect()),
)


def create_shop_items() -> list[Item]:
    """Return the shop's starting stock."""
    return [
        Item(name, price, stock, effect.clone())
        for name, price, stock, effect in _CATALOGUE
    ]


def create_monster_item() -> Item:
    """Return one randomly chosen item as monster loot."""
    name, price, _, effect = _CATALOGUE[random_in_range(1, len(_CATALOGUE)) - 1]
    return Item(name, price, 1, effect.clone())