"""Monsters the player fights and the factory that spawns them."""

from __future__ import annotations

from typing import Optional

from .items import Item, create_monster_item
from .util import random_in_range

BOSS_LEVEL = 10
LOOT_CHANCE_PERCENT = 30


class Monster:
    """An enemy whose health and attack scale with its level."""

    def __init__(self, name: str, level: int, is_boss: bool = False) -> None:
        self.name = name
        self.is_boss = is_boss
        self.hp = random_in_range(level * 20, level * 30)
        self.attack = random_in_range(level * 5, level * 10)
        self._loot: Optional[Item] = None
        if is_boss:
            self.name += " Lord"
            self.hp = int(self.hp * 1.5)
            self.attack = int(self.hp * 1.5)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, hp={self.hp}, "
            f"attack={self.attack}, is_boss={self.is_boss})"
        )

    def is_dead(self) -> bool:
        return self.hp <= 0

    def take_damage(self, amount: int) -> None:
        self.hp = max(self.hp - amount, 0)

    def set_loot(self) -> None:
        """Give the monster a random item with a 30% chance."""
        if random_in_range(1, 100) <= LOOT_CHANCE_PERCENT:
            self._loot = create_monster_item()

    def drop_loot(self) -> Optional[Item]:
        """Hand over the carried item, if any; the monster no longer holds it."""
        loot, self._loot = self._loot, None
        return loot


class Slime(Monster):
    def __init__(self, level: int, is_boss: bool = False) -> None:
        super().__init__("Slime", level, is_boss)


class Orc(Monster):
    def __init__(self, level: int, is_boss: bool = False) -> None:
        super().__init__("Orc", level, is_boss)


class Troll(Monster):
    def __init__(self, level: int, is_boss: bool = False) -> None:
        super().__init__("Troll", level, is_boss)


class Dragon(Monster):
    def __init__(self, level: int, is_boss: bool = False) -> None:
        super().__init__("Dragon", level, is_boss)


class Goblin(Monster):
    def __init__(self, level: int, is_boss: bool = False) -> None:
        super().__init__("Goblin", level, is_boss)


_KINDS: tuple[type[Monster], ...] = (Slime, Orc, Troll, Dragon, Goblin)


def create_monster(player_level: int) -> Monster:
    """Spawn a random monster of the player's level; a boss from level 10 on."""
    is_boss = player_level >= BOSS_LEVEL
    kind = _KINDS[random_in_range(1, len(_KINDS)) - 1]
    monster = kind(player_level, is_boss)
    if not is_boss:
        monster.set_loot()
    return monster