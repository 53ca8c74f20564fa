"""The player character."""

from __future__ import annotations

from .inventory import Inventory
from .stats import CombatStats


class Character:
    """A named hero with combat stats and an inventory."""

    def __init__(
        self, name: str, level: int, hp: int, attack: int, experience: int, gold: int
    ) -> None:
        self.name = name
        self.stats = CombatStats(level, hp, attack, experience, gold)
        self.inventory = Inventory()

    def __repr__(self) -> str:
        return f"Character(name={self.name!r}, stats={self.stats!r})"