"""Effects that items apply to a character."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .util import random_in_range

if TYPE_CHECKING:
    from .character import Character


class Effect(ABC):
    """Something an item does to the character that uses it."""

    @abstractmethod
    def apply(self, target: "Character") -> None:
        """Apply the effect to ``target``."""

    def clone(self) -> "Effect":
        return copy.copy(self)


@dataclass(frozen=True)
class HealEffect(Effect):
    amount: int

    def apply(self, target: "Character") -> None:
        target.stats.heal(self.amount)


@dataclass(frozen=True)
class AtkBoostEffect(Effect):
    amount: int

    def apply(self, target: "Character") -> None:
        target.stats.atk_boost(self.amount)


@dataclass(frozen=True)
class HpBoostEffect(Effect):
    amount: int

    def apply(self, target: "Character") -> None:
        target.stats.hp_boost(self.amount)


@dataclass(frozen=True)
class CurseEffect(Effect):
    """Costs the user 5 health and sets a percentage-based extra damage."""

    def apply(self, target: "Character") -> None:
        stats = target.stats
        stats.take_damage(5)
        percent = 2 + random_in_range(0, 13)
        stats.set_extra_damage(stats.attack * (percent // 100))


@dataclass(frozen=True)
class Damage5Effect(Effect):
    """Limits the next hit taken to 5 damage."""

    def apply(self, target: "Character") -> None:
        target.stats.arm_membrane()


@dataclass(frozen=True)
class DoubleAtkEffect(Effect):
    """Doubles the next attack."""

    def apply(self, target: "Character") -> None:
        target.stats.arm_double_hit()


@dataclass(frozen=True)
class DodgeEffect(Effect):
    """Gives the next hit taken a one-in-six chance to miss."""

    def apply(self, target: "Character") -> None:
        target.stats.arm_dodge()