"""Combat statistics of a character."""

from __future__ import annotations

from dataclasses import dataclass, field

from .logger import get_logger
from .util import random_in_range

MAX_LEVEL = 10
EXP_PER_LEVEL = 100


@dataclass
class CombatStats:
    """Level, health, attack, experience, gold and one-shot combat buffs."""

    level: int
    hp: int
    attack: int
    experience: int
    gold: int
    max_hp: int = field(init=False)
    extra_damage: int = field(default=0, init=False)
    membrane_turn: bool = field(default=False, init=False)
    double_turn: bool = field(default=False, init=False)
    dodge: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.max_hp = self.hp

    def take_damage(self, amount: int) -> None:
        """Lose health, honouring an armed membrane or dodge first."""
        if self.membrane_turn:
            amount = 5
            self.membrane_turn = False
        elif self.dodge:
            print("회피 주사위를 굴립니다. 3이 나오면 공격을 회피합니다.")
            roll = random_in_range(1, 6)
            print(f"주사위 눈이 {roll}이(가) 나왔습니다. ", end="")
            self.dodge = False
            if roll == 3:
                print("공격을 회피합니다!")
                return
            print("회피에 실패합니다....")

        self.hp = max(self.hp - amount, 0)
        print(f"{amount}의 데미지를 받았습니다(현재 체력 : {self.hp} / {self.max_hp})")

    def heal(self, amount: int) -> None:
        self.hp = min(self.hp + amount, self.max_hp)
        print(f"체력을 회복했습니다(현재 체력 : {self.hp} / {self.max_hp})")

    def atk_boost(self, amount: int) -> None:
        self.attack += amount
        print(f"공격력이 {amount}만큼 상승했습니다.")

    def hp_boost(self, amount: int) -> None:
        self.max_hp += amount
        print(f"최대 체력이 {amount}만큼 상승했습니다.")

    def level_up(self) -> None:
        """Convert experience into levels, up to the maximum level."""
        if self.level >= MAX_LEVEL:
            return
        while self.experience >= EXP_PER_LEVEL and self.level < MAX_LEVEL:
            self.level += 1
            self.experience -= EXP_PER_LEVEL
            self.max_hp += self.level * 20
            self.attack += self.level * 5
            self.hp = self.max_hp
            print("레벨업!!")
        print("최대 체력과 공격력이 상승했습니다!")
        print("체력이 모두 회복되었습니다!")
        get_logger().log("Level Up")
        self.show_stats()

    def double_attack(self) -> bool:
        """Consume an armed double hit; return whether it was armed."""
        if self.double_turn:
            self.double_turn = False
            return True
        return False

    def arm_membrane(self) -> None:
        self.membrane_turn = True

    def set_extra_damage(self, amount: int) -> None:
        self.extra_damage = amount

    def arm_double_hit(self) -> None:
        self.double_turn = True

    def arm_dodge(self) -> None:
        self.dodge = True

    def is_dead(self) -> bool:
        return self.hp <= 0

    def show_stats(self) -> None:
        rows = (
            ("레벨", 10, self.level),
            ("공격력", 8, self.attack),
            ("체력", 10, self.hp),
            ("최대 체력", 5, self.max_hp),
            ("경험치", 8, self.experience),
            ("골드", 10, self.gold),
        )
        print("---------- 상태창 -----------")
        for label, width, value in rows:
            print(f"{label}{': ':>{width}}{value}")
        print("----------------------------")

    def gain_exp(self, amount: int) -> None:
        self.experience += amount
        if self.experience >= EXP_PER_LEVEL:
            self.level_up()