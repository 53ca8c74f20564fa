"""A single fight between the player and a random monster."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .character import Character
from .items import Item
from .logger import get_logger
from .monsters import create_monster
from .util import INVALID_INPUT, Reader, random_in_range, read_choice

ATTACK = 1
USE_ITEM = 2
SUICIDE = 9  # debugging shortcut: the player dies at once
EXP_REWARD = 50


@dataclass
class BattleResult:
    """Outcome of a battle and the rewards it earned."""

    player_won: bool = False
    boss_monster: bool = False
    gold_gained: int = 0
    exp_gained: int = 0
    item_looted: Optional[Item] = None


def _as_int(answer: str) -> Optional[int]:
    try:
        return int(answer.strip())
    except ValueError:
        return None


def _use_item(player: Character, read: Reader) -> bool:
    """Let the player pick and use an item; return False if nothing was chosen."""
    inventory = player.inventory
    if len(inventory) == 0:
        print("인벤토리가 비었습니다")
        return False

    inventory.show_items()
    choice = read_choice(
        "아이템을 선택해주세요(0. 인벤토리 나가기)\n>",
        lambda n: 0 <= n <= len(inventory),
        read,
    )
    if choice == 0:
        return False

    item = inventory.get_item(choice - 1)
    assert item is not None
    item.use(player, read)
    player.stats.show_stats()
    if item.is_sold_out():
        inventory.remove_item(choice - 1)
    return True


def start_battle(player: Character, read: Reader = input) -> BattleResult:
    """Fight a monster of the player's level until one side falls."""
    stats = player.stats
    logger = get_logger()
    monster = create_monster(stats.level)
    print(f"전투를 시작합니다! 몬스터 : {monster.name}")
    logger.log(f"Battle started with {monster.name}")

    while not stats.is_dead() and not monster.is_dead():
        print(f"{player.name}의 HP : {stats.hp} / Attack: {stats.attack}")
        print(f"{monster.name}의 HP : {monster.hp} / Attack: {monster.attack}")

        choice = _as_int(read("1. 공격\n2. 아이템 사용\n>"))
        if choice == SUICIDE:
            stats.take_damage(stats.hp)
            break
        if choice not in (ATTACK, USE_ITEM):
            choice = read_choice(INVALID_INPUT, lambda n: n in (ATTACK, USE_ITEM), read)

        if choice == ATTACK:
            damage = stats.attack
            if stats.double_attack():
                damage *= 2
            monster.take_damage(damage)
            print(f"{monster.name}에게 {damage}의 데미지를 주었습니다")
        elif not _use_item(player, read):
            continue

        if monster.is_dead():
            break
        stats.take_damage(monster.attack)

    result = BattleResult(boss_monster=monster.is_boss)
    if stats.is_dead():
        print("YOU DIED")
        return result

    print("YOU WIN!!")
    result.player_won = True
    if result.boss_monster:
        return result

    result.gold_gained = random_in_range(10, 20)
    result.exp_gained = EXP_REWARD
    result.item_looted = monster.drop_loot()
    if result.item_looted is not None:
        print(f"{result.item_looted.name}을(를) 발견했습니다!")
        logger.log(f"Get the Item({result.item_looted.name})")
    print(f"획득한 경험치 : {result.exp_gained} / 획득한 골드 : {result.gold_gained}")
    logger.log(f"Get the exp({result.exp_gained})")
    logger.log(f"Get the gold({result.gold_gained})")
    return result