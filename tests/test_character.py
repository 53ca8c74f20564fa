from textrpg.character import Character
from textrpg.effects import HealEffect
from textrpg.items import Item


def test_character_holds_initial_stats():
    hero = Character("hero", 1, 200, 30, 0, 0)
    assert hero.name == "hero"
    stats = hero.stats
    assert (stats.level, stats.hp, stats.max_hp, stats.attack) == (1, 200, 200, 30)
    assert (stats.experience, stats.gold) == (0, 0)


def test_character_starts_with_empty_inventory():
    hero = Character("hero", 1, 200, 30, 0, 0)
    assert len(hero.inventory) == 0


def test_inventories_are_not_shared():
    first = Character("first", 1, 200, 30, 0, 0)
    second = Character("second", 1, 200, 30, 0, 0)
    first.inventory.add_item(Item("회복 포션", 10, 1, HealEffect(50)))
    assert len(first.inventory) == 1
    assert len(second.inventory) == 0