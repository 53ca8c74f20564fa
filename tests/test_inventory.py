from textrpg.effects import AtkBoostEffect, HealEffect
from textrpg.inventory import Inventory
from textrpg.items import Item


def _potion():
    return Item("회복 포션", 10, 1, HealEffect(50))


def _boost():
    return Item("공격력 강화", 40, 1, AtkBoostEffect(10))


def test_add_new_items():
    inventory = Inventory()
    inventory.add_item(_potion())
    inventory.add_item(_boost())
    assert [item.name for item in inventory] == ["회복 포션", "공격력 강화"]


def test_same_name_merges():
    inventory = Inventory()
    inventory.add_item(_potion())
    inventory.add_item(_potion())
    assert len(inventory) == 1
    assert inventory.get_item(0).quantity == 2


def test_add_none_is_ignored():
    inventory = Inventory()
    inventory.add_item(None)
    assert len(inventory) == 0


def test_get_item_out_of_range():
    inventory = Inventory()
    inventory.add_item(_potion())
    assert inventory.get_item(0).name == "회복 포션"
    assert inventory.get_item(1) is None
    assert inventory.get_item(-1) is None


def test_remove_item():
    inventory = Inventory()
    inventory.add_item(_potion())
    inventory.add_item(_boost())
    inventory.remove_item(0)
    assert [item.name for item in inventory] == ["공격력 강화"]
    inventory.remove_item(5)
    assert len(inventory) == 1


def test_show_items_empty(capsys):
    Inventory().show_items()
    assert "현재 인벤토리가 비어있습니다." in capsys.readouterr().out


def test_show_items_lists_entries(capsys):
    inventory = Inventory()
    inventory.add_item(_potion())
    inventory.show_items()
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["--------- 인벤토리 ----------", "1. 회복 포션 (수량: 1)"]