import pytest

from textrpg.items import create_shop_items
from textrpg.session import GameExit, GameSession


@pytest.fixture(autouse=True)
def _work_in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def make_reader(answers):
    pending = list(answers)

    def read(prompt=""):
        if not pending:
            raise EOFError
        return pending.pop(0)

    read.pending = pending
    return read


def test_initialize_rejects_empty_and_spaced_names(capsys):
    read = make_reader(["", "a b", "hero"])
    session = GameSession(read)
    out = capsys.readouterr().out
    assert session.player.name == "hero"
    assert "이름이 비어 있습니다" in out
    assert "공백이 포함되어" in out
    assert "환영합니다 hero님!" in out


def test_new_character_starting_stats():
    session = GameSession(make_reader(["hero"]))
    stats = session.player.stats
    assert (stats.level, stats.hp, stats.attack, stats.experience, stats.gold) == (
        1,
        200,
        30,
        0,
        0,
    )
    assert len(session.shop) == len(create_shop_items())
    assert len(session.player.inventory) == 0


def test_quit_raises_game_exit(capsys):
    session = GameSession(make_reader(["hero", "4"]))
    with pytest.raises(GameExit) as info:
        session.run()
    assert info.value.code == 0
    assert "게임을 종료합니다." in capsys.readouterr().out


def test_invalid_menu_choice_is_reported(capsys):
    session = GameSession(make_reader(["hero", "abc", "4"]))
    with pytest.raises(GameExit):
        session.run()
    assert "잘못된 입력입니다" in capsys.readouterr().out


def test_stats_menu_shows_status(capsys):
    session = GameSession(make_reader(["hero", "2", "4"]))
    with pytest.raises(GameExit):
        session.run()
    assert "상태창" in capsys.readouterr().out


def test_game_clear_raises_game_exit():
    session = GameSession(make_reader(["hero"]))
    with pytest.raises(GameExit) as info:
        session.game_clear()
    assert info.value.code == 0


def test_death_restarts_with_new_character(capsys):
    read = make_reader(["hero", "3", "9", "again", "4"])
    session = GameSession(read)
    with pytest.raises(GameExit):
        session.run()
    out = capsys.readouterr().out
    assert "YOU DIED" in out
    assert "게임을 재시작합니다" in out
    assert session.player.name == "again"
    assert session.player.stats.hp == session.player.stats.max_hp
    assert read.pending == []


def test_buy_item_moves_it_to_inventory():
    session = GameSession(make_reader(["hero"]))
    session.player.stats.gold = 100
    first = session.shop.get_item(0)
    stock_before = first.quantity
    session._read = make_reader(["1", "1", "y", "0"])
    session.visit_shop()
    inventory = session.player.inventory
    assert len(inventory) == 1
    bought = inventory.get_item(0)
    assert bought.name == first.name
    assert bought.quantity == 1
    assert session.player.stats.gold == 100 - first.price
    assert first.quantity == stock_before - 1


def test_declined_purchase_keeps_gold():
    session = GameSession(make_reader(["hero"]))
    session.player.stats.gold = 100
    session._read = make_reader(["1", "1", "n", "0"])
    session.visit_shop()
    assert session.player.stats.gold == 100
    assert len(session.player.inventory) == 0


def test_buy_without_gold_fails(capsys):
    session = GameSession(make_reader(["hero"]))
    session._read = make_reader(["1", "1", "0"])
    session.visit_shop()
    assert len(session.player.inventory) == 0
    assert "골드가 모자랍니다" in capsys.readouterr().out


def test_sell_item_returns_it_to_shop():
    session = GameSession(make_reader(["hero"]))
    potion = create_shop_items()[0].clone()
    session.player.inventory.add_item(potion)
    shop_stack = session.shop.get_item(0)
    stock_before = shop_stack.quantity
    session._read = make_reader(["2", "1", "0"])
    session.visit_shop()
    assert len(session.player.inventory) == 0
    assert session.player.stats.gold > 0
    assert session.player.stats.gold < potion.price
    assert shop_stack.quantity == stock_before + 1


def test_sell_with_empty_inventory_does_nothing():
    session = GameSession(make_reader(["hero"]))
    read = make_reader(["2", "0"])
    session._read = read
    session.visit_shop()
    assert session.player.stats.gold == 0
    assert read.pending == []