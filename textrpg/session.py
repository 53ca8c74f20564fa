"""One play-through: character creation, the town menu, the shop and battles."""

from __future__ import annotations

from .battle import start_battle
from .character import Character
from .items import Item
from .logger import get_logger
from .shop import Shop
from .ui import clear_screen
from .util import Reader, read_choice

START_LEVEL = 1
START_HP = 200
START_ATTACK = 30
START_EXPERIENCE = 0
START_GOLD = 0
SELL_RATIO = 0.6

MENU_SHOP = 1
MENU_STATS = 2
MENU_BATTLE = 3
MENU_QUIT = 4

SHOP_LEAVE = 0
SHOP_BUY = 1
SHOP_SELL = 2

_MAIN_MENU = "1. 상점\n2. 상태창\n3. 전투\n4. 게임 종료"


class GameExit(Exception):
    """Raised when the game ends, either by clearing it or by quitting."""

    def __init__(self, code: int = 0) -> None:
        super().__init__(code)
        self.code = code


def _as_int(answer: str) -> int | None:
    try:
        return int(answer.strip())
    except ValueError:
        return None


class GameSession:
    """Holds the player and the shop for one game."""

    def __init__(self, read: Reader = input) -> None:
        self._read = read
        self.shop = Shop()
        self.cleared = False
        self.player: Character
        self.initialize_game()

    def initialize_game(self) -> None:
        """Ask for a name and create a fresh character and shop."""
        while True:
            name = self._read("용사님의 이름을 입력해주세요 : ")
            if not name:
                print("이름이 비어 있습니다. 다시 입력해주세요.\n>", end="")
                continue
            if " " in name:
                print("이름에 공백이 포함되어 있습니다. 다시 입력해주세요.\n>", end="")
                continue
            break

        self.player = Character(
            name, START_LEVEL, START_HP, START_ATTACK, START_EXPERIENCE, START_GOLD
        )
        self.shop.restock()
        print(f"환영합니다 {self.player.name}님!")

    def game_over(self) -> None:
        print("게임을 재시작합니다")
        self.initialize_game()

    def game_clear(self) -> None:
        """Mark the session as cleared and end the game."""
        self.cleared = True
        print("축하합니다! 게임을 클리어하셨습니다!")
        raise GameExit(0)

    def visit_shop(self) -> None:
        """Buy and sell items until the player leaves the shop."""
        clear_screen()
        while True:
            print("----------- 상점 -------------")
            print(f"보유 Gold: {self.player.stats.gold}")
            action = read_choice(
                "1. 아이템 구매\n2. 아이템 판매\n0. 상점 나가기\n>",
                lambda n: n in (SHOP_LEAVE, SHOP_BUY, SHOP_SELL),
                self._read,
            )
            if action == SHOP_LEAVE:
                return
            if action == SHOP_BUY:
                self._buy()
            else:
                self._sell()

    def _buy(self) -> None:
        self.shop.show_items()
        choice = read_choice(
            "구매할 물건을 선택하세요(0. 상점으로 되돌아가기)\n>",
            lambda n: 0 <= n <= len(self.shop),
            self._read,
        )
        if choice == 0:
            return
        item = self.shop.get_item(choice - 1)
        if item is not None and self.shop.purchase_item(
            choice - 1, self.player.stats, self._read
        ):
            self.player.inventory.add_item(item.clone())
            print("구매가 완료되었습니다")
        else:
            print("아이템 구매를 취소했습니다.")

    def _sell(self) -> None:
        inventory = self.player.inventory
        inventory.show_items()
        if len(inventory) == 0:
            return
        choice = read_choice(
            "판매할 물건을 선택하세요(0. 상점으로 되돌아가기)\n>",
            lambda n: 0 <= n <= len(inventory),
            self._read,
        )
        if choice == 0:
            return
        item: Item | None = inventory.get_item(choice - 1)
        if item is None:
            return
        sell_price = int(item.price * SELL_RATIO)
        self.player.stats.gold += sell_price
        self.shop.add_item(item.clone())
        print(f"{item.name}을(를) {sell_price}골드에 팔았습니다")
        item.decrease_quantity()
        if item.quantity <= 0:
            inventory.remove_item(choice - 1)

    def _battle(self) -> None:
        result = start_battle(self.player, self._read)
        if not result.player_won:
            self.game_over()
            return
        if result.boss_monster:
            get_logger().log("Game Exit")
            self.game_clear()

        stats = self.player.stats
        stats.gold += result.gold_gained
        stats.gain_exp(result.exp_gained)
        if result.item_looted is not None:
            self.player.inventory.add_item(result.item_looted.clone())

    def run(self) -> None:
        """Show the town menu until the game ends with GameExit."""
        while True:
            print(_MAIN_MENU)
            choice = _as_int(self._read(""))
            if choice == MENU_SHOP:
                self.visit_shop()
            elif choice == MENU_STATS:
                self.player.stats.show_stats()
            elif choice == MENU_BATTLE:
                self._battle()
            elif choice == MENU_QUIT:
                print("게임을 종료합니다.")
                raise GameExit(0)
            else:
                print("잘못된 입력입니다. 다시 선택해주세요.")