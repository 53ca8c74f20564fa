"""Main menu loop and the command-line entry point."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .session import GameExit, GameSession
from .ui import UIManager, clear_screen
from .util import Reader

MENU_START = 0
MENU_INFO = 1
MENU_QUIT = 2


class GameManager:
    """Shows the title menu and starts game sessions."""

    def __init__(self, ui: Optional[UIManager] = None, read: Reader = input) -> None:
        self.ui = ui if ui is not None else UIManager()
        self._read = read

    def run(self) -> None:
        """Loop over the title menu until QUIT is chosen."""
        while True:
            self.ui.initialize()
            choice = self.ui.menu_draw()
            if choice == MENU_START:
                self.game_start()
            elif choice == MENU_INFO:
                self.ui.info_draw()
            elif choice == MENU_QUIT:
                return
            clear_screen()

    def game_start(self) -> None:
        clear_screen()
        GameSession(self._read).run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="textrpg", description="A small console role-playing game."
    )
    parser.parse_args(argv)
    try:
        GameManager().run()
    except GameExit as exit_:
        return exit_.code
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())