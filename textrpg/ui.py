"""Title screen, main menu and keyboard handling for the console."""

from __future__ import annotations

import os
import subprocess
import sys
from enum import Enum
from typing import Callable, Optional

MENU_X = 50
MENU_TOP = 15
MENU_BOTTOM = 17
WINDOW_TITLE = "Team Four G4ME"

_CLEAR_SEQUENCE = "\033[2J\033[H"

_BANNER = (
    "=======================================================================================================================",
    "=        ===============================        ===============================      ========  ====  =====  ==        =",
    "====  ==================================  ====================================   ==   ======   ====   ===   ==  =======",
    "====  ==================================  ====================================  ====  =====    ====  =   =  ==  =======",
    "====  ======   ====   ===  =  = ========  =========   ===  =  ==  =   ========  ==========  =  ====  == ==  ==  =======",
    "====  =====  =  ==  =  ==        =======      ====     ==  =  ==    =  =======  =========  ==  ====  =====  ==      ===",
    "====  =====     =====  ==  =  =  =======  ========  =  ==  =  ==  ============  ===   ==  ===  ====  =====  ==  =======",
    "====  =====  ======    ==  =  =  =======  ========  =  ==  =  ==  ============  ====  ==         ==  =====  ==  =======",
    "====  =====  =  ==  =  ==  =  =  =======  ========  =  ==  =  ==  ============   ==   =======  ====  =====  ==  =======",
    "====  ======   ====    ==  =  =  =======  =========   ====    ==  =============      ========  ====  =====  ==        =",
    "=======================================================================================================================",
)


class Key(Enum):
    UP = 0
    DOWN = 1
    SUBMIT = 2


def read_key() -> str:
    """Read a single key press without waiting for Enter when on a terminal."""
    if not sys.stdin.isatty():
        char = sys.stdin.read(1)
        if not char:
            raise EOFError
        return char
    try:
        import msvcrt
    except ImportError:
        pass
    else:
        return msvcrt.getwch()

    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        char = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    if char == "\x03":
        raise KeyboardInterrupt
    if char in ("", "\x04"):
        raise EOFError
    return char


def clear_screen() -> None:
    """Clear the terminal and move the cursor to the top left corner."""
    if os.name == "nt" and sys.stdout.isatty():
        subprocess.run("cls", shell=True, check=False)
        return
    sys.stdout.write(_CLEAR_SEQUENCE)
    sys.stdout.flush()


class UIManager:
    """Draws the title, info screen and main menu."""

    def __init__(self, read_key: Callable[[], str] = read_key) -> None:
        self._read_key = read_key

    def initialize(self) -> None:
        """Set the window title and draw the title banner."""
        print(f"\033]0;{WINDOW_TITLE}\a", end="")
        self.title()

    def title(self) -> str:
        """Draw the title banner and return the text that was drawn."""
        text = "\n\n" + "\n".join(_BANNER) + "\n\n\n"
        sys.stdout.write(text)
        sys.stdout.flush()
        return text

    def info_draw(self) -> None:
        """Show the team screen until the space bar is pressed."""
        clear_screen()
        print("\n")
        print("               Team : 4조       \n")
        print("              TextRPG          ")
        print("\n")
        print("스페이스 바를 누르면 메인화면으로 이동합니다.", end="", flush=True)
        while self.key_control() is not Key.SUBMIT:
            pass

    def menu_draw(self) -> int:
        """Let the player pick a menu entry: 0 start, 1 info, 2 quit."""
        x, y = MENU_X, MENU_TOP
        self.goto_xy(x - 2, y)
        print("> GAME START", end="")
        self.goto_xy(x, y + 1)
        print("GAME INFO", end="")
        self.goto_xy(x, y + 2)
        print("  QUIT", end="", flush=True)

        while True:
            key = self.key_control()
            if key is Key.UP and y > MENU_TOP:
                self._move_cursor(x, y, y - 1)
                y -= 1
            elif key is Key.DOWN and y < MENU_BOTTOM:
                self._move_cursor(x, y, y + 1)
                y += 1
            elif key is Key.SUBMIT:
                return y - MENU_TOP

    def _move_cursor(self, x: int, old_y: int, new_y: int) -> None:
        self.goto_xy(x - 2, old_y)
        print(" ", end="")
        self.goto_xy(x - 2, new_y)
        print(">", end="", flush=True)

    def key_control(self) -> Optional[Key]:
        """Map W/S/space to a Key; any other key gives None."""
        char = self._read_key()
        if char in ("w", "W"):
            return Key.UP
        if char in ("s", "S"):
            return Key.DOWN
        if char == " ":
            return Key.SUBMIT
        return None

    def goto_xy(self, x: int, y: int) -> None:
        """Move the cursor to zero-based column ``x`` and row ``y``."""
        print(f"\033[{y + 1};{x + 1}H", end="")