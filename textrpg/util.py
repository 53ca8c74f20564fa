"""Random numbers and console prompts shared by the game."""

from __future__ import annotations

import random
from typing import Callable

Reader = Callable[[str], str]

INVALID_INPUT = "잘못된 입력입니다. 다시 선택해주세요.\n>"


def random_in_range(low: int, high: int) -> int:
    """Return a uniformly chosen integer between ``low`` and ``high`` inclusive."""
    return random.randint(low, high)


def ask_yes_no(prompt: str, read: Reader = input) -> bool:
    """Ask until the answer starts with Y/y or N/n; return True for yes."""
    answer = read(prompt)
    while True:
        token = answer.strip()[:1]
        if token in ("Y", "y"):
            return True
        if token in ("N", "n"):
            return False
        answer = read(INVALID_INPUT)


def read_choice(
    prompt: str, is_valid: Callable[[int], bool], read: Reader = input
) -> int:
    """Ask until an integer accepted by ``is_valid`` is entered and return it."""
    answer = read(prompt)
    while True:
        try:
            value = int(answer.strip())
        except ValueError:
            pass
        else:
            if is_valid(value):
                return value
        answer = read(INVALID_INPUT)