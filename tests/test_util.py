import pytest

from textrpg.util import INVALID_INPUT, ask_yes_no, random_in_range, read_choice


def _reader(*answers):
    prompts = []
    pending = iter(answers)

    def read(prompt=""):
        prompts.append(prompt)
        return next(pending)

    read.prompts = prompts
    return read


def test_random_in_range_stays_in_bounds():
    values = {random_in_range(1, 6) for _ in range(2000)}
    assert values == {1, 2, 3, 4, 5, 6}


def test_random_in_range_single_value():
    assert random_in_range(7, 7) == 7


def test_random_in_range_rejects_reversed_bounds():
    with pytest.raises(ValueError):
        random_in_range(5, 1)


@pytest.mark.parametrize("answer", ["Y", "y", " y \n", "yes"])
def test_ask_yes_no_accepts_yes(answer):
    assert ask_yes_no("?", _reader(answer)) is True


@pytest.mark.parametrize("answer", ["N", "n", "no"])
def test_ask_yes_no_accepts_no(answer):
    assert ask_yes_no("?", _reader(answer)) is False


def test_ask_yes_no_retries_on_invalid_input():
    read = _reader("x", "", "n")
    assert ask_yes_no("first", read) is False
    assert read.prompts == ["first", INVALID_INPUT, INVALID_INPUT]


def test_read_choice_returns_valid_integer():
    read = _reader("2")
    assert read_choice("pick", lambda v: v in (1, 2), read) == 2
    assert read.prompts == ["pick"]


def test_read_choice_retries_on_bad_input():
    read = _reader("abc", "5", " 1 ")
    assert read_choice("pick", lambda v: v in (1, 2), read) == 1
    assert read.prompts == ["pick", INVALID_INPUT, INVALID_INPUT]


def test_read_choice_propagates_end_of_input():
    def read(prompt=""):
        raise EOFError

    with pytest.raises(EOFError):
        read_choice("pick", lambda v: True, read)