import pytest

from aocsolver.y2020.day01 import solve_part_1, solve_part_2

PREVIEW = "1721\n979\n366\n299\n675\n1456\n"


def test_should_solve_part_1_preview():
    assert solve_part_1(PREVIEW, 2020) == 514579


def test_should_solve_part_2_preview():
    assert solve_part_2(PREVIEW, 2020) == 241861950


def test_no_match_returns_none():
    assert solve_part_1("1\n2\n", 100) is None
    assert solve_part_2("1\n2\n3\n", 100) is None


def test_same_entry_not_used_twice():
    assert solve_part_1("1010\n5\n", 2020) is None


@pytest.mark.parametrize("text", ["-5\n10\n", "abc\n"])
def test_invalid_numbers_raise(text):
    with pytest.raises(ValueError):
        solve_part_1(text, 5)