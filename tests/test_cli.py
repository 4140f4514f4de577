import io
import sys

import pytest

from aocsolver.cli import main, solve

DAY_1 = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"


@pytest.mark.parametrize(
    "day, text, expected",
    [
        (1, DAY_1, (24000, 45000)),
        (2, "A Y\nB X\nC Z\n", (15, 12)),
        (
            3,
            "vJrwpWtwJgWrhcsFMMfFFhFp\njqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL\n"
            "PmmdzqPrVvPwwTWBwg\nwMqvLMZHhHMvwLHjbvcjnnSBnvTQFn\n"
            "ttgJtRGJQctTZtZT\nCrZsJsPPZsGzwwsLwLmpwMDw\n",
            (157, 70),
        ),
        (4, "2-4,6-8\n2-3,4-5\n5-7,7-9\n2-8,3-7\n6-6,4-6\n2-6,4-8\n", (2, 4)),
    ],
)
def test_solve(day, text, expected):
    assert solve(2022, day, text) == expected


def test_solve_unknown_day_raises():
    with pytest.raises(ValueError):
        solve(2022, 25, DAY_1)


def test_main_prints_both_parts(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(DAY_1))
    assert main(["2022", "1"]) == 0
    assert capsys.readouterr().out == "24000\n45000\n"


def test_main_unknown_day_fails(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(DAY_1))
    assert main(["2021", "1"]) == 1
    assert "Not solved yet" in capsys.readouterr().err


def test_main_requires_arguments():
    with pytest.raises(SystemExit):
        main([])