import pytest

from aocsolver.y2022.day02 import (
    Outcome,
    Shape,
    play_round,
    solve_part_1,
    solve_part_2,
)

SAMPLE_INPUT = "A Y\nB X\nC Z\n"


def test_solve_part_1_on_sample_input():
    assert solve_part_1(SAMPLE_INPUT) == 15


def test_solve_part_2_on_sample_input():
    assert solve_part_2(SAMPLE_INPUT) == 12


def test_shape_next_and_prev():
    assert Shape.ROCK.next() is Shape.PAPER
    assert Shape.SCISSORS.next() is Shape.ROCK
    assert Shape.ROCK.prev() is Shape.SCISSORS
    assert Shape.PAPER.prev() is Shape.ROCK


@pytest.mark.parametrize(
    "player, opponent, outcome",
    [
        (Shape.ROCK, Shape.SCISSORS, Outcome.WIN),
        (Shape.ROCK, Shape.PAPER, Outcome.LOSE),
        (Shape.PAPER, Shape.PAPER, Outcome.DRAW),
    ],
)
def test_play_round(player, opponent, outcome):
    assert play_round(player, opponent) is outcome


@pytest.mark.parametrize(
    "line, expected",
    [
        ("C Z\n", 6),
        ("C X\n", 7),
        ("A Z\n", 3),
    ],
)
def test_single_round_scores(line, expected):
    assert solve_part_1(line) == expected


def test_parsing_stops_at_unterminated_line():
    assert solve_part_1("A Y\nB X") == 8


def test_empty_input_is_rejected():
    with pytest.raises(ValueError):
        solve_part_1("D X\n")