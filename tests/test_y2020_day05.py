import pytest

from aocsolver.y2020.day05 import seat_id, seat_position, solve_part_1, solve_part_2

EXAMPLE = "FBFBBFFRLR\nBFFFBBFRRR\nFFFBBBFRRR\nBBFFBBFRLL\n"


def test_should_solve_part_1_preview():
    assert solve_part_1(EXAMPLE) == 820


def test_seat_position():
    assert seat_position("FBFBBFF", 128) == 44
    assert seat_position("RLR", 8) == 5


@pytest.mark.parametrize(
    "boarding_pass, expected",
    [
        ("FBFBBFFRLR", 357),
        ("BFFFBBFRRR", 567),
        ("FFFBBBFRRR", 119),
        ("BBFFBBFRLL", 820),
    ],
)
def test_seat_id(boarding_pass, expected):
    assert seat_id(boarding_pass) == expected


def test_part_2_finds_gap():
    assert solve_part_2("FFFFFFBLLL\nFFFFFFBLLR\nFFFFFFBLRR\n") == 10


def test_part_2_without_gap_is_zero():
    assert solve_part_2("FFFFFFBLLL\nFFFFFFBLLR\n") == 0


def test_empty_input_raises():
    with pytest.raises(ValueError):
        solve_part_1("")