import pytest

from aocsolver.y2019.day03 import parse_line, solve, trace_wire

WIRES_1 = "R8,U5,L5,D3\nU7,R6,D4,L4"
WIRES_2 = "R75,D30,R83,U83,L12,D49,R71,U7,L72\nU62,R66,U55,R34,D71,R55,D58,R83"
WIRES_3 = "R98,U47,R26,D63,R33,U87,L62,D20,R33,U53,R51\nU98,R91,D20,R16,D67,R40,U7,R15,U6,R7"


def test_wire_1():
    assert solve(WIRES_1) == (6, 30)


def test_wire_2():
    assert solve(WIRES_2) == (159, 610)


def test_wire_3():
    assert solve(WIRES_3) == (135, 410)


def test_parse_line():
    assert parse_line("R8,U5,L5,D3") == [("R", 8), ("U", 5), ("L", 5), ("D", 3)]


def test_trace_wire():
    assert trace_wire([("R", 2), ("U", 1)]) == {(1, 0): 1, (2, 0): 2, (2, 1): 3}


def test_trace_wire_keeps_last_visit():
    assert trace_wire([("R", 1), ("L", 1), ("R", 1)]) == {(1, 0): 3, (0, 0): 2}


def test_unknown_direction_raises():
    with pytest.raises(ValueError):
        trace_wire([("X", 1)])


def test_single_wire_raises():
    with pytest.raises(ValueError):
        solve("R8,U5")