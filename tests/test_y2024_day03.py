from aocsolver.y2024.day03 import solve_part_1, solve_part_2


def test_solve_part_1():
    text = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
    assert solve_part_1(text) == 161


def test_solve_part_2():
    text = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"
    assert solve_part_2(text) == 48


def test_part_2_disabled_throughout():
    assert solve_part_2("don't()mul(2,3)mul(4,5)") == 0


def test_part_1_ignores_malformed():
    assert solve_part_1("mul(2, 3)mul(2,3") == 0