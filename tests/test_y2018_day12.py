from itertools import product

import pytest

from aocsolver.y2018.day12 import Pots, parse

_GROWING = {
    "...##", "..#..", ".#...", ".#.#.", ".#.##", ".##..", ".####",
    "#.#.#", "#.###", "##.#.", "##.##", "###..", "###.#", "####.",
}


def _all_rules(growing):
    patterns = ("".join(p) for p in product(".#", repeat=5))
    return "\n".join(
        f"{pattern} => {'#' if pattern in growing else '.'}" for pattern in patterns
    )


EXAMPLE = "initial state: #..#.#..##......###...###\n\n" + _all_rules(_GROWING) + "\n"


def test_example_after_20_generations():
    pots = parse(EXAMPLE)
    pots.simulate(20)
    assert pots.value() == 325


def test_single_plant_value_is_its_index():
    pots = parse("initial state: ..#..\n\n" + _all_rules(set()))
    assert pots.value() == 2


def test_plants_die_without_growing_rules():
    pots = parse("initial state: #.#\n\n" + _all_rules(set()))
    pots.simulate(1)
    assert pots.value() == 0


def test_stable_plant_keeps_value():
    pots = parse("initial state: ..#..\n\n" + _all_rules({"..#.."}))
    before = pots.value()
    pots.simulate(10)
    assert pots.value() == before


def test_missing_rule_raises():
    pots = Pots("#", {".....": "."})
    with pytest.raises(ValueError):
        pots.simulate(1)


def test_malformed_rule_raises():
    with pytest.raises(ValueError):
        parse("initial state: #\n\n..#..\n")