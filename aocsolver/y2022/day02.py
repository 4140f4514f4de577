"""Rock paper scissors strategy guide."""

import re
from enum import Enum


class Shape(Enum):
    """A hand shape; the value is the score for playing it."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @property
    def score(self):
        return self.value

    def next(self):
        """Return the shape that beats this one."""
        return {
            Shape.ROCK: Shape.PAPER,
            Shape.PAPER: Shape.SCISSORS,
            Shape.SCISSORS: Shape.ROCK,
        }[self]

    def prev(self):
        """Return the shape that this one beats."""
        return self.next().next()


class Outcome(Enum):
    """A round result; the value is its score."""

    WIN = 6
    DRAW = 3
    LOSE = 0

    @property
    def score(self):
        return self.value


_LINE = re.compile(r"([ABC]) ([XYZ])\n")
_OPPONENT = {"A": Shape.ROCK, "B": Shape.PAPER, "C": Shape.SCISSORS}
_PLAYER = {"X": Shape.ROCK, "Y": Shape.PAPER, "Z": Shape.SCISSORS}
_OUTCOME = {"X": Outcome.LOSE, "Y": Outcome.DRAW, "Z": Outcome.WIN}


def _parse(text):
    rows = []
    pos = 0
    while (match := _LINE.match(text, pos)) is not None:
        rows.append((match.group(1), match.group(2)))
        pos = match.end()
    if not rows:
        raise ValueError("input holds no strategy lines")
    return rows


def play_round(player, opponent):
    """Return the outcome for the player."""
    if player == opponent:
        return Outcome.DRAW
    if player == opponent.next():
        return Outcome.WIN
    return Outcome.LOSE


def solve_part_1(text):
    """Total score when the second column is the shape to play."""
    total = 0
    for left, right in _parse(text):
        opponent, player = _OPPONENT[left], _PLAYER[right]
        total += player.score + play_round(player, opponent).score
    return total


def _shape_for(opponent, outcome):
    if outcome is Outcome.WIN:
        return opponent.next()
    if outcome is Outcome.DRAW:
        return opponent
    return opponent.prev()


def solve_part_2(text):
    """Total score when the second column is the outcome to reach."""
    total = 0
    for left, right in _parse(text):
        opponent, outcome = _OPPONENT[left], _OUTCOME[right]
        total += _shape_for(opponent, outcome).score + outcome.score
    return total