"""Marble mania: simulate the elves' marble game."""

from collections import deque
from dataclasses import dataclass, field


@dataclass
class MarbleGame:
    """A game for n_players played with marbles numbered up to n_marbles."""

    n_players: int
    n_marbles: int
    player_scores: list = field(init=False)

    def __post_init__(self):
        if self.n_players < 1:
            raise ValueError("the game needs at least one player")
        self.player_scores = [0] * self.n_players

    def simulate(self):
        """Play the game, adding each scoring marble to its player's score."""
        # The current marble is kept at the right end of the deque.
        circle = deque([0])
        for marble in range(1, self.n_marbles + 1):
            if marble % 23 == 0:
                circle.rotate(7)
                player = (marble - 1) % self.n_players
                self.player_scores[player] += marble + circle.pop()
                circle.rotate(-1)
            else:
                circle.rotate(-1)
                circle.append(marble)

    def high_score(self):
        """The highest score of any player so far."""
        return max(self.player_scores)