"""Subterranean sustainability: a row of pots evolving by neighbourhood rules."""

from itertools import takewhile

DEPTH = 5


def _count_empty(pots):
    return sum(1 for _ in takewhile(lambda pot: pot == ".", pots))


class Pots:
    """A row of pots ('#' holds a plant, '.' is empty) and their growth rules."""

    def __init__(self, state, rules):
        self.state = list(state)
        self.rules = dict(rules)
        self.starting_index = 0
        self._extend_ends()

    def _extend_ends(self):
        # Keep DEPTH empty pots at both ends so plants can spread outwards.
        missing = DEPTH - _count_empty(self.state[:DEPTH])
        self.state[:0] = ["."] * missing
        self.starting_index += missing
        missing = DEPTH - _count_empty(reversed(self.state[-DEPTH:]))
        self.state.extend(["."] * missing)

    def _tick(self):
        new_state = self.state.copy()
        for i in range(2, len(self.state) - 3):
            window = "".join(self.state[i - 2:i + 3])
            try:
                new_state[i] = self.rules[window]
            except KeyError:
                raise ValueError(f"no rule for pattern {window!r}") from None
        self.state = new_state
        self._extend_ends()

    def simulate(self, generations):
        """Advance the pots by the given number of generations."""
        for _ in range(generations):
            self._tick()

    def value(self):
        """Sum of the pot numbers that hold a plant."""
        return sum(
            index - self.starting_index
            for index, pot in enumerate(self.state)
            if pot == "#"
        )


def parse(text):
    """Parse 'initial state: ...', a blank line, then 'xxxxx => y' rules."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("input is empty")
    state = lines[0][15:]
    rules = {}
    for line in lines[2:]:
        parts = line.split(" => ")
        if len(parts) < 2 or not parts[1]:
            raise ValueError(f"malformed rule: {line!r}")
        rules[parts[0]] = parts[1][0]
    return Pots(state, rules)