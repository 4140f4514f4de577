"""Chocolate charts: elves creating recipes from their scores."""

from dataclasses import dataclass, field


@dataclass
class Kitchen:
    """Elves' current recipe positions and the scoreboard of recipe scores."""

    elfs: list = field(default_factory=lambda: [0, 1])
    recipes: list = field(default_factory=lambda: [3, 7])

    def create_new_recipes(self):
        """Digits of the sum of the elves' current recipe scores."""
        total = sum(self.recipes[elf] for elf in self.elfs)
        return [int(digit) for digit in str(total)]

    def add_recipes(self, new_recipes):
        """Append new recipe scores to the scoreboard."""
        self.recipes.extend(new_recipes)

    def move_forward(self, elf, steps):
        """Move an elf forward around the circular scoreboard."""
        if not 0 <= elf < len(self.elfs):
            raise IndexError(f"no elf number {elf}")
        self.elfs[elf] = (self.elfs[elf] + steps) % len(self.recipes)

    def step(self):
        """Create new recipes, then move every elf past its current recipe."""
        self.add_recipes(self.create_new_recipes())
        for elf, current in enumerate(self.elfs):
            self.move_forward(elf, self.recipes[current] + 1)

    def make_recipes(self, n):
        """Keep stepping until the scoreboard holds at least n recipes."""
        while len(self.recipes) < n:
            self.step()

    def scores_after(self, n):
        """The ten scores immediately after the first n recipes, as a string."""
        self.make_recipes(n + 10)
        return "".join(str(score) for score in self.recipes[n:n + 10])

    def left_of_sequence(self, sequence):
        """Number of recipes to the left of the first appearance of sequence."""
        sequence = list(sequence)
        size = len(sequence)
        while True:
            old_length = len(self.recipes)
            self.make_recipes(old_length + 1)
            length = len(self.recipes)
            added = length - old_length
            if length < size + added:
                continue
            for offset in range(added):
                start = length - size - offset
                if self.recipes[start:length - offset] == sequence:
                    return start