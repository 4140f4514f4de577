"""Alchemical reduction: react polymer units of opposite polarity."""

from dataclasses import dataclass


def same_type(a, b):
    """Units are of the same type when they match ignoring case."""
    return a.lower() == b.lower()


def opposite_polarity(a, b):
    """Units react when they are the same type but differ in case."""
    return same_type(a, b) and a != b


def react(structure):
    """Fully react the polymer and return what is left."""
    stack = []
    for unit in structure:
        if stack and opposite_polarity(stack[-1], unit):
            stack.pop()
        else:
            stack.append(unit)
    return "".join(stack)


def remove_unit_type(structure, unit_type):
    """Remove all units of the given lower-case type, in either polarity."""
    upper = unit_type.upper()
    return "".join(c for c in structure if c != unit_type and c != upper)


@dataclass
class Polymer:
    """A polymer made of a string of units."""

    structure: str

    def trigger(self):
        """The polymer left after full reaction."""
        return react(self.structure)

    def trigger_v2(self):
        """Shortest reacted length after removing one unit type entirely."""
        agents = {unit.lower() for unit in self.structure}
        if not agents:
            raise ValueError("polymer is empty")
        return min(
            len(react(remove_unit_type(self.structure, agent))) for agent in agents
        )