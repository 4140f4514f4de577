"""Chronal charge: find the fuel cell square with the largest total power."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Square:
    """A square of fuel cells given by its top-left (x, y) corner and size."""

    top_left: tuple
    size: int
    power_level: int


def power_level(x, y, serial_number):
    """Power level of the fuel cell at (x, y) for a grid serial number."""
    if serial_number < 0:
        raise ValueError("serial number must not be negative")
    rack_id = x + 10
    level = (rack_id * y + serial_number) * rack_id
    return (level // 100) % 10 - 5


class Grid:
    """A square grid of fuel cells with precomputed power levels."""

    def __init__(self, serial_number, grid_size):
        if grid_size < 1:
            raise ValueError("grid size must be positive")
        self.serial_number = serial_number
        self.grid_size = grid_size
        self._cells = [
            [power_level(x, y, serial_number) for x in range(grid_size)]
            for y in range(grid_size)
        ]
        # Summed-area table: _sums[y][x] is the total of cells above and left of (x, y).
        self._sums = [[0] * (grid_size + 1)]
        for row in self._cells:
            above = self._sums[-1]
            running = 0
            current = [0]
            for x, cell in enumerate(row):
                running += cell
                current.append(above[x + 1] + running)
            self._sums.append(current)

    def get(self, x, y):
        """Power level of the cell at (x, y)."""
        if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
            raise IndexError(f"cell ({x}, {y}) lies outside the grid")
        return self._cells[y][x]

    def square_power(self, x, y, size):
        """Total power of the size x size square whose top-left corner is (x, y)."""
        if size < 0 or x < 0 or y < 0 or x + size > self.grid_size or y + size > self.grid_size:
            raise ValueError(f"square at ({x}, {y}) of size {size} does not fit the grid")
        top, bottom = self._sums[y], self._sums[y + size]
        return bottom[x + size] - top[x + size] - bottom[x] + top[x]

    def _row_powers(self, y, size):
        top, bottom = self._sums[y], self._sums[y + size]
        return [
            d - c - b + a
            for d, c, b, a in zip(bottom[size:], top[size:], bottom, top)
        ]

    def square_with_largest_power(self, size):
        """The first square of the given size with the largest total power."""
        if not 0 <= size <= self.grid_size:
            raise ValueError(f"square size {size} does not fit the grid")
        best = None
        for y in range(self.grid_size - size + 1):
            powers = self._row_powers(y, size)
            top = max(powers)
            if best is None or top > best.power_level:
                best = Square((powers.index(top), y), size, top)
        return best

    def largest_power(self):
        """The square of any size with the largest total power.

        Ties go to the square met first scanning rows, then columns, then sizes.
        """
        best_power = None
        best_key = None
        for size in range(1, self.grid_size + 1):
            for y in range(self.grid_size - size + 1):
                powers = self._row_powers(y, size)
                top = max(powers)
                key = (y, powers.index(top), size)
                if best_power is None or top > best_power or (
                    top == best_power and key < best_key
                ):
                    best_power, best_key = top, key
        y, x, size = best_key
        return Square((x, y), size, best_power)