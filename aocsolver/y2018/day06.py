"""Chronal coordinates: Manhattan-distance areas around points."""

from dataclasses import dataclass, field
from itertools import product


@dataclass(frozen=True)
class Point:
    """A point on the grid."""

    x: int
    y: int

    def manhattan_distance(self, other):
        """Sum of absolute coordinate differences."""
        return abs(self.x - other.x) + abs(self.y - other.y)


@dataclass
class Grid:
    """A grid spanning from the origin to the furthest given point."""

    points: dict
    width: int = field(init=False)
    height: int = field(init=False)

    def __post_init__(self):
        if not self.points:
            raise ValueError("grid needs at least one point")
        self.width = max(p.x for p in self.points.values()) + 1
        self.height = max(p.y for p in self.points.values()) + 1

    def _cells(self):
        for y, x in product(range(self.height), range(self.width)):
            yield Point(x, y)

    def _closest(self, cell):
        """Return (id of the closest point, whether another is equally close)."""
        best_id, best_dist, double = None, None, False
        for point_id, point in self.points.items():
            dist = cell.manhattan_distance(point)
            if best_dist is None or dist < best_dist:
                best_id, best_dist, double = point_id, dist, False
            elif dist == best_dist and point_id != best_id:
                double = True
        return best_id, double

    def _is_border(self, cell):
        return cell.x in (0, self.width - 1) or cell.y in (0, self.height - 1)

    def biggest_finite_area(self):
        """Size of the largest area closest to a single point and not infinite."""
        areas = {point_id: 0 for point_id in self.points}
        infinite = set()
        for cell in self._cells():
            point_id, double = self._closest(cell)
            if double:
                continue
            areas[point_id] += 1
            if self._is_border(cell):
                infinite.add(point_id)
        finite = [size for point_id, size in areas.items() if point_id not in infinite]
        if not finite:
            raise ValueError("every area is infinite")
        return max(finite)

    def safe_region_size(self, distance):
        """Number of cells whose total distance to all points is below distance."""
        return sum(
            1
            for cell in self._cells()
            if sum(point.manhattan_distance(cell) for point in self.points.values())
            < distance
        )


def parse(text):
    """Parse 'x, y' lines into a dict from line index to point."""
    points = {}
    for index, line in enumerate(text.splitlines()):
        parts = line.strip().split(", ")
        if len(parts) < 2:
            raise ValueError(f"malformed coordinate: {line!r}")
        points[index] = Point(int(parts[0]), int(parts[1]))
    return points