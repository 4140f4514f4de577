"""The stars align: move stars until they form a message."""

import re
from dataclasses import dataclass, field

_STAR = re.compile(r"position=<(.*?)> velocity=<(.*?)>")


@dataclass
class _Star:
    x: int
    y: int
    vx: int
    vy: int

    def tick(self):
        self.x += self.vx
        self.y += self.vy

    def rev_tick(self):
        self.x -= self.vx
        self.y -= self.vy


@dataclass
class Sky:
    """A sky of moving stars."""

    stars: list = field(default_factory=list)

    def tick(self):
        """Move every star by its velocity."""
        for star in self.stars:
            star.tick()

    def rev_tick(self):
        """Undo one tick for every star."""
        for star in self.stars:
            star.rev_tick()

    def tick_until_smallest_area(self):
        """Tick while the bounding box shrinks; return the number of ticks kept."""
        area = self.area()
        ticks = 0
        while True:
            self.tick()
            current = self.area()
            if current < area:
                area = current
                ticks += 1
            else:
                self.rev_tick()
                return ticks

    def _bounds(self):
        if not self.stars:
            raise ValueError("sky holds no stars")
        xs = [star.x for star in self.stars]
        ys = [star.y for star in self.stars]
        return min(xs), max(xs), min(ys), max(ys)

    def area(self):
        """Area of the bounding box of all stars."""
        min_x, max_x, min_y, max_y = self._bounds()
        return (max_x - min_x + 1) * (max_y - min_y + 1)

    def render(self):
        """Draw the bounding box with '#' for stars and '.' elsewhere."""
        min_x, max_x, min_y, max_y = self._bounds()
        lit = {(star.x, star.y) for star in self.stars}
        return "".join(
            "".join(
                "#" if (x, y) in lit else "." for x in range(min_x, max_x + 1)
            )
            + "\n"
            for y in range(min_y, max_y + 1)
        )


def _pair(text):
    parts = [int(part.strip()) for part in text.split(",")]
    if len(parts) < 2:
        raise ValueError(f"expected two values: {text!r}")
    return parts[0], parts[1]


def parse(text):
    """Parse 'position=<x, y> velocity=<vx, vy>' lines into a Sky."""
    stars = []
    for position, velocity in _STAR.findall(text):
        x, y = _pair(position)
        vx, vy = _pair(velocity)
        stars.append(_Star(x, y, vx, vy))
    return Sky(stars)