"""Turn-based puzzles played against a referee one move at a time."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

NODE = "0"
NO_NEIGHBOUR = (-1, -1)


def thor_directions(
    light_x: int, light_y: int, thor_x: int, thor_y: int
) -> Iterator[str]:
    """Yield Thor's moves (N, NE, E, ...) until he stands on the light."""
    x, y = thor_x, thor_y
    while (x, y) != (light_x, light_y):
        move = ""
        if y > light_y:
            move += "N"
            y -= 1
        elif y < light_y:
            move += "S"
            y += 1
        if x > light_x:
            move += "W"
            x -= 1
        elif x < light_x:
            move += "E"
            x += 1
        yield move


def _half(total: int) -> int:
    """Halve an integer, rounding toward zero."""
    quotient = abs(total) // 2
    return -quotient if total < 0 else quotient


@dataclass
class BombSearch:
    """Binary search for the bombs' window, narrowed by each direction hint."""

    width: int
    height: int
    x: int
    y: int
    top: int = field(init=False)
    bottom: int = field(init=False)
    left: int = field(init=False)
    right: int = field(init=False)

    def __post_init__(self) -> None:
        self.top = 0
        self.bottom = self.height
        self.left = 0
        self.right = self.width

    def jump(self, direction: str) -> tuple[int, int]:
        """Narrow the search by a hint such as "UR" and return the next window."""
        for hint in direction:
            if hint == "U":
                self.bottom = self.y - 1
            elif hint == "D":
                self.top = self.y + 1
            elif hint == "L":
                self.right = self.x - 1
            elif hint == "R":
                self.left = self.x + 1
        self.x = _half(self.left + self.right)
        self.y = _half(self.top + self.bottom)
        return self.x, self.y


def highest_mountain(heights: Iterable[int]) -> int:
    """Return the index of the first highest mountain."""
    indexed = list(enumerate(heights))
    if not indexed:
        raise ValueError("there must be at least one mountain")
    return max(indexed, key=lambda pair: pair[1])[0]


def node_neighbours(rows: Sequence[str]) -> list[tuple[int, int, int, int, int, int]]:
    """List each node with its nearest right and bottom neighbours.

    Each entry is (x1, y1, x2, y2, x3, y3); a missing neighbour is -1 -1.
    """
    grid = list(rows)
    result = []
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell != NODE:
                continue
            next_x = row.find(NODE, x + 1)
            right = (next_x, y) if next_x >= 0 else NO_NEIGHBOUR
            below = next(
                (
                    (x, below_y)
                    for below_y, below_row in enumerate(grid[y + 1:], start=y + 1)
                    if x < len(below_row) and below_row[x] == NODE
                ),
                NO_NEIGHBOUR,
            )
            result.append((x, y, *right, *below))
    return result