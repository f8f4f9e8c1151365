import math
from dataclasses import dataclass
from typing import Iterator, List, Sequence

import numpy as np

from graphpaths.graph_spec.graph_spec import GraphSpec


@dataclass(frozen=True, order=True)
class Location:
    """
    A cell coordinate on a ``Grid``. ``x`` is the column and ``y`` is the row.
    """

    x: int
    y: int

    def __repr__(self):
        return f"({self.x}, {self.y})"


def loc(x: int, y: int) -> Location:
    """
    Shorthand for ``Location(x, y)``.
    """
    return Location(x, y)


class Grid:
    """
    A rectangular grid of character cells, like a chessboard, allowing movement in
    four directions (up, down, left, right) with wraparound at the edges.

    :param rows: One string per row, all of the same length. ``rows[y][x]`` is the
        value of the cell at ``Location(x, y)``.
    """

    def __init__(self, rows: Sequence[str]):
        if not rows or any(len(row) != len(rows[0]) for row in rows):
            raise ValueError(f"Grid rows must be non-empty and of equal length: {rows}")
        self.cells = np.array([list(row) for row in rows], dtype="<U1")

    @property
    def width(self) -> int:
        return self.cells.shape[1]

    @property
    def height(self) -> int:
        return self.cells.shape[0]

    def cell(self, location: Location) -> str:
        return str(self.cells[location.y, location.x])

    def locations(self) -> Iterator[Location]:
        """
        Every location on the grid, row by row.
        """
        for y in range(self.height):
            for x in range(self.width):
                yield Location(x, y)

    def locations_with(self, char: str) -> List[Location]:
        """
        Every location whose cell holds ``char``, row by row.
        """
        ys, xs = np.nonzero(self.cells == char)
        return [Location(int(x), int(y)) for y, x in zip(ys, xs)]

    def adjacent(self, location: Location) -> List[Location]:
        x, y = location.x, location.y
        return [
            Location(x, (y - 1) % self.height),  # up
            Location(x, (y + 1) % self.height),  # down
            Location((x - 1) % self.width, y),  # left
            Location((x + 1) % self.width, y),  # right
        ]

    def distance(self, a: Location, b: Location) -> int:
        """
        The Manhattan distance between ``a`` and ``b``, taking the shorter way around
        the wraparound edges on each axis.
        """
        x_dist = min((b.x - a.x) % self.width, (a.x - b.x) % self.width)
        y_dist = min((b.y - a.y) % self.height, (a.y - b.y) % self.height)
        return x_dist + y_dist

    def rows(self) -> List[str]:
        return ["".join(row) for row in self.cells]

    def __str__(self):
        return "\n".join(self.rows())


class GridGraphSpec(GraphSpec[Location]):
    """
    The graph of a ``Grid``: each cell is connected to its four adjacent cells, and
    moving into a cell costs 1 unless it is an obstacle, which cannot be entered.
    The heuristic is the grid distance, which is both admissible and consistent.

    :param grid: The grid to search.
    :param obstacle: The character marking impassable cells.
    """

    def __init__(self, grid: Grid, obstacle: str = "#"):
        self.grid = grid
        self.obstacle = obstacle

    def neighbors(self, node):
        return self.grid.adjacent(node)

    def cost(self, a, b):
        if self.grid.cell(b) == self.obstacle:
            return math.inf
        return 1

    def heuristic(self, a, b):
        return self.grid.distance(a, b)
