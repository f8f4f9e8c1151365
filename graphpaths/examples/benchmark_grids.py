from enum import Enum
from typing import FrozenSet, List, Tuple

from .grid import Grid, Location

START_CHARS = "abcdefghijklmnopqrstuvwxyz"
GOAL_CHAR = "X"


class GridSize(Enum):
    """
    Sample grids of increasing size. ``X`` marks a goal, a lowercase letter marks a
    start location and ``#`` marks an obstacle.
    """

    SMALL = (
        "X...",
        "#a#.",
        "###.",
        ".X#.",
        "....",
        "....",
        "..b.",
    )
    MEDIUM = (
        "......#........",
        "......#........",
        ".####.#........",
        "....#.#........",
        "X...###........",
        "#........##....",
        "#......#.######",
        ".......###.....",
        "........##.....",
        "......#########",
        "...##.###.X....",
        "#######........",
        ".....##........",
        ".....###b......",
        "....a####......",
    )
    LARGE = (
        "..............................",
        "..##..........................",
        "...#.##.......................",
        "...#.##.......................",
        "...#.##.............X.........",
        "...#.##.......................",
        "...####.......................",
        "...####.......................",
        "...######.....................",
        "#########....................#",
        "....################.........#",
        "....####......######.........#",
        "....####...####...##.........#",
        "....####...#......##a........#",
        "########...#......###........#",
        ".......#####.....X###.........",
        "..................#b..........",
        "..................##..........",
        "..............................",
        "..............................",
    )

    def grid(self) -> Grid:
        return Grid(self.value)


def grid_search_parameters(grid: Grid) -> Tuple[List[Location], FrozenSet[Location]]:
    """
    Find the start locations and goals marked on a grid.

    :return: the start locations in row order, and the set of goals.
    """
    starts = [
        location for location in grid.locations() if grid.cell(location) in START_CHARS
    ]
    goals = frozenset(grid.locations_with(GOAL_CHAR))
    return starts, goals
