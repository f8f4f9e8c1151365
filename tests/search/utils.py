import graphpaths as gp
from graphpaths.examples import grid

loc = grid.loc

# start 'a' at (1, 3); goals 'X' at (2, 6) and (1, 1)
SCENARIO_ROWS = (
    "#...",
    "#X#.",
    "###.",
    ".a#.",
    "....",
    "....",
    "..X.",
)

SCENARIO_PATHS = {
    loc(2, 6): {
        (loc(1, 3), loc(1, 4), loc(1, 5), loc(1, 6), loc(2, 6)),
        (loc(1, 3), loc(1, 4), loc(1, 5), loc(2, 5), loc(2, 6)),
        (loc(1, 3), loc(1, 4), loc(2, 4), loc(2, 5), loc(2, 6)),
    },
    # via the wraparound from the bottom row to the top row
    loc(1, 1): {
        (loc(1, 3), loc(1, 4), loc(1, 5), loc(1, 6), loc(1, 0), loc(1, 1)),
    },
}


def grid_graph_spec(rows):
    return grid.GridGraphSpec(grid.Grid(rows))


class ZeroHeuristicGraphSpec(gp.GraphSpec):
    """
    Hides the heuristic of the wrapped graph spec, so A* behaves like Dijkstra.
    """

    def __init__(self, graph_spec):
        self.graph_spec = graph_spec

    def neighbors(self, node):
        return self.graph_spec.neighbors(node)

    def cost(self, a, b):
        return self.graph_spec.cost(a, b)


class DictGraphSpec(gp.GraphSpec):
    """
    A directed graph given as ``{node: {neighbor: cost}}``.
    """

    def __init__(self, edges, heuristic=None):
        self.edges = edges
        self.heuristic_fn = heuristic
        self.cost_calls = []

    def neighbors(self, node):
        return list(self.edges.get(node, {}))

    def cost(self, a, b):
        self.cost_calls.append((a, b))
        return self.edges[a][b]

    def heuristic(self, a, b):
        if self.heuristic_fn is None:
            return 0
        return self.heuristic_fn(a, b)
