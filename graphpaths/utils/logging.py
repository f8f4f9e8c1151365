from typing import Iterable, Sequence

from graphpaths.search.search_result import (
    AStarMultiPathResult,
    AStarSearchResult,
    DijkstraMultiPathResult,
)
from graphpaths.utils.documentation import internal_only


@internal_only
def log(*args, **kwargs):
    """
    Like print, but is the one place the library is allowed to print from.
    """
    print(*args, **kwargs)


def print_paths(paths: Iterable[Sequence], indent: str = "\t\t"):
    """
    Log each path on its own line, in a stable (sorted) order.

    :param paths: The paths to log, or None.
    :param indent: Prefix for each line.
    """
    if paths is None:
        log(f"{indent}None")
        return
    for path in sorted(paths, key=lambda path: [str(node) for node in path]):
        log(f"{indent}{list(path)}")


def print_search_result(result):
    """
    Log a summary of a search result. For Dijkstra results, every reachable node is
    listed along with its cost and shortest path(s).

    :param result: Any of the ``graphpaths.search`` result types.
    """
    log(f"\tstart: {result.start}")
    log(f"\tnodesExamined: {result.num_nodes_examined}")
    if isinstance(result, AStarSearchResult):
        log(f"\treachedGoal: {result.reached_goal}")
        log(f"\tshortestPathCost: {result.shortest_path_cost()}")
        log(f"\tshortestPath:\n\t\t{result.shortest_path()}")
        if isinstance(result, AStarMultiPathResult):
            log(f"\treachedGoals: {result.reached_goals}")
            log("\tshortestPaths:")
            print_paths(result.shortest_paths(), "\t\t")
        return
    reachable = sorted(result.reachable_nodes(), key=str)
    log(f"\treachableNodes: {reachable}")
    log("\tshortestPaths:")
    for node in reachable:
        if isinstance(result, DijkstraMultiPathResult):
            paths = result.shortest_paths(node)
        else:
            paths = [result.shortest_path(node)]
        log(f"\t\t{node}: cost={result.shortest_path_cost(node)}; paths:")
        print_paths(paths, "\t\t\t\t\t ")
