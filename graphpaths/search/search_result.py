"""
Read-only views of a completed search.

Both searcher variants record enough to answer Dijkstra-style queries (distance and
path to any target) as well as A*-style queries (the nearest goal). The views below
each expose one of those subsets, so a Dijkstra result is never mistaken for an A*
result, or vice versa.
"""

from typing import FrozenSet, Generic, Optional, Tuple, TypeVar

from .multi_path_searcher import CompletedMultiPathSearch
from .search_core import CompletedSearch

T = TypeVar("T")


class _SearchResultView(Generic[T]):
    def __init__(self, completed: CompletedSearch[T]):
        self._completed = completed

    @property
    def start(self) -> T:
        """
        The node the search started from.
        """
        return self._completed.start

    @property
    def num_nodes_examined(self) -> int:
        """
        The number of nodes examined by the search, counting the start node once and
        each neighbor once per examined edge.
        """
        return self._completed.num_nodes_examined

    def __repr__(self):
        return f"{type(self).__name__}(start={self.start!r})"


class DijkstraSearchResult(_SearchResultView[T]):
    """
    The result of running Dijkstra's algorithm from a start node to every reachable node.
    """

    def shortest_path_cost(self, target: T) -> float:
        """
        :return: the cost of the shortest path from the start node to ``target``, or
            ``math.inf`` if there is none.
        """
        return self._completed.distance(target)

    def shortest_path(self, target: T) -> Optional[Tuple[T, ...]]:
        """
        :return: a shortest path from the start node to ``target`` as a tuple of nodes,
            ``(start,)`` if ``target`` is the start node, or None if there is none.
        """
        return self._completed.shortest_path(target)

    def reachable_nodes(self) -> FrozenSet[T]:
        """
        :return: every node other than the start node to which a path was found.
        """
        return self._completed.reachable_nodes()


class DijkstraMultiPathResult(DijkstraSearchResult[T]):
    """
    Like ``DijkstraSearchResult``, but also provides every shortest path to each node.
    """

    _completed: CompletedMultiPathSearch[T]

    def shortest_paths(self, target: T) -> Optional[FrozenSet[Tuple[T, ...]]]:
        """
        :return: all shortest paths from the start node to ``target``, or None if
            there are none.
        """
        return self._completed.shortest_paths(target)


class AStarSearchResult(_SearchResultView[T]):
    """
    The result of an A* search from a start node to the nearest of a set of goals.
    """

    @property
    def goals(self) -> FrozenSet[T]:
        """
        The goals that were searched for.
        """
        return self._completed.goals

    @property
    def reached_goal(self) -> Optional[T]:
        """
        The nearest goal found, or None if no goal is reachable.
        """
        return self._completed.reached_goal

    def shortest_path_cost(self) -> float:
        """
        :return: the cost of the path to ``reached_goal``, or ``math.inf`` if no goal
            is reachable.
        """
        return self._completed.distance(self.reached_goal)

    def shortest_path(self) -> Optional[Tuple[T, ...]]:
        """
        :return: a shortest path from the start node to ``reached_goal``, or None if no
            goal is reachable.
        """
        return self._completed.shortest_path(self.reached_goal)


class AStarMultiPathResult(AStarSearchResult[T]):
    """
    Like ``AStarSearchResult``, but also provides every equidistant nearest goal and
    every shortest path to them.
    """

    _completed: CompletedMultiPathSearch[T]

    @property
    def reached_goals(self) -> Optional[FrozenSet[T]]:
        """
        The nearest goals found (several if they are equidistant), or None if no goal
        is reachable.
        """
        if not self._completed.reached_goals:
            return None
        return frozenset(self._completed.reached_goals)

    def shortest_paths(self) -> Optional[FrozenSet[Tuple[T, ...]]]:
        """
        :return: every shortest path from the start node to any of ``reached_goals``,
            or None if no goal is reachable.
        """
        return self._completed.shortest_paths_to_goals()
