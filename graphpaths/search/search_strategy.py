from abc import ABC, abstractmethod
from typing import AbstractSet, Generic

from typing_extensions import TypeVar

from graphpaths.graph_spec.graph_spec import GraphSpec

from .multi_path_searcher import MultiPathSearcher
from .search_core import InvalidSearchArgumentError, SearchCore
from .search_result import (
    AStarMultiPathResult,
    AStarSearchResult,
    DijkstraMultiPathResult,
    DijkstraSearchResult,
)
from .single_path_searcher import SinglePathSearcher

T = TypeVar("T")


class PathSearchStrategy(ABC, Generic[T]):
    """
    A shortest path algorithm bound to a graph. Strategies hold no search state, so one
    instance can run any number of searches.

    :param graph_spec: The graph to search.
    """

    def __init__(self, graph_spec: GraphSpec[T]):
        if graph_spec is None:
            raise InvalidSearchArgumentError("graph_spec must not be None")
        self.graph_spec = graph_spec

    @abstractmethod
    def create_searcher(self, start: T, goals) -> SearchCore[T]:
        """
        Create a fresh searcher for a single search.
        """

    def __repr__(self):
        return f"{type(self).__name__}({self.graph_spec!r})"


class _DijkstraBase(PathSearchStrategy[T]):
    result_type = DijkstraSearchResult

    def search(self, start: T) -> DijkstraSearchResult[T]:
        """
        Find the shortest paths from ``start`` to every node reachable from it.

        :param start: The node to start from.
        :return: a result that can be queried for any target node.
        """
        return self.result_type(self.create_searcher(start, None).run())


class Dijkstra(_DijkstraBase[T]):
    """
    Dijkstra's algorithm, finding one shortest path to each reachable node.
    """

    def create_searcher(self, start, goals):
        return SinglePathSearcher(self.graph_spec, start, goals)


class DijkstraMultiPath(_DijkstraBase[T]):
    """
    Dijkstra's algorithm, finding every shortest path to each reachable node.
    """

    result_type = DijkstraMultiPathResult

    def create_searcher(self, start, goals):
        return MultiPathSearcher(self.graph_spec, start, goals)


class _AStarBase(PathSearchStrategy[T]):
    result_type = AStarSearchResult

    def search(self, start: T, goals: AbstractSet[T]) -> AStarSearchResult[T]:
        """
        Find the shortest path from ``start`` to the nearest of ``goals``.

        The graph's heuristic is evaluated against every goal and the minimum is used,
        so it stays admissible as long as it is admissible for each goal.

        :param start: The node to start from.
        :param goals: A non-empty set of goal nodes.
        """
        if goals is None:
            raise InvalidSearchArgumentError("goals must not be None")
        return self.result_type(self.create_searcher(start, goals).run())

    def search_for(self, start: T, goal: T) -> AStarSearchResult[T]:
        """
        Find the shortest path from ``start`` to ``goal``.
        """
        if goal is None:
            raise InvalidSearchArgumentError("goal must not be None")
        return self.search(start, {goal})


class AStar(_AStarBase[T]):
    """
    A* search, finding one shortest path to one nearest goal.
    """

    def create_searcher(self, start, goals):
        return SinglePathSearcher(self.graph_spec, start, goals)


class AStarMultiPath(_AStarBase[T]):
    """
    A* search, finding every nearest goal and every shortest path to them.
    """

    result_type = AStarMultiPathResult

    def create_searcher(self, start, goals):
        return MultiPathSearcher(self.graph_spec, start, goals)
