import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import (
    AbstractSet,
    Dict,
    FrozenSet,
    Generic,
    Iterable,
    Iterator,
    Optional,
    Tuple,
    TypeVar,
)

from frozendict import frozendict

from graphpaths.graph_spec.graph_spec import GraphSpec

from .frontier import Frontier

T = TypeVar("T")


class InvalidSearchArgumentError(ValueError):
    """
    Raised when a search is given a missing graph spec or start node, or an invalid
    set of goals. Raised before any search work is done.
    """


def validate_goals(goals: Optional[Iterable[T]]) -> Optional[FrozenSet[T]]:
    """
    Checks that ``goals`` is either None or a non-empty collection without None
    elements, and returns it as a frozenset.
    """
    if goals is None:
        return None
    goals = frozenset(goals)
    if not goals or None in goals:
        raise InvalidSearchArgumentError(
            "goals must be either None or a non-empty set without any None elements"
            f" (actual value: {set(goals)})"
        )
    return goals


@dataclass(frozen=True)
class CompletedSearch(ABC, Generic[T]):
    """
    The immutable state left behind by a finished search. Shared by the single-path
    and multi-path variants.

    :field start: The node the search started from.
    :field goals: The goals searched for, or None to search every reachable node.
    :field num_nodes_examined: The number of edges examined during the search, plus 1
        for the start node.
    :field cost_so_far: The best known distance from ``start`` to each examined node.
    """

    start: T
    goals: Optional[FrozenSet[T]]
    num_nodes_examined: int
    cost_so_far: "frozendict[T, float]"

    def distance(self, node: T) -> float:
        """
        The best known distance from the start to ``node``, or ``math.inf``.
        """
        return self.cost_so_far.get(node, math.inf)

    @abstractmethod
    def first_predecessor(self, node: T) -> Optional[T]:
        """
        The (first) predecessor of ``node`` on a shortest path found by the search, or
        None if the node was never reached or is the start node.
        """

    @abstractmethod
    def reachable_nodes(self) -> FrozenSet[T]:
        """
        Every node, other than the start, to which a path was found.
        """

    def shortest_path(self, target: T) -> Optional[Tuple[T, ...]]:
        """
        The first (of possibly several) shortest paths from ``start`` to ``target``.

        :return: a tuple beginning with ``start`` and ending with ``target``
            (``(start,)`` if they are the same node), or None if no path was found.
        """
        predecessor = self.first_predecessor(target)
        if predecessor is None:
            if target == self.start:
                return (self.start,)
            return None
        path = [target]
        while predecessor is not None:
            path.append(predecessor)
            predecessor = self.first_predecessor(predecessor)
        return tuple(reversed(path))


class SearchCore(ABC, Generic[T]):
    """
    Base class for best-first shortest path searches such as A* and Dijkstra's
    algorithm, which is A* with a heuristic of 0.

    A searcher is single-use: ``run`` performs the search and returns an immutable
    ``CompletedSearch``; the mutable state held here is not meant to be read
    afterwards.

    :param graph_spec: The graph to search.
    :param start: The node to start from.
    :param goals: The nodes to search for. If None, the search explores every node
        reachable from ``start``.
    """

    def __init__(
        self,
        graph_spec: GraphSpec[T],
        start: T,
        goals: Optional[AbstractSet[T]] = None,
    ):
        if graph_spec is None:
            raise InvalidSearchArgumentError("graph_spec must not be None")
        if start is None:
            raise InvalidSearchArgumentError("start must not be None")
        self.graph_spec = graph_spec
        self.start = start
        self.goals = validate_goals(goals)
        # priority is f(n) = g(n) + h(n); for Dijkstra just g(n)
        self.frontier: Frontier[T] = Frontier()
        # g(n) for every node examined so far
        self.cost_so_far: Dict[T, float] = {}
        self.num_nodes_examined = 1
        self._has_run = False

        self.frontier.offer(start, 0)
        self.cost_so_far[start] = 0

    def run(self) -> CompletedSearch[T]:
        """
        Runs the search to completion.

        :raises RuntimeError: if the search was already run.
        """
        if self._has_run:
            raise RuntimeError(f"{type(self).__name__} can only be run once")
        self._has_run = True
        self.search_loop()
        return self.complete()

    @abstractmethod
    def search_loop(self):
        """
        Expands nodes from the frontier until the search terminates.
        """

    @abstractmethod
    def complete(self) -> CompletedSearch[T]:
        """
        Freezes the search state into its completed form.
        """

    def distance(self, node: T) -> float:
        return self.cost_so_far.get(node, math.inf)

    def compute_heuristic(self, node: T) -> float:
        """
        The minimum heuristic value from ``node`` to any of the goals, which stays
        admissible when there are several goals. 0 if there are no goals.
        """
        if self.goals is None:
            return 0
        return min(self.graph_spec.heuristic(node, goal) for goal in self.goals)

    def is_goal(self, node: T) -> bool:
        if self.goals is None:
            return False
        return node in self.goals

    def relax_candidates(self, current: T) -> Iterator[Tuple[T, float]]:
        """
        Yields ``(next, alt_cost)`` for each neighbor of ``current`` reachable through
        a finite-cost edge, where ``alt_cost`` is the distance to ``next`` via ``current``.

        The start node is never yielded, since its distance of 0 cannot be improved.
        Neither is a neighbor whose distance overflows to infinity, which is as good as
        unreachable.
        """
        current_distance = self.distance(current)
        for next_node in self.graph_spec.neighbors(current):
            self.num_nodes_examined += 1
            edge_cost = self.graph_spec.cost(current, next_node)
            if not math.isfinite(edge_cost):
                continue
            if next_node == self.start:
                continue
            alt_cost = current_distance + edge_cost
            if math.isinf(alt_cost):
                continue
            yield next_node, alt_cost
