from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, TypeVar

from frozendict import frozendict

from .search_core import CompletedSearch, SearchCore

T = TypeVar("T")


@dataclass(frozen=True)
class CompletedSinglePathSearch(CompletedSearch[T]):
    """
    The result of a ``SinglePathSearcher``.

    :field came_from: For each reached node, its predecessor on the shortest path found.
    :field reached_goal: The first goal reached, or None.
    """

    came_from: "frozendict[T, T]"
    reached_goal: Optional[T]

    def first_predecessor(self, node):
        return self.came_from.get(node)

    def reachable_nodes(self) -> FrozenSet[T]:
        return frozenset(self.came_from)


class SinglePathSearcher(SearchCore[T]):
    """
    Classic A* (or Dijkstra's algorithm, when there are no goals or the heuristic is
    0). Stops as soon as a goal is polled from the frontier, so of several equidistant
    goals only one is found, along with one shortest path to it.

    Without goals, runs until every reachable node has been expanded.
    """

    def __init__(self, graph_spec, start, goals=None):
        super().__init__(graph_spec, start, goals)
        self.came_from: Dict[T, T] = {}
        self.reached_goal: Optional[T] = None

    def search_loop(self):
        while self.frontier:
            current = self.frontier.poll().node
            if self.is_goal(current):
                self.reached_goal = current
                break
            for next_node, alt_cost in self.relax_candidates(current):
                if alt_cost < self.distance(next_node):
                    self.cost_so_far[next_node] = alt_cost
                    self.came_from[next_node] = current
                    self.frontier.offer(
                        next_node, alt_cost + self.compute_heuristic(next_node)
                    )

    def complete(self) -> CompletedSinglePathSearch[T]:
        return CompletedSinglePathSearch(
            start=self.start,
            goals=self.goals,
            num_nodes_examined=self.num_nodes_examined,
            cost_so_far=frozendict(self.cost_so_far),
            came_from=frozendict(self.came_from),
            reached_goal=self.reached_goal,
        )
