from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Set, Tuple, TypeVar

from frozendict import frozendict

from .search_core import CompletedSearch, SearchCore

T = TypeVar("T")


@dataclass(frozen=True)
class CompletedMultiPathSearch(CompletedSearch[T]):
    """
    The result of a ``MultiPathSearcher``.

    :field came_from: For each reached node, every node immediately preceding it on
        some shortest path, in the order they were discovered. Together these form a
        DAG pointing back towards the start node.
    :field reached_goals: The equidistant nearest goals, in the order they were reached.
    """

    came_from: "frozendict[T, Tuple[T, ...]]"
    reached_goals: Tuple[T, ...]

    @property
    def reached_goal(self) -> Optional[T]:
        if not self.reached_goals:
            return None
        return self.reached_goals[0]

    def first_predecessor(self, node):
        predecessors = self.came_from.get(node)
        if not predecessors:
            return None
        return predecessors[0]

    def reachable_nodes(self) -> FrozenSet[T]:
        return frozenset(self.came_from)

    def shortest_paths(self, target: T) -> Optional[FrozenSet[Tuple[T, ...]]]:
        """
        Every shortest path from ``start`` to ``target``, found by a depth-first
        traversal of ``came_from``.

        :return: a frozenset of path tuples (``{(start,)}`` if ``target`` is the start
            node), or None if no path was found.
        """
        if target not in self.came_from:
            if target == self.start:
                return frozenset({(self.start,)})
            return None
        paths = set()
        stack: List[_PathFrame] = [_PathFrame(target, None)]
        while stack:
            frame = stack.pop()
            predecessors = self.came_from.get(frame.node, ())
            if not predecessors:
                # only the start node has no predecessors
                paths.add(frame.path())
                continue
            for predecessor in predecessors:
                # zero-cost cycles can make the predecessor graph loop back on itself
                if not self._on_chain(predecessor, frame):
                    stack.append(_PathFrame(predecessor, frame))
        return frozenset(paths)

    def _on_chain(self, node: T, frame: "_PathFrame") -> bool:
        """
        Whether ``node`` is already on the chain from ``frame`` back to the target.

        Distances never decrease along the chain towards the target, and a node can
        only reappear through zero-cost edges, so only the frames at the same
        distance as ``node`` need checking.
        """
        distance = self.distance(node)
        while frame is not None and self.distance(frame.node) == distance:
            if frame.node == node:
                return True
            frame = frame.parent
        return False

    def shortest_paths_to_goals(self) -> Optional[FrozenSet[Tuple[T, ...]]]:
        """
        The union of ``shortest_paths(goal)`` over every reached goal, or None if no
        goal was reached.
        """
        if not self.reached_goals:
            return None
        paths: Set[Tuple[T, ...]] = set()
        for goal in self.reached_goals:
            paths |= self.shortest_paths(goal)
        return frozenset(paths)


@dataclass(frozen=True)
class _PathFrame:
    """
    A stack frame of the traversal in ``shortest_paths``. The chain of parents leads
    back to the target node.
    """

    node: object
    parent: Optional["_PathFrame"]

    def path(self) -> tuple:
        result = []
        frame = self
        while frame is not None:
            result.append(frame.node)
            frame = frame.parent
        return tuple(result)


class MultiPathSearcher(SearchCore[T]):
    """
    Variant of A* (or Dijkstra's algorithm) that finds every shortest path, and with
    A*, every nearest goal.

    Rather than stopping at the first goal, the search keeps polling the frontier
    until the remaining entries are all worse than the cost of the nearest goal.
    Edges that tie the best known distance to a node are recorded as additional
    predecessors.
    """

    def __init__(self, graph_spec, start, goals=None):
        super().__init__(graph_spec, start, goals)
        # dicts with None values serve as insertion-ordered sets
        self.came_from: Dict[T, Dict[T, None]] = {}
        self.reached_goals: Dict[T, None] = {}

    def search_loop(self):
        best_cost = None
        while self.frontier:
            entry = self.frontier.poll()
            if best_cost is not None and best_cost < entry.priority:
                break
            current = entry.node
            if self.is_goal(current):
                self.reached_goals[current] = None
                # keep going to find all the paths and goals tied with this one
                best_cost = self.distance(current)
                continue
            for next_node, alt_cost in self.relax_candidates(current):
                next_distance = self.distance(next_node)
                if alt_cost > next_distance:
                    continue
                if alt_cost == next_distance:
                    # an alternative path of the same cost; the node is already queued
                    self.came_from[next_node][current] = None
                    continue
                self.cost_so_far[next_node] = alt_cost
                # the old predecessors are on worse paths
                self.came_from[next_node] = {current: None}
                self.frontier.offer(
                    next_node, alt_cost + self.compute_heuristic(next_node)
                )

    def complete(self) -> CompletedMultiPathSearch[T]:
        return CompletedMultiPathSearch(
            start=self.start,
            goals=self.goals,
            num_nodes_examined=self.num_nodes_examined,
            cost_so_far=frozendict(self.cost_so_far),
            came_from=frozendict(
                (node, tuple(predecessors))
                for node, predecessors in self.came_from.items()
            ),
            reached_goals=tuple(self.reached_goals),
        )
