import heapq
import itertools
from dataclasses import dataclass, field
from typing import Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(order=True)
class FrontierEntry(Generic[T]):
    """
    Represents a node waiting in the frontier.

    :field priority: ``g(n) + h(n)`` for A*, or ``g(n)`` for Dijkstra.
    :field sequence: Insertion order, used to break ties between equal priorities.
    :field node: The node itself.
    """

    priority: float
    sequence: int
    node: T = field(compare=False)


class Frontier(Generic[T]):
    """
    A priority queue of nodes that avoids expanding a node with anything but its best
    known priority.

    A binary heap cannot efficiently decrease the priority of an entry, so instead a
    better entry for the same node is pushed alongside the old one, and a shadow map
    tracks the latest entry per node. The superseded entry stays in the heap and is
    eventually polled as a stale duplicate.
    """

    def __init__(self):
        self._heap: List[FrontierEntry[T]] = []
        self._entries: Dict[T, FrontierEntry[T]] = {}
        self._counter = itertools.count()

    def offer(self, node: T, priority: float) -> bool:
        """
        Adds the node unless it is already tracked with a better or equal priority.

        :return: True if a new entry was pushed.
        """
        existing = self._entries.get(node)
        if existing is not None and priority >= existing.priority:
            return False
        entry = FrontierEntry(priority, next(self._counter), node)
        self._entries[node] = entry
        heapq.heappush(self._heap, entry)
        return True

    def poll(self) -> Optional[FrontierEntry[T]]:
        """
        Removes and returns the entry with the lowest priority, or None if empty.
        The node is forgotten by the shadow map even if the entry was stale.
        """
        if not self._heap:
            return None
        entry = heapq.heappop(self._heap)
        self._entries.pop(entry.node, None)
        return entry

    def __len__(self):
        return len(self._heap)

    def __bool__(self):
        return bool(self._heap)

    def __repr__(self):
        return f"Frontier({sorted(self._heap)!r})"
