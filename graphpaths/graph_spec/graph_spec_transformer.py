from abc import abstractmethod

from .graph_spec import GraphSpec


class FilterEdgesGraphSpec(GraphSpec):
    """
    Abstract class for graph specs that filter edges based on some criterion.
    Costs and heuristic values are delegated to the underlying graph spec.
    """

    def __init__(self, graph_spec: GraphSpec):
        self.graph_spec = graph_spec

    @abstractmethod
    def include_edge(self, a, b) -> bool:
        """
        Returns True if the edge from a to b should be included in the graph.
        """

    def neighbors(self, node):
        return [b for b in self.graph_spec.neighbors(node) if self.include_edge(node, b)]

    def cost(self, a, b):
        return self.graph_spec.cost(a, b)

    def heuristic(self, a, b):
        return self.graph_spec.heuristic(a, b)


class WeightedHeuristicGraphSpec(GraphSpec):
    """
    Scales the heuristic of the underlying graph spec by a constant factor, as in
    weighted A*. A weight above 1 makes the heuristic inadmissible, so A* is then no
    longer guaranteed to return optimal paths.

    :param graph_spec: The graph spec whose heuristic to scale.
    :param weight: The non-negative factor to multiply the heuristic by.
    """

    def __init__(self, graph_spec: GraphSpec, weight: float):
        if weight < 0:
            raise ValueError(f"Heuristic weight must be non-negative, got {weight}")
        self.graph_spec = graph_spec
        self.weight = weight

    def neighbors(self, node):
        return self.graph_spec.neighbors(node)

    def cost(self, a, b):
        return self.graph_spec.cost(a, b)

    def heuristic(self, a, b):
        return self.weight * self.graph_spec.heuristic(a, b)
