from graphpaths.graph_spec.graph_spec import GraphSpec, path_cost
from graphpaths.graph_spec.graph_spec_transformer import (
    FilterEdgesGraphSpec,
    WeightedHeuristicGraphSpec,
)
from graphpaths.search.search_core import InvalidSearchArgumentError
from graphpaths.search.search_result import (
    AStarMultiPathResult,
    AStarSearchResult,
    DijkstraMultiPathResult,
    DijkstraSearchResult,
)
from graphpaths.search.search_strategy import (
    AStar,
    AStarMultiPath,
    Dijkstra,
    DijkstraMultiPath,
    PathSearchStrategy,
)
from graphpaths.utils.logging import print_paths, print_search_result

from . import examples, search
