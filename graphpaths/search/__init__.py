from .frontier import Frontier, FrontierEntry
from .multi_path_searcher import CompletedMultiPathSearch, MultiPathSearcher
from .search_core import CompletedSearch, InvalidSearchArgumentError, SearchCore
from .search_result import (
    AStarMultiPathResult,
    AStarSearchResult,
    DijkstraMultiPathResult,
    DijkstraSearchResult,
)
from .search_strategy import (
    AStar,
    AStarMultiPath,
    Dijkstra,
    DijkstraMultiPath,
    PathSearchStrategy,
)
from .single_path_searcher import CompletedSinglePathSearch, SinglePathSearcher
