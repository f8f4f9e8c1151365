from .graph_spec import GraphSpec, path_cost
from .graph_spec_transformer import FilterEdgesGraphSpec, WeightedHeuristicGraphSpec
