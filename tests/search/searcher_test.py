import math
import unittest

from frozendict import frozendict

import graphpaths as gp

from .utils import SCENARIO_ROWS, DictGraphSpec, grid_graph_spec, loc


class TwoPhaseTest(unittest.TestCase):
    def test_run_only_once(self):
        for searcher_type in (gp.search.SinglePathSearcher, gp.search.MultiPathSearcher):
            searcher = searcher_type(grid_graph_spec(SCENARIO_ROWS), loc(1, 3))
            completed = searcher.run()
            self.assertIsInstance(completed, gp.search.CompletedSearch)
            with self.assertRaises(RuntimeError):
                searcher.run()

    def test_completed_state_is_immutable(self):
        searcher = gp.search.MultiPathSearcher(
            grid_graph_spec(SCENARIO_ROWS), loc(1, 3), {loc(2, 6)}
        )
        completed = searcher.run()
        self.assertIsInstance(completed.cost_so_far, frozendict)
        self.assertIsInstance(completed.came_from, frozendict)
        with self.assertRaises(AttributeError):
            completed.reached_goals = ()
        with self.assertRaises(TypeError):
            completed.cost_so_far[loc(0, 0)] = 0

    def test_bad_arguments_raise_before_searching(self):
        graph_spec = DictGraphSpec({"s": {"t": 1}})
        for searcher_type in (gp.search.SinglePathSearcher, gp.search.MultiPathSearcher):
            with self.assertRaises(gp.InvalidSearchArgumentError):
                searcher_type(None, "s")
            with self.assertRaises(gp.InvalidSearchArgumentError):
                searcher_type(graph_spec, None)
            with self.assertRaises(gp.InvalidSearchArgumentError):
                searcher_type(graph_spec, "s", [])
            with self.assertRaises(gp.InvalidSearchArgumentError):
                searcher_type(graph_spec, "s", ["t", None])
        self.assertEqual(graph_spec.cost_calls, [])

    def test_initial_state(self):
        searcher = gp.search.SinglePathSearcher(DictGraphSpec({}), "s")
        self.assertEqual(searcher.num_nodes_examined, 1)
        self.assertEqual(searcher.distance("s"), 0)
        self.assertEqual(searcher.distance("t"), math.inf)
        self.assertEqual(len(searcher.frontier), 1)


class SearchCoreHelpersTest(unittest.TestCase):
    def test_heuristic_is_minimum_over_goals(self):
        graph_spec = DictGraphSpec({}, heuristic=lambda a, b: {"g1": 7, "g2": 3}[b])
        searcher = gp.search.SinglePathSearcher(graph_spec, "s", {"g1", "g2"})
        self.assertEqual(searcher.compute_heuristic("s"), 3)

    def test_no_goals_means_no_heuristic(self):
        graph_spec = DictGraphSpec({}, heuristic=lambda a, b: 100)
        searcher = gp.search.SinglePathSearcher(graph_spec, "s")
        self.assertEqual(searcher.compute_heuristic("s"), 0)
        self.assertFalse(searcher.is_goal("s"))

    def test_is_goal(self):
        searcher = gp.search.MultiPathSearcher(DictGraphSpec({}), "s", {"g"})
        self.assertTrue(searcher.is_goal("g"))
        self.assertFalse(searcher.is_goal("s"))


class EdgeCaseTest(unittest.TestCase):
    def test_later_improvement_is_found(self):
        # b is first reached at cost 5, then improved to 2 through a
        graph_spec = DictGraphSpec(
            {
                "s": {"a": 1, "b": 5, "t": 4},
                "a": {"b": 1},
                "b": {"t": 1},
            }
        )
        for strategy in (gp.AStar, gp.AStarMultiPath):
            result = strategy(graph_spec).search_for("s", "t")
            self.assertEqual(result.shortest_path_cost(), 3)
            self.assertEqual(result.shortest_path(), ("s", "a", "b", "t"))
        result = gp.AStarMultiPath(graph_spec).search_for("s", "t")
        self.assertEqual(result.shortest_paths(), {("s", "a", "b", "t")})
        result = gp.DijkstraMultiPath(graph_spec).search("s")
        self.assertEqual(result.shortest_paths("b"), {("s", "a", "b")})

    def test_infinite_cost_is_no_edge(self):
        graph_spec = DictGraphSpec({"s": {"a": math.inf}})
        result = gp.Dijkstra(graph_spec).search("s")
        self.assertEqual(result.reachable_nodes(), frozenset())
        self.assertIsNone(result.shortest_path("a"))
        self.assertEqual(result.shortest_path_cost("a"), math.inf)
        self.assertEqual(result.num_nodes_examined, 2)

    def test_overflowing_distance_is_unreachable(self):
        # each edge is finite, but their sum is not
        graph_spec = DictGraphSpec({"s": {"a": 1e308}, "a": {"b": 1e308, "c": 1}})
        for strategy in (gp.Dijkstra, gp.DijkstraMultiPath):
            result = strategy(graph_spec).search("s")
            self.assertEqual(result.reachable_nodes(), {"a", "c"})
            self.assertEqual(result.shortest_path_cost("b"), math.inf)
            self.assertIsNone(result.shortest_path("b"))
        result = gp.DijkstraMultiPath(graph_spec).search("s")
        self.assertIsNone(result.shortest_paths("b"))
        self.assertEqual(result.shortest_paths("c"), {("s", "a", "c")})
        result = gp.AStarMultiPath(graph_spec).search_for("s", "b")
        self.assertIsNone(result.reached_goals)
        self.assertEqual(result.shortest_path_cost(), math.inf)

    def test_zero_cost_cycle(self):
        graph_spec = DictGraphSpec(
            {
                "s": {"a": 1, "b": 1},
                "a": {"b": 0, "t": 1},
                "b": {"a": 0, "s": 0, "t": 1},
            }
        )
        result = gp.DijkstraMultiPath(graph_spec).search("s")
        self.assertEqual(result.shortest_path_cost("t"), 2)
        self.assertEqual(
            result.shortest_paths("t"),
            {
                ("s", "a", "t"),
                ("s", "b", "t"),
                ("s", "a", "b", "t"),
                ("s", "b", "a", "t"),
            },
        )
        self.assertEqual(result.shortest_path("s"), ("s",))
        self.assertNotIn("s", result.reachable_nodes())

    def test_graph_spec_errors_propagate(self):
        class BrokenGraphSpec(gp.GraphSpec):
            def neighbors(self, node):
                return [node + 1]

            def cost(self, a, b):
                raise KeyError(b)

        for strategy in (gp.Dijkstra, gp.DijkstraMultiPath):
            with self.assertRaises(KeyError):
                strategy(BrokenGraphSpec()).search(0)

    def test_numbers_of_nodes_examined(self):
        # every edge examined counts, plus 1 for the start node
        graph_spec = DictGraphSpec({"s": {"a": 1, "b": 2}, "a": {"b": 1}})
        self.assertEqual(gp.Dijkstra(graph_spec).search("s").num_nodes_examined, 4)

    def test_single_path_stops_at_first_goal(self):
        graph_spec = DictGraphSpec({"s": {"a": 1, "b": 1}, "a": {"c": 1}})
        result = gp.AStar(graph_spec).search("s", {"a", "b"})
        self.assertIn(result.reached_goal, {"a", "b"})
        self.assertEqual(result.shortest_path_cost(), 1)
        result = gp.AStarMultiPath(graph_spec).search("s", {"a", "b"})
        self.assertEqual(result.reached_goals, {"a", "b"})
        self.assertEqual(result.shortest_paths(), {("s", "a"), ("s", "b")})

    def test_tuple_nodes(self):
        graph_spec = DictGraphSpec({(0, 0): {(0, 1): 2}, (0, 1): {(1, 1): 2}})
        result = gp.AStar(graph_spec).search_for((0, 0), (1, 1))
        self.assertEqual(result.shortest_path(), ((0, 0), (0, 1), (1, 1)))
        self.assertEqual(result.shortest_path_cost(), 4)


class CountingNode:
    """
    A node that counts how often it is compared for equality.
    """

    comparisons = 0

    def __init__(self, index):
        self.index = index

    def __eq__(self, other):
        CountingNode.comparisons += 1
        return isinstance(other, CountingNode) and self.index == other.index

    def __hash__(self):
        return hash(self.index)

    def __repr__(self):
        return f"CountingNode({self.index})"


class LongLineGraphSpec(gp.GraphSpec):
    def __init__(self, length):
        self.nodes = [CountingNode(i) for i in range(length)]

    def neighbors(self, node):
        if node.index + 1 < len(self.nodes):
            return [self.nodes[node.index + 1]]
        return []

    def cost(self, a, b):
        return 1


class PathReconstructionTest(unittest.TestCase):
    def test_long_path_is_rebuilt_in_linear_time(self):
        length = 5000
        graph_spec = LongLineGraphSpec(length)
        result = gp.DijkstraMultiPath(graph_spec).search(graph_spec.nodes[0])
        CountingNode.comparisons = 0
        paths = result.shortest_paths(graph_spec.nodes[-1])
        # checking every frame of the chain for cycles would take ~length ** 2 / 2
        self.assertLess(CountingNode.comparisons, length)
        self.assertEqual(paths, {tuple(graph_spec.nodes)})

    def test_zero_cost_cycle_far_from_start(self):
        edges = {i: {i + 1: 1} for i in range(100)}
        edges[100] = {"x": 0, "y": 0}
        edges["x"] = {"y": 0, 101: 1}
        edges["y"] = {"x": 0, 101: 1}
        result = gp.DijkstraMultiPath(DictGraphSpec(edges)).search(0)
        prefix = tuple(range(101))
        self.assertEqual(
            result.shortest_paths(101),
            {
                prefix + ("x", 101),
                prefix + ("y", 101),
                prefix + ("x", "y", 101),
                prefix + ("y", "x", 101),
            },
        )


class ResultViewTest(unittest.TestCase):
    def setUp(self):
        self.graph_spec = grid_graph_spec(SCENARIO_ROWS)
        self.start = loc(1, 3)
        self.goals = {loc(2, 6), loc(1, 1)}

    def test_families_never_overlap(self):
        dijkstra_results = [
            gp.Dijkstra(self.graph_spec).search(self.start),
            gp.DijkstraMultiPath(self.graph_spec).search(self.start),
        ]
        astar_results = [
            gp.AStar(self.graph_spec).search(self.start, self.goals),
            gp.AStarMultiPath(self.graph_spec).search(self.start, self.goals),
        ]
        for result in dijkstra_results:
            self.assertIsInstance(result, gp.DijkstraSearchResult)
            self.assertNotIsInstance(result, gp.AStarSearchResult)
            self.assertFalse(hasattr(result, "reached_goal"))
        for result in astar_results:
            self.assertIsInstance(result, gp.AStarSearchResult)
            self.assertNotIsInstance(result, gp.DijkstraSearchResult)
            self.assertFalse(hasattr(result, "reachable_nodes"))

    def test_single_path_results_have_no_multi_path_accessors(self):
        self.assertNotIsInstance(
            gp.Dijkstra(self.graph_spec).search(self.start), gp.DijkstraMultiPathResult
        )
        result = gp.AStar(self.graph_spec).search(self.start, self.goals)
        self.assertNotIsInstance(result, gp.AStarMultiPathResult)
        self.assertFalse(hasattr(result, "shortest_paths"))

    def test_repr(self):
        result = gp.AStar(self.graph_spec).search(self.start, self.goals)
        self.assertEqual(repr(result), "AStarSearchResult(start=(1, 3))")
