"""
Timing experiment comparing the four search strategies on the benchmark grids.

Every strategy searches from each start location on the grid. The A* strategies
search for the grid's goals, while the Dijkstra strategies explore the whole grid.

Usage:
    python experiments/path_search_timing.py [--sizes SMALL MEDIUM ...] [--repeats N]
"""

import argparse
import json
import time

import numpy as np

import graphpaths as gp
from graphpaths.examples import benchmark_grids, grid

STRATEGIES = {
    "AStar": gp.AStar,
    "AStarMultiPath": gp.AStarMultiPath,
    "Dijkstra": gp.Dijkstra,
    "DijkstraMultiPath": gp.DijkstraMultiPath,
}


def run_once(strategy, starts, goals):
    if isinstance(strategy, (gp.AStar, gp.AStarMultiPath)):
        return [strategy.search(start, goals) for start in starts]
    return [strategy.search(start) for start in starts]


def time_strategy(name, size, repeats):
    g = size.grid()
    starts, goals = benchmark_grids.grid_search_parameters(g)
    strategy = STRATEGIES[name](grid.GridGraphSpec(g))
    timings = []
    for _ in range(repeats):
        start_time = time.time()
        results = run_once(strategy, starts, goals)
        timings.append(time.time() - start_time)
    examined = [result.num_nodes_examined for result in results]
    print(
        f"  {name:<18} mean={np.mean(timings) * 1000:.3f}ms"
        f"  std={np.std(timings) * 1000:.3f}ms"
        f"  nodes_examined={examined}"
    )
    return {
        "mean_seconds": float(np.mean(timings)),
        "std_seconds": float(np.std(timings)),
        "num_nodes_examined": examined,
    }


def main():
    parser = argparse.ArgumentParser(description="Path search timing")
    parser.add_argument(
        "--sizes",
        nargs="+",
        default=[size.name for size in benchmark_grids.GridSize],
        choices=[size.name for size in benchmark_grids.GridSize],
        help="grid sizes to time (default: all)",
    )
    parser.add_argument(
        "--repeats", type=int, default=100, help="runs per strategy (default: 100)"
    )
    parser.add_argument(
        "--output",
        default="experiments/path_search_timing_results.json",
        help="where to write the results",
    )
    args = parser.parse_args()

    results = {}
    for size_name in args.sizes:
        size = benchmark_grids.GridSize[size_name]
        print("=" * 60)
        print(f"{size_name} grid, repeats={args.repeats}")
        print(size.grid())
        print("=" * 60)
        results[size_name] = {
            name: time_strategy(name, size, args.repeats) for name in STRATEGIES
        }

    with open(args.output, "w") as f:
        json.dump({"repeats": args.repeats, "sizes": results}, f, indent=2)
    print(f"\nResults written to {args.output}")


if __name__ == "__main__":
    main()
