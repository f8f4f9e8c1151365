from . import benchmark_grids, grid
