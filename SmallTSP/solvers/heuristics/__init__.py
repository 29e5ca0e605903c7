from SmallTSP.solvers.heuristics.greedy_edge import GreedyEdgeSolver
from SmallTSP.solvers.heuristics.nearest_neighbor import NearestNeighborSolver

__all__ = [
    "GreedyEdgeSolver",
    "NearestNeighborSolver",
]
