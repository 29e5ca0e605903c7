from SmallTSP.core import SmallTSP, build_report
from SmallTSP.parsing import MatrixParseError, load_matrix, parse_matrix
from SmallTSP.solvers import (
    AlgorithmResult,
    AnnealingSchedule,
    BaseSolver,
    SOLVER_FAMILIES,
    SOLVER_REGISTRY,
    SOLVER_SPECS,
    compute_tour_cost,
    format_tour,
    get_solver,
)
from SmallTSP.utils import DisjointSetForest, TourInvariantError, reconstruct_cycle, rotate_cycle
from SmallTSP.utils.taxonomy import AlgorithmFamily, Method

__all__ = [
    "SmallTSP",
    "AlgorithmResult",
    "AlgorithmFamily",
    "AnnealingSchedule",
    "BaseSolver",
    "DisjointSetForest",
    "MatrixParseError",
    "Method",
    "SOLVER_FAMILIES",
    "SOLVER_REGISTRY",
    "SOLVER_SPECS",
    "TourInvariantError",
    "build_report",
    "compute_tour_cost",
    "format_tour",
    "get_solver",
    "load_matrix",
    "parse_matrix",
    "reconstruct_cycle",
    "rotate_cycle",
]
