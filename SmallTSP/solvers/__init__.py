from __future__ import annotations

from SmallTSP.solvers.base import AlgorithmResult, BaseSolver, SolverSpec, compute_tour_cost, format_tour
from SmallTSP.solvers.heuristics import GreedyEdgeSolver, NearestNeighborSolver
from SmallTSP.solvers.meta import AnnealingSchedule, SimulatedAnnealingSolver
from SmallTSP.utils.taxonomy import AlgorithmFamily

SOLVER_SPECS: dict[str, SolverSpec] = {
    GreedyEdgeSolver.name: SolverSpec(
        name=GreedyEdgeSolver.name,
        cls=GreedyEdgeSolver,
        family=GreedyEdgeSolver.family,
        requires_start=GreedyEdgeSolver.requires_start,
    ),
    NearestNeighborSolver.name: SolverSpec(
        name=NearestNeighborSolver.name,
        cls=NearestNeighborSolver,
        family=NearestNeighborSolver.family,
        requires_start=NearestNeighborSolver.requires_start,
    ),
    SimulatedAnnealingSolver.name: SolverSpec(
        name=SimulatedAnnealingSolver.name,
        cls=SimulatedAnnealingSolver,
        family=SimulatedAnnealingSolver.family,
        requires_start=SimulatedAnnealingSolver.requires_start,
    ),
}

SOLVER_REGISTRY: dict[str, type[BaseSolver]] = {name: spec.cls for name, spec in SOLVER_SPECS.items()}
SOLVER_FAMILIES: dict[str, AlgorithmFamily] = {name: spec.family for name, spec in SOLVER_SPECS.items()}


def get_solver(name: str) -> BaseSolver:
    solver_cls = SOLVER_REGISTRY.get(name)
    if solver_cls is None:
        raise KeyError(f"Unknown solver: {name}")
    return solver_cls()


__all__ = [
    "AlgorithmResult",
    "AnnealingSchedule",
    "BaseSolver",
    "SOLVER_FAMILIES",
    "SOLVER_REGISTRY",
    "SOLVER_SPECS",
    "AlgorithmFamily",
    "compute_tour_cost",
    "format_tour",
    "get_solver",
    "GreedyEdgeSolver",
    "NearestNeighborSolver",
    "SimulatedAnnealingSolver",
]
