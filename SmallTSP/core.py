from __future__ import annotations

from typing import Any, Dict

import numpy as np

from SmallTSP.solvers import AlgorithmResult, format_tour, get_solver
from SmallTSP.solvers.meta.simulated_annealing import DEFAULT_SEED
from SmallTSP.utils.taxonomy import Method

COMPLEXITY_NOTES: Dict[Method, str] = {
    Method.GREEDY: "Time Complexity (iterations): count of edges examined",
    Method.NEAREST_NEIGHBOR: "Time Complexity (iterations): count of distance comparisons",
    Method.SIMULATED_ANNEALING: "Time Complexity (iterations): SA loop count",
}


class SmallTSP:
    """Single entry point: weight matrix + method -> tour, iteration count and trace."""

    def solve(
        self,
        graph: Any,
        method: Method | str = Method.GREEDY,
        start: int = 0,
        seed: int = DEFAULT_SEED,
        rng: np.random.Generator | None = None,
    ) -> AlgorithmResult:
        method = Method(method)
        dist_matrix = np.asarray(graph, dtype=float)
        if dist_matrix.ndim != 2 or dist_matrix.shape[0] != dist_matrix.shape[1]:
            raise ValueError(f"Weight matrix must be square, got shape {dist_matrix.shape}.")
        n = dist_matrix.shape[0]
        if n < 2:
            raise ValueError("At least two nodes are required.")

        solver = get_solver(method.value)
        if not solver.requires_start:
            return solver.solve(dist_matrix, rng=rng)
        if method is Method.SIMULATED_ANNEALING:
            return solver.solve(dist_matrix, start=start, seed=seed)
        return solver.solve(dist_matrix, start=start)


def build_report(graph: Any, result: AlgorithmResult) -> str:
    """Text summary written next to a solve: tour, iteration count and the step log."""
    dist_matrix = np.asarray(graph, dtype=float)
    lines = [format_tour(dist_matrix, result.path), f"Iterations: {result.iterations}"]
    method = Method(result.name)
    if method is Method.GREEDY:
        lines.append(COMPLEXITY_NOTES[method])
        lines.extend(result.steps)
    else:
        lines.extend(result.steps)
        lines.append(COMPLEXITY_NOTES[method])
    lines.append(f"Total iterations: {result.iterations:,}")
    return "\n".join(lines) + "\n"


__all__ = ["COMPLEXITY_NOTES", "SmallTSP", "build_report"]
