from __future__ import annotations

import numpy as np

from SmallTSP.solvers.base import AlgorithmResult, BaseSolver, compute_tour_cost, current_time
from SmallTSP.utils.taxonomy import AlgorithmFamily, Method


class NearestNeighborSolver(BaseSolver):
    """Nearest-neighbour construction from a randomly drawn start node.

    The start is not chosen by the caller. Pass ``rng`` to make a run
    reproducible; without it an unseeded generator is used.
    """

    name = Method.NEAREST_NEIGHBOR.value
    family = AlgorithmFamily.HEURISTIC
    requires_start = False

    def solve(self, graph: np.ndarray, rng: np.random.Generator | None = None) -> AlgorithmResult:
        dist_matrix = np.asarray(graph, dtype=float)
        start_time = current_time()
        n = dist_matrix.shape[0]
        if rng is None:
            rng = np.random.default_rng()

        start = int(rng.integers(0, n))
        visited = [False] * n
        visited[start] = True
        path = [start]
        steps = [f"Start node: {start + 1}"]
        iterations = 0
        current = start

        for step in range(1, n):
            min_dist = float("inf")
            next_city = -1
            for city in range(n):
                iterations += 1
                if not visited[city] and dist_matrix[current, city] < min_dist:
                    min_dist = float(dist_matrix[current, city])
                    next_city = city
            visited[next_city] = True
            path.append(next_city)
            steps.append(f"Step {step}: {current + 1} → {next_city + 1} (Distance = {min_dist:.2f})")
            current = next_city

        path.append(start)
        steps.append(f"Return: {current + 1} → {start + 1} (Distance = {float(dist_matrix[current, start]):.2f})")
        return AlgorithmResult(
            name=self.name,
            path=path,
            cost=compute_tour_cost(dist_matrix, path),
            elapsed=current_time() - start_time,
            status="complete",
            iterations=iterations,
            steps=steps,
            metadata={"start": start},
        )


__all__ = ["NearestNeighborSolver"]
