from __future__ import annotations

from typing import List, Tuple

import numpy as np

from SmallTSP.solvers.base import AlgorithmResult, BaseSolver, check_start, compute_tour_cost, current_time
from SmallTSP.utils.cycles import reconstruct_cycle, rotate_cycle
from SmallTSP.utils.disjoint_set import DisjointSetForest
from SmallTSP.utils.taxonomy import AlgorithmFamily, Method


def sorted_edges(dist_matrix: np.ndarray) -> List[Tuple[int, int, float]]:
    """All ``(i, j, w)`` with ``i < j``, cheapest first; ties keep (i, j) order."""
    n = dist_matrix.shape[0]
    edges = [(i, j, float(dist_matrix[i, j])) for i in range(n) for j in range(i + 1, n)]
    return sorted(edges, key=lambda edge: edge[2])


class GreedyEdgeSolver(BaseSolver):
    """Restricted Kruskal: take the cheapest edges that keep every degree <= 2
    and do not close a cycle until the final, tour-closing edge."""

    name = Method.GREEDY.value
    family = AlgorithmFamily.HEURISTIC
    requires_start = True

    def solve(self, graph: np.ndarray, start: int = 0) -> AlgorithmResult:
        dist_matrix = np.asarray(graph, dtype=float)
        start_time = current_time()
        n = dist_matrix.shape[0]
        check_start(n, start)

        if n == 2:
            path = [start, 1 - start, start]
            return AlgorithmResult(
                name=self.name,
                path=path,
                cost=compute_tour_cost(dist_matrix, path),
                elapsed=current_time() - start_time,
                status="complete",
                iterations=1,
                metadata={"accepted_edges": [(0, 1)], "edges_total": 1},
            )

        edges = sorted_edges(dist_matrix)
        degree = [0] * n
        forest = DisjointSetForest(n)
        accepted: List[Tuple[int, int]] = []
        iterations = 0

        for u, v, _ in edges:
            iterations += 1
            if degree[u] >= 2 or degree[v] >= 2:
                continue
            closes_cycle = forest.connected(u, v)
            if closes_cycle and len(accepted) != n - 1:
                continue
            degree[u] += 1
            degree[v] += 1
            accepted.append((u, v))
            if not closes_cycle:
                forest.union(u, v)
            if len(accepted) == n:
                break

        cycle = reconstruct_cycle(accepted, n)
        path = rotate_cycle(cycle, start)
        return AlgorithmResult(
            name=self.name,
            path=path,
            cost=compute_tour_cost(dist_matrix, path),
            elapsed=current_time() - start_time,
            status="complete",
            iterations=iterations,
            metadata={"accepted_edges": accepted, "edges_total": len(edges)},
        )


__all__ = ["GreedyEdgeSolver", "sorted_edges"]
