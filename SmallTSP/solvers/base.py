from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Type

import numpy as np

from SmallTSP.utils.taxonomy import AlgorithmFamily


@dataclass
class AlgorithmResult:
    """Container capturing the outcome of running a TSP solver."""

    name: str
    path: List[int]
    cost: float
    elapsed: float
    status: str
    iterations: int
    steps: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)


def current_time() -> float:
    return time.perf_counter()


def compute_tour_cost(dist_matrix: np.ndarray, tour: Sequence[int]) -> float:
    """Sum the edge weights along a tour that is already closed (first == last)."""
    cost = 0.0
    for k in range(len(tour) - 1):
        cost += float(dist_matrix[tour[k], tour[k + 1]])
    return cost


def check_start(n: int, start: int) -> None:
    if not 0 <= start < n:
        raise ValueError(f"Start node {start} is outside [0, {n}).")


def format_tour(dist_matrix: np.ndarray, tour: Sequence[int]) -> str:
    """Render a tour with 1-based labels, followed by its total length."""
    if not tour:
        return ""
    labels = " → ".join(str(node + 1) for node in tour)
    total = compute_tour_cost(dist_matrix, tour) if len(tour) > 1 else 0.0
    return f"{labels}\nTotal length: {total:.2f}"


@dataclass(frozen=True)
class SolverSpec:
    """Metadata describing a solver implementation."""

    name: str
    cls: Type["BaseSolver"]
    family: AlgorithmFamily
    requires_start: bool = True


class BaseSolver:
    """Common interface for SmallTSP solvers."""

    name: str
    family: AlgorithmFamily
    requires_start: bool = True

    def solve(self, graph: np.ndarray, **kwargs: Any) -> AlgorithmResult:  # noqa: D401
        """Solve a TSP instance represented as a weight matrix."""
        raise NotImplementedError

    def __call__(self, graph: np.ndarray, **kwargs: Any) -> AlgorithmResult:
        return self.solve(graph, **kwargs)


__all__ = [
    "AlgorithmResult",
    "AlgorithmFamily",
    "BaseSolver",
    "SolverSpec",
    "check_start",
    "compute_tour_cost",
    "current_time",
    "format_tour",
]
