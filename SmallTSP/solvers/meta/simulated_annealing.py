from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import List

import numpy as np

from SmallTSP.solvers.base import AlgorithmResult, BaseSolver, check_start, compute_tour_cost, current_time
from SmallTSP.utils.taxonomy import AlgorithmFamily, Method

DEFAULT_SEED = 12345


@dataclass(frozen=True)
class AnnealingSchedule:
    """Geometric cooling: ``T <- T * cooling_rate`` once per iteration."""

    initial_temp: float = 10000.0
    cooling_rate: float = 0.995
    max_iter: int = 100000
    min_temp: float = 1e-8


@dataclass
class AnnealingState:
    current_path: List[int]
    current_cost: float
    best_path: List[int]
    best_cost: float
    temperature: float
    iterations: int = 0

    def commit(self, candidate: List[int], cost: float) -> bool:
        """Make ``candidate`` the current tour; return True if it is a new best."""
        self.current_path = candidate
        self.current_cost = cost
        if cost < self.best_cost:
            self.best_path = list(candidate)
            self.best_cost = cost
            return True
        return False


def random_initial_tour(n: int, start: int, rng: np.random.Generator) -> List[int]:
    """Closed tour anchored at ``start`` with the remaining nodes shuffled."""
    middle = [node for node in range(n) if node != start]
    return [start] + [int(node) for node in rng.permutation(middle)] + [start]


class SimulatedAnnealingSolver(BaseSolver):
    """Swap-move simulated annealing with the Metropolis acceptance rule.

    Every random draw comes from one generator seeded with ``seed``, so the
    returned tour, iteration count and trace are a function of
    ``(graph, start, seed, schedule)`` alone.
    """

    name = Method.SIMULATED_ANNEALING.value
    family = AlgorithmFamily.METAHEURISTIC
    requires_start = True

    def solve(
        self,
        graph: np.ndarray,
        start: int = 0,
        seed: int = DEFAULT_SEED,
        schedule: AnnealingSchedule | None = None,
    ) -> AlgorithmResult:
        dist_matrix = np.asarray(graph, dtype=float)
        start_time = current_time()
        n = dist_matrix.shape[0]
        check_start(n, start)
        schedule = schedule or AnnealingSchedule()
        rng = np.random.default_rng(seed)

        if n == 2:
            # No interior positions to swap: the only tour is returned without searching.
            path = [start, 1 - start, start]
            cost = compute_tour_cost(dist_matrix, path)
            return AlgorithmResult(
                name=self.name,
                path=path,
                cost=cost,
                elapsed=current_time() - start_time,
                status="complete",
                iterations=0,
                steps=[f"Initial distance: {cost:.2f}", f"Final best distance: {cost:.2f}"],
                metadata={
                    "seed": seed,
                    "accepted": 0,
                    "improved": 0,
                    "initial_cost": cost,
                    "final_temp": schedule.initial_temp,
                    "schedule": asdict(schedule),
                },
            )

        initial = random_initial_tour(n, start, rng)
        initial_cost = compute_tour_cost(dist_matrix, initial)
        state = AnnealingState(
            current_path=initial,
            current_cost=initial_cost,
            best_path=list(initial),
            best_cost=initial_cost,
            temperature=schedule.initial_temp,
        )
        steps = [f"Initial distance: {initial_cost:.2f}"]
        accepted = 0
        improved = 0

        for _ in range(schedule.max_iter):
            state.iterations += 1
            candidate = list(state.current_path)
            i, j = (int(pos) for pos in rng.integers(1, n, size=2))
            candidate[i], candidate[j] = candidate[j], candidate[i]

            candidate_cost = compute_tour_cost(dist_matrix, candidate)
            delta = candidate_cost - state.current_cost
            if delta < 0 or math.exp(-delta / state.temperature) > rng.random():
                accepted += 1
                if state.commit(candidate, candidate_cost):
                    improved += 1
                    steps.append(f"New best at iteration {state.iterations}: {state.best_cost:.2f}")

            state.temperature *= schedule.cooling_rate
            if state.temperature < schedule.min_temp:
                break

        steps.append(f"Final best distance: {state.best_cost:.2f}")
        return AlgorithmResult(
            name=self.name,
            path=state.best_path,
            cost=state.best_cost,
            elapsed=current_time() - start_time,
            status="complete",
            iterations=state.iterations,
            steps=steps,
            metadata={
                "seed": seed,
                "accepted": accepted,
                "improved": improved,
                "initial_cost": initial_cost,
                "final_temp": state.temperature,
                "schedule": asdict(schedule),
            },
        )


__all__ = [
    "AnnealingSchedule",
    "AnnealingState",
    "DEFAULT_SEED",
    "SimulatedAnnealingSolver",
    "random_initial_tour",
]
