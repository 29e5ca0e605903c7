from __future__ import annotations

from enum import Enum


class AlgorithmFamily(str, Enum):
    HEURISTIC = "heuristic"
    METAHEURISTIC = "metaheuristic"


class Method(str, Enum):
    GREEDY = "greedy"
    NEAREST_NEIGHBOR = "nearest_neighbor"
    SIMULATED_ANNEALING = "simulated_annealing"


__all__ = ["AlgorithmFamily", "Method"]
