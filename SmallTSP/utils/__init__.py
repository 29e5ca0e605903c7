from SmallTSP.utils.cycles import TourInvariantError, reconstruct_cycle, rotate_cycle
from SmallTSP.utils.disjoint_set import DisjointSetForest
from SmallTSP.utils.taxonomy import AlgorithmFamily, Method

__all__ = [
    "AlgorithmFamily",
    "DisjointSetForest",
    "Method",
    "TourInvariantError",
    "reconstruct_cycle",
    "rotate_cycle",
]
