from SmallTSP.solvers.meta.simulated_annealing import AnnealingSchedule, SimulatedAnnealingSolver

__all__ = [
    "AnnealingSchedule",
    "SimulatedAnnealingSolver",
]
