from .base import Solver, SolveResult, Tour, tour_length

__all__ = [
    "Solver",
    "SolveResult",
    "Tour",
    "tour_length",
]
