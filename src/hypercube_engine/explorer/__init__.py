"""hypercube_engine.explorer"""

from .random_walk import explore_random
from .solver import SolveResult, SolverConfig, accept_move, solve_cube

__all__ = [
    "explore_random",
    "solve_cube",
    "accept_move",
    "SolveResult",
    "SolverConfig",
]
