"""Hypercube Engine package."""

from .core.engine import Cube
from .core.rotation import Rotation, Side, parse_rotations
from .errors import HypercubeError, InvalidDimension, MalformedRotation
from .explorer.random_walk import explore_random
from .explorer.solver import SolveResult, SolverConfig

__all__ = [
    "Cube",
    "Rotation",
    "Side",
    "parse_rotations",
    "SolveResult",
    "SolverConfig",
    "explore_random",
    "HypercubeError",
    "InvalidDimension",
    "MalformedRotation",
]
