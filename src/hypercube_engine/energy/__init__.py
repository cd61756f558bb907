"""Scalar objectives over cube states.

The randomized solver minimizes one of these; `unsolvedness_energy` is the default.
"""

from .energies import (
    displacement_energy,
    misplaced_count,
    unsolvedness_energy,
)

__all__ = [
    "unsolvedness_energy",
    "displacement_energy",
    "misplaced_count",
]
