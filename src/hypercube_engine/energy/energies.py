from __future__ import annotations

from hypercube_engine.core.engine import Cube


def unsolvedness_energy(cube: Cube) -> int:
    """Sum of per-point incorrectness (L1 displacement + 10 per wrong orientation).

    0 for a freshly built cube. Center points with a swapped orientation still
    count, so this can be positive while `cube.is_solved()` is true.
    """
    return cube.unsolvedness()


def displacement_energy(cube: Cube) -> int:
    """Position-only variant: total L1 distance of points from their homes.

    - Ignores orientation entirely.
    - Non-mutating.
    """
    return sum(p.dist_from_original() for p in cube.points)


def misplaced_count(cube: Cube) -> int:
    """Number of points failing the per-point solved test (centers exempt from orientation)."""
    return sum(1 for p in cube.points if not p.is_solved())
