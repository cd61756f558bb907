from __future__ import annotations

import math
import random

from hypercube_engine.core.engine import Cube
from hypercube_engine.core.rotation import Rotation


def _visit_entropy(visit_counts: dict[str, int]) -> float:
    """Shannon entropy (bits) of state visit distribution."""
    total = sum(visit_counts.values())
    if total == 0:
        return 0.0
    h = 0.0
    for c in visit_counts.values():
        p = c / total
        h -= p * math.log2(p)
    return h


def explore_random(dims: int, steps: int, seed: int = 0, scramble: int = 0) -> dict:
    """Unguided random walk over rotations, for state-space diagnostics.

    `scramble` random rotations are applied first (drawn from the same seed) and
    are not counted as walk steps.
    """
    if steps < 0:
        raise ValueError("steps must be >= 0")

    rng = random.Random(seed)
    cube = Cube(dims)
    cube.shuffle(scramble, rng)

    first_seen_step: dict[str, int] = {}
    visit_counts: dict[str, int] = {}

    h0 = cube.hash()
    first_seen_step[h0] = 0
    visit_counts[h0] = 1

    first_repeat_step: int | None = None
    cycle_length: int | None = None
    solved_visits = 1 if cube.is_solved() else 0
    energies = [cube.unsolvedness()]

    for step in range(1, steps + 1):
        cube.rotate(Rotation.random(dims, rng))
        energies.append(cube.unsolvedness())
        if cube.is_solved():
            solved_visits += 1

        h = cube.hash()
        visit_counts[h] = visit_counts.get(h, 0) + 1
        if first_repeat_step is None and h in first_seen_step:
            first_repeat_step = step
            cycle_length = step - first_seen_step[h]
        else:
            first_seen_step.setdefault(h, step)

    return {
        "dims": dims,
        "steps": steps,
        "seed": seed,
        "scramble": scramble,
        "first_repeat_step": first_repeat_step,
        "estimated_cycle_length": cycle_length,
        "unique_state_count": len(first_seen_step),
        "entropy_bits": _visit_entropy(visit_counts),
        "solved_visits": solved_visits,
        "energies": energies,
        "min_energy": min(energies),
        "final_hash": cube.hash(),
    }
